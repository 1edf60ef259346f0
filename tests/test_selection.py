from mandelbrot_explorer.domain.selection import DragSelection
from mandelbrot_explorer.domain.viewport import PixelRect


def test_drag_produces_normalised_rect():
    selection = DragSelection()
    selection.begin(40, 30)
    selection.update(50, 35)
    selection.update(10, 5)

    assert selection.active
    assert selection.rect == PixelRect(10, 5, 40, 30)
    assert selection.finish() == PixelRect(10, 5, 40, 30)
    assert not selection.active
    assert selection.rect is None


def test_click_without_drag_yields_nothing():
    selection = DragSelection()
    selection.begin(12, 12)
    assert selection.finish() is None


def test_line_selection_yields_nothing():
    selection = DragSelection()
    selection.begin(12, 12)
    selection.update(40, 12)
    assert selection.finish() is None


def test_second_press_keeps_anchor():
    selection = DragSelection()
    selection.begin(0, 0)
    selection.begin(100, 100)
    selection.update(10, 10)
    assert selection.finish() == PixelRect(0, 0, 10, 10)


def test_update_without_begin_is_ignored():
    selection = DragSelection()
    selection.update(10, 10)
    assert not selection.active
    assert selection.finish() is None


def test_cancel_drops_selection():
    selection = DragSelection()
    selection.begin(0, 0)
    selection.update(10, 10)
    selection.cancel()
    assert selection.finish() is None
