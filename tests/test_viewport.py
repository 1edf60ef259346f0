"""View window algebra: pixel mapping and rectangle zoom."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mandelbrot_explorer.domain.viewport import PixelRect, ViewWindow, pixel_to_plane


def test_default_window():
    window = ViewWindow.default()
    assert (window.x_start, window.x_end) == (-2.5, 1.0)
    assert (window.y_start, window.y_end) == (-1.0, 1.0)
    assert window.get_spans() == (3.5, 2.0)


@pytest.mark.parametrize(
    "bounds",
    [
        (1.0, 1.0, 0.0, 1.0),
        (1.0, 0.0, 0.0, 1.0),
        (0.0, 1.0, 0.5, 0.5),
        (0.0, 1.0, 1.0, -1.0),
    ],
)
def test_degenerate_or_inverted_window_rejected(bounds):
    with pytest.raises(ValueError):
        ViewWindow(*bounds)


def test_window_is_immutable():
    window = ViewWindow.default()
    with pytest.raises(AttributeError):
        window.x_start = 0.0  # type: ignore[misc]


def test_pixel_to_plane_corners():
    window = ViewWindow.default()
    assert pixel_to_plane(0, 0, window, 350, 200) == (-2.5, -1.0)
    assert pixel_to_plane(350, 200, window, 350, 200) == (1.0, 1.0)
    assert window.pixel_to_plane(250, 100, 350, 200) == (0.0, 0.0)


def test_from_two_points_normalises_corners():
    rect = PixelRect.from_two_points((30, 5), (10, 25))
    assert rect == PixelRect(left=10, top=5, right=30, bottom=25)
    assert (rect.width, rect.height) == (20, 20)
    assert not rect.is_empty


@pytest.mark.parametrize(
    "rect",
    [PixelRect(0, 0, 0, 10), PixelRect(0, 0, 10, 0), PixelRect(5, 5, 5, 5)],
)
def test_zero_area_rect_is_empty(rect):
    assert rect.is_empty


def test_full_raster_zoom_is_identity():
    window = ViewWindow.default()
    assert window.zoomed_to(PixelRect(0, 0, 640, 480), 640, 480) == window


sizes = st.integers(min_value=2, max_value=2048)


@st.composite
def raster_and_rect(draw):
    width = draw(sizes)
    height = draw(sizes)
    left = draw(st.integers(min_value=0, max_value=width - 1))
    right = draw(st.integers(min_value=left + 1, max_value=width))
    top = draw(st.integers(min_value=0, max_value=height - 1))
    bottom = draw(st.integers(min_value=top + 1, max_value=height))
    return width, height, PixelRect(left, top, right, bottom)


@given(raster_and_rect())
def test_zoom_stays_inside_old_window(case):
    width, height, rect = case
    old = ViewWindow.default()
    new = old.zoomed_to(rect, width, height)

    tol = 1e-12
    assert new.x_start >= old.x_start - tol
    assert new.x_end <= old.x_end + tol
    assert new.y_start >= old.y_start - tol
    assert new.y_end <= old.y_end + tol


@given(raster_and_rect())
def test_zoom_spans_scale_with_selection(case):
    width, height, rect = case
    old = ViewWindow.default()
    new = old.zoomed_to(rect, width, height)

    old_re, old_im = old.get_spans()
    new_re, new_im = new.get_spans()
    assert new_re == pytest.approx(old_re * rect.width / width)
    assert new_im == pytest.approx(old_im * rect.height / height)
