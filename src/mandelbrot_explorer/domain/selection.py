from __future__ import annotations

from typing import Optional

from mandelbrot_explorer.domain.viewport import PixelRect


class DragSelection:
    """Tracks a rectangle being dragged out with the mouse.

    Points are raster pixel coordinates. Nothing here knows about the
    windowing toolkit; the overlay feeds it converted positions.
    """

    def __init__(self) -> None:
        self._start: Optional[tuple[int, int]] = None
        self._end: Optional[tuple[int, int]] = None

    @property
    def active(self) -> bool:
        return self._start is not None

    @property
    def rect(self) -> Optional[PixelRect]:
        if self._start is None or self._end is None:
            return None
        return PixelRect.from_two_points(self._start, self._end)

    def begin(self, x: int, y: int) -> None:
        # a second press while dragging keeps the original anchor
        if self.active:
            return
        self._start = (x, y)
        self._end = (x, y)

    def update(self, x: int, y: int) -> None:
        if self.active:
            self._end = (x, y)

    def finish(self) -> Optional[PixelRect]:
        """End the drag; returns the selection only if it has positive area."""
        rect = self.rect
        self.cancel()
        if rect is None or rect.is_empty:
            return None
        return rect

    def cancel(self) -> None:
        self._start = None
        self._end = None
