from __future__ import annotations

from dataclasses import dataclass

from mandelbrot_explorer.config import (
    DEFAULT_X_END,
    DEFAULT_X_START,
    DEFAULT_Y_END,
    DEFAULT_Y_START,
)


@dataclass(frozen=True)
class PixelRect:
    """Rectangle in raster pixel coordinates, top-left origin."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_two_points(cls, a: tuple[int, int], b: tuple[int, int]) -> PixelRect:
        """Build a rect from two arbitrary drag endpoints."""
        (ax, ay), (bx, by) = a, b
        return cls(
            left=min(ax, bx), top=min(ay, by), right=max(ax, bx), bottom=max(ay, by)
        )

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class ViewWindow:
    x_start: float
    x_end: float
    y_start: float
    y_end: float

    def __post_init__(self) -> None:
        if not self.x_start < self.x_end:
            raise ValueError(
                f"inverted real range: [{self.x_start}, {self.x_end}]"
            )
        if not self.y_start < self.y_end:
            raise ValueError(
                f"inverted imaginary range: [{self.y_start}, {self.y_end}]"
            )

    @classmethod
    def default(cls) -> ViewWindow:
        return cls(
            x_start=DEFAULT_X_START,
            x_end=DEFAULT_X_END,
            y_start=DEFAULT_Y_START,
            y_end=DEFAULT_Y_END,
        )

    def get_spans(self) -> tuple[float, float]:
        """Return (re_span, im_span)."""
        return (self.x_end - self.x_start, self.y_end - self.y_start)

    def pixel_to_plane(
        self, px: float, py: float, width: int, height: int
    ) -> tuple[float, float]:
        return pixel_to_plane(px, py, self, width, height)

    # --- zoom into a box selected on screen ---------------------------------
    def zoomed_to(self, rect: PixelRect, width: int, height: int) -> ViewWindow:
        """
        Window covering `rect` of a `width` x `height` raster showing this window.
        Each axis is rescaled independently, so the aspect ratio follows the
        pixel selection.
        """
        x_start, y_start = pixel_to_plane(rect.left, rect.top, self, width, height)
        x_end, y_end = pixel_to_plane(rect.right, rect.bottom, self, width, height)
        return ViewWindow(x_start=x_start, x_end=x_end, y_start=y_start, y_end=y_end)


def pixel_to_plane(
    px: float, py: float, window: ViewWindow, width: int, height: int
) -> tuple[float, float]:
    """Convert raster coordinates to a complex-plane coordinate"""
    x = px * (window.x_end - window.x_start) / width + window.x_start
    y = py * (window.y_end - window.y_start) / height + window.y_start
    return x, y
