from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from mandelbrot_explorer.services.fractal_engine import FractalViewport


@dataclass(frozen=True)
class UIDeps:
    get_size: Callable[[], tuple[int, int]]
    viewport: FractalViewport
    # called after the viewport changed so the window re-uploads the raster
    on_view_changed: Callable[[], None]

    def to_raster(self, x: int, y: int) -> tuple[int, int]:
        """Window coordinates (bottom-left origin) to raster pixel coordinates.

        Both axes are clamped to the pixel range of the window, so positions
        dragged outside it land on the edge rows and columns.
        """
        w, h = self.get_size()
        px = min(max(x, 0), w - 1)
        py = min(max(h - 1 - y, 0), h - 1)
        return px, py
