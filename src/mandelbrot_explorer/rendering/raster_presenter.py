from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pyglet


class RasterPresenter:
    """Holds the last uploaded raster as a pyglet image and blits it."""

    def __init__(self) -> None:
        self.image: Optional[pyglet.image.ImageData] = None

    @property
    def size(self) -> Optional[Tuple[int, int]]:
        if self.image is None:
            return None
        return self.image.width, self.image.height

    def upload(self, raster: np.ndarray) -> None:
        """raster: shape (H, W, 3), dtype uint8, row 0 at the top"""
        assert raster.dtype == np.uint8
        h, w, _ = raster.shape
        data = np.ascontiguousarray(raster).tobytes()

        # negative pitch: rows are stored top to bottom
        if self.image is None or self.size != (w, h):
            self.image = pyglet.image.ImageData(w, h, "RGB", data, pitch=-w * 3)
        else:
            self.image.set_data("RGB", -w * 3, data)

    def draw(self) -> None:
        if self.image is not None:
            self.image.blit(0, 0)
