from __future__ import annotations

import pyglet
from typing import Optional
from pydantic import BaseModel
from pyglet.window import Window

from mandelbrot_explorer.config import CursorCoordsOverlayConfig
from .dependencies import UIDeps
from .manager import UIElement


class CursorCoordsOverlay(UIElement):
    """Shows the complex-plane point under the mouse cursor."""

    def __init__(self, config: CursorCoordsOverlayConfig) -> None:
        self._deps: Optional[UIDeps] = None
        self._x: int = 0
        self._y: int = 0
        self._config = config

        self._label = pyglet.text.Label(
            text="", x=0, y=0, anchor_x="left", anchor_y="bottom"
        )
        self._update_config()

    def mount(self, window: Window, deps: UIDeps) -> None:
        self._deps = deps

    def unmount(self, window: Window) -> None:
        self._deps = None

    def _update_config(self) -> None:
        self._label.font_size = self._config.font_size
        self._label.font_name = self._config.font_name
        self._label.color = self._config.color

    def on_config_changed(self, section: Optional[BaseModel]) -> None:
        self._update_config()

    def on_view_changed(self) -> None:
        self._refresh_text()

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        self._x = x
        self._y = y
        self._refresh_text()

    def _refresh_text(self) -> None:
        if self._deps is None or self._deps.viewport.size is None:
            return
        px, py = self._deps.to_raster(self._x, self._y)
        re, im = self._deps.viewport.pixel_to_plane(px, py)
        self._label.text = f"c={complex(re, im)}"

    def draw(self) -> None:
        if self._deps is None:
            return

        self._label.x = int(self._x + self._config.x_pad)
        self._label.y = int(self._y + self._config.y_pad)
        self._label.draw()
