from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel
from pyglet import shapes
from pyglet.window import Window, mouse

from mandelbrot_explorer.config import SelectionOverlayConfig
from mandelbrot_explorer.domain.selection import DragSelection
from .dependencies import UIDeps
from .manager import UIElement

logger = logging.getLogger(__name__)


class SelectionOverlay(UIElement):
    """Left-drag selects a rectangle to zoom into, right-click resets the view."""

    def __init__(self, config: SelectionOverlayConfig) -> None:
        self._deps: Optional[UIDeps] = None
        self._config = config
        self._selection = DragSelection()

        self._update_config()

    def mount(self, window: Window, deps: UIDeps) -> None:
        self._deps = deps

    def unmount(self, window: Window) -> None:
        self._selection.cancel()
        self._deps = None

    def _update_config(self) -> None:
        self._box = shapes.Box(
            x=0,
            y=0,
            width=1,
            height=1,
            thickness=self._config.thickness,
            color=self._config.color,
        )

    def on_config_changed(self, section: Optional[BaseModel]) -> None:
        self._update_config()

    def on_view_changed(self) -> None:
        pass

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        if self._deps is None or button != mouse.LEFT:
            return
        self._selection.begin(*self._deps.to_raster(x, y))

    def on_mouse_drag(
        self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int
    ) -> None:
        if self._deps is None:
            return
        self._selection.update(*self._deps.to_raster(x, y))

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        if self._deps is None:
            return

        if button == mouse.LEFT:
            self._selection.update(*self._deps.to_raster(x, y))
            rect = self._selection.finish()
            if rect is None:
                logger.debug("ignoring empty selection")
                return
            self._deps.viewport.zoom(rect)
            self._deps.on_view_changed()
        elif button == mouse.RIGHT:
            self._selection.cancel()
            self._deps.viewport.reset()
            self._deps.on_view_changed()

    def draw(self) -> None:
        rect = self._selection.rect
        if self._deps is None or rect is None:
            return

        # raster rows grow downwards, window y grows upwards
        _, h = self._deps.get_size()
        self._box.x = rect.left
        self._box.y = h - 1 - rect.bottom
        self._box.width = rect.width
        self._box.height = rect.height
        self._box.draw()
