import logging

import pyglet
from pyglet.window import key

from mandelbrot_explorer.app_context import AppContext
from mandelbrot_explorer.config import ViewerConfig
from mandelbrot_explorer.rendering.raster_presenter import RasterPresenter
from mandelbrot_explorer.services.fractal_engine import FractalViewport
from mandelbrot_explorer.ui.cursor_coords import CursorCoordsOverlay
from mandelbrot_explorer.ui.dependencies import UIDeps
from mandelbrot_explorer.ui.hud import HUD
from mandelbrot_explorer.ui.manager import UIManager
from mandelbrot_explorer.ui.selection_overlay import SelectionOverlay

logger = logging.getLogger(__name__)


class MandelbrotWindow(pyglet.window.Window):
    def __init__(self, config: ViewerConfig) -> None:
        super().__init__(
            width=config.width,
            height=config.height,
            caption=config.caption,
            resizable=True,
        )
        self.set_minimum_size(config.min_width, config.min_height)

        self.app = AppContext(
            config=config,
            presenter=RasterPresenter(),
            viewport=FractalViewport(config.fractal),
        )

        deps = UIDeps(
            get_size=self.get_size,
            viewport=self.app.viewport,
            on_view_changed=self._on_view_changed,
        )
        self.ui = UIManager(window=self, deps=deps)

        # size the raster before the first resize event arrives
        self._recompute_and_upload(w=self.width, h=self.height)

        self.set_mouse_cursor(self.get_system_mouse_cursor(self.CURSOR_CROSSHAIR))

        self.ui.add(SelectionOverlay(config.selection))
        if config.show_hud:
            self.ui.add(HUD(config.hud))
        if config.show_cursor_coords:
            self.ui.add(CursorCoordsOverlay(config.cursor_coords))

    def _upload(self) -> None:
        raster = self.app.viewport.raster()
        if raster is not None:
            self.app.presenter.upload(raster)

    def _recompute_and_upload(self, w: int, h: int) -> None:
        if w <= 0 or h <= 0:
            # minimised
            return
        if self.app.viewport.size != (w, h):
            self.app.viewport.set_size(w, h)
        self._upload()

    def _on_view_changed(self) -> None:
        self._upload()
        self.ui.view_changed()

    def on_draw(self) -> None:
        self.clear()
        self.app.presenter.draw()
        self.ui.draw()

    def on_resize(self, width: int, height: int) -> None:
        super().on_resize(width, height)
        logger.debug("window resized to %dx%d", width, height)
        self._recompute_and_upload(w=width, h=height)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == key.Q and modifiers & key.MOD_ACCEL:
            self.close()
            return
        super().on_key_press(symbol, modifiers)
