from __future__ import annotations

from typing import Optional

import pyglet
from pydantic import BaseModel
from pyglet import shapes
from pyglet.window import Window

from mandelbrot_explorer.config import HUDConfig
from .dependencies import UIDeps
from .manager import UIElement


class HUD(UIElement):
    def __init__(self, config: HUDConfig) -> None:
        self._deps: Optional[UIDeps] = None
        self._config = config
        self.batch = pyglet.graphics.Batch()

        # Background panel (auto-resized in update)
        self.bg = shapes.Rectangle(
            x=config.x, y=config.y, width=320, height=110, color=(0, 0, 0),
            batch=self.batch,
        )
        self.bg.opacity = config.opacity

        self.labels = [
            pyglet.text.Label(
                "", x=0, y=0, color=(200, 200, 200, 255), batch=self.batch
            )
            for _ in range(4)
        ]
        self.labels[-1].color = (255, 255, 255, 255)

    def mount(self, window: Window, deps: UIDeps) -> None:
        self._deps = deps
        self.update()

    def unmount(self, window: Window) -> None:
        self._deps = None

    def on_config_changed(self, section: Optional[BaseModel]) -> None:
        self.bg.opacity = self._config.opacity
        self.update()

    def on_view_changed(self) -> None:
        self.update()

    def on_resize(self, width: int, height: int) -> None:
        self.update()

    def update(self) -> None:
        if self._deps is None:
            return

        viewport = self._deps.viewport
        window = viewport.window
        w, h = self._deps.get_size()
        re_span, im_span = window.get_spans()

        # bottom line first, labels stack upwards
        self.labels[0].text = f" Iter:   {viewport.max_iterations}    Size: {w}×{h}"
        self.labels[1].text = f" Span:   ΔRe={re_span:.6e}, ΔIm={im_span:.6e}"
        self.labels[2].text = (
            f" Re: [{window.x_start:.9f}, {window.x_end:.9f}]"
            f"  Im: [{window.y_start:.9f}, {window.y_end:.9f}]"
        )
        self.labels[3].text = "View"

        x0, y0 = self._config.x, self._config.y
        pad = self._config.padding
        line_h = self._config.line_height
        for i, lbl in enumerate(self.labels):
            lbl.x = x0 + pad
            lbl.y = y0 + pad + i * line_h

        # Resize background to fit text block
        max_w = max(lbl.content_width for lbl in self.labels)
        self.bg.x = x0
        self.bg.y = y0
        self.bg.width = max(200, pad * 2 + max_w)
        self.bg.height = pad * 2 + line_h * len(self.labels)

    def draw(self) -> None:
        if self._deps is None:
            return
        self.batch.draw()
