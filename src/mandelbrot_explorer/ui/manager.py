from __future__ import annotations
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel
from pyglet.window import Window

from .dependencies import UIDeps


@runtime_checkable
class UIElement(Protocol):
    def mount(self, window: Window, deps: UIDeps) -> None: ...

    def unmount(self, window: Window) -> None: ...

    def on_config_changed(self, section: Optional[BaseModel]) -> None: ...

    def on_view_changed(self) -> None: ...

    def draw(self) -> None: ...


class UIManager:
    """Mounts overlay elements on the window and draws them in insertion order."""

    def __init__(self, window: Window, deps: UIDeps) -> None:
        self.window = window
        self.deps = deps
        self._elements: List[UIElement] = []

    def add(self, element: UIElement) -> None:
        element.mount(self.window, self.deps)
        self.window.push_handlers(element)
        self._elements.append(element)

    def view_changed(self) -> None:
        for e in self._elements:
            e.on_view_changed()

    def draw(self) -> None:
        for e in self._elements:
            e.draw()
