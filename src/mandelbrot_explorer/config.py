from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, model_validator

ESCAPE_RADIUS = 2.0
DEFAULT_MAX_ITERATIONS = 100

DEFAULT_X_START = -2.5
DEFAULT_X_END = 1.0
DEFAULT_Y_START = -1.0
DEFAULT_Y_END = 1.0


class FractalConfig(BaseModel):
    max_iterations: PositiveInt = DEFAULT_MAX_ITERATIONS
    backend: Literal["numpy", "scalar"] = "numpy"

    # view restored on startup and on reset
    x_start: float = DEFAULT_X_START
    x_end: float = DEFAULT_X_END
    y_start: float = DEFAULT_Y_START
    y_end: float = DEFAULT_Y_END

    @model_validator(mode="after")
    def _check_bounds(self) -> "FractalConfig":
        if not self.x_start < self.x_end:
            raise ValueError("x_start must be smaller than x_end")
        if not self.y_start < self.y_end:
            raise ValueError("y_start must be smaller than y_end")
        return self


class SelectionOverlayConfig(BaseModel):
    color: tuple[int, int, int] = (0, 0, 255)
    thickness: float = 1.0


class HUDConfig(BaseModel):
    x: int = 10
    y: int = 10
    padding: int = 8
    line_height: int = 18
    opacity: int = 160


class CursorCoordsOverlayConfig(BaseModel):
    x_pad: int = 12
    y_pad: int = 12
    font_size: int = 12
    font_name: str = "Menlo"
    color: tuple[int, int, int, int] = (230, 230, 230, 255)


class ViewerConfig(BaseModel):
    caption: str = "Mandelbrot"
    min_width: PositiveInt = 320
    min_height: PositiveInt = 240
    width: PositiveInt = Field(default=640)
    height: PositiveInt = Field(default=480)
    show_hud: bool = True
    show_cursor_coords: bool = True

    fractal: FractalConfig = Field(default_factory=FractalConfig)
    selection: SelectionOverlayConfig = Field(default_factory=SelectionOverlayConfig)
    hud: HUDConfig = Field(default_factory=HUDConfig)
    cursor_coords: CursorCoordsOverlayConfig = Field(
        default_factory=CursorCoordsOverlayConfig
    )

    @model_validator(mode="after")
    def _check_size(self) -> "ViewerConfig":
        if self.width < self.min_width or self.height < self.min_height:
            raise ValueError(
                f"window size {self.width}x{self.height} is below the minimum "
                f"{self.min_width}x{self.min_height}"
            )
        return self
