from dataclasses import dataclass

from mandelbrot_explorer.config import ViewerConfig
from mandelbrot_explorer.rendering.raster_presenter import RasterPresenter
from mandelbrot_explorer.services.fractal_engine import FractalViewport


@dataclass
class AppContext:
    config: ViewerConfig
    presenter: RasterPresenter
    viewport: FractalViewport
