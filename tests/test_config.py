import pytest
from pydantic import ValidationError

from mandelbrot_explorer.config import (
    DEFAULT_MAX_ITERATIONS,
    ESCAPE_RADIUS,
    FractalConfig,
    ViewerConfig,
)


def test_fractal_defaults():
    config = FractalConfig()
    assert config.max_iterations == DEFAULT_MAX_ITERATIONS == 100
    assert config.backend == "numpy"
    assert (config.x_start, config.x_end, config.y_start, config.y_end) == (
        -2.5,
        1.0,
        -1.0,
        1.0,
    )
    assert ESCAPE_RADIUS == 2.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_iterations": 0},
        {"max_iterations": -5},
        {"backend": "gpu"},
        {"x_start": 1.0, "x_end": 1.0},
        {"y_start": 2.0, "y_end": -2.0},
    ],
)
def test_fractal_config_rejects(overrides):
    with pytest.raises(ValidationError):
        FractalConfig(**overrides)


def test_viewer_defaults():
    config = ViewerConfig()
    assert config.caption == "Mandelbrot"
    assert (config.width, config.height) == (640, 480)
    assert (config.min_width, config.min_height) == (320, 240)
    assert config.selection.color == (0, 0, 255)
    assert isinstance(config.fractal, FractalConfig)


def test_viewer_rejects_size_below_minimum():
    with pytest.raises(ValidationError):
        ViewerConfig(width=100, height=480)


def test_viewer_nested_fractal_from_dict():
    config = ViewerConfig.model_validate(
        {"fractal": {"max_iterations": 250, "backend": "scalar"}}
    )
    assert config.fractal.max_iterations == 250
    assert config.fractal.backend == "scalar"
