"""Command-line entry point, without opening a window or a browser."""

import pytest

from mandelbrot_explorer import main as cli


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert (args.width, args.height) == (640, 480)
    assert args.max_iterations == 100
    assert args.backend == "numpy"
    assert not args.plot


def test_make_config_carries_arguments():
    args = cli.build_parser().parse_args(
        ["--width", "800", "--height", "600", "--max-iterations", "300", "--backend", "scalar"]
    )
    config = cli.make_config(args)
    assert (config.width, config.height) == (800, 600)
    assert config.fractal.max_iterations == 300
    assert config.fractal.backend == "scalar"


def test_plot_mode_renders_one_frame(monkeypatch):
    shown = []
    monkeypatch.setattr(cli, "plot_raster", shown.append)

    cli.main(["--plot", "--width", "16", "--height", "9", "--max-iterations", "20"])

    assert len(shown) == 1
    viewport = shown[0]
    assert viewport.size == (16, 9)
    assert viewport.max_iterations == 20
    assert viewport.raster().shape == (9, 16, 3)


@pytest.mark.parametrize(
    "argv",
    [["--width", "0"], ["--height", "-1"], ["--max-iterations", "0"]],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit):
        cli.main(["--plot", *argv])
