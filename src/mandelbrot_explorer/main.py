import argparse
import logging
from typing import Optional, Sequence

import numpy as np
import plotly.express as px

from mandelbrot_explorer.config import FractalConfig, ViewerConfig
from mandelbrot_explorer.services.fractal_engine import FractalViewport

logger = logging.getLogger(__name__)


def plot_raster(viewport: FractalViewport) -> None:
    raster = viewport.raster()
    assert raster is not None
    width, height = viewport.size  # type: ignore[misc]
    window = viewport.window

    # tick i is the plane point raster column/row i maps to
    fig = px.imshow(
        raster,
        x=np.linspace(window.x_start, window.x_end, width, endpoint=False),
        y=np.linspace(window.y_start, window.y_end, height, endpoint=False),
    )

    fig.update_layout(
        title="Mandelbrot",
        xaxis_title="Re(c)",
        yaxis_title="Im(c)",
    )

    fig.show()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandelbrot-explorer",
        description="Interactive Mandelbrot set viewer: drag to zoom, right-click to reset.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--width", type=int, default=640, help="initial window width, in pixels"
    )
    parser.add_argument(
        "--height", type=int, default=480, help="initial window height, in pixels"
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=100,
        help="iteration cap of the escape-time test",
    )
    parser.add_argument(
        "--backend",
        choices=["numpy", "scalar"],
        default="numpy",
        help="raster backend; both produce identical images",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="render one frame and show it with plotly instead of opening a window",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def make_config(args: argparse.Namespace) -> ViewerConfig:
    return ViewerConfig(
        width=args.width,
        height=args.height,
        fractal=FractalConfig(max_iterations=args.max_iterations, backend=args.backend),
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.max_iterations <= 0:
        parser.error("--max-iterations must be positive")

    if args.plot:
        viewport = FractalViewport(
            FractalConfig(max_iterations=args.max_iterations, backend=args.backend)
        )
        viewport.set_size(args.width, args.height)
        plot_raster(viewport)
        return

    # windowing is only imported when a window is actually opened
    import pyglet

    from mandelbrot_explorer.viewer import MandelbrotWindow

    config = make_config(args)
    app = MandelbrotWindow(config)
    logger.info("opened %dx%d window", config.width, config.height)

    pyglet.app.run()

    app.close()


if __name__ == "__main__":
    main()
