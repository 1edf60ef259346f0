import colorsys
import logging
import time
from typing import Optional, Protocol

import numpy as np

from mandelbrot_explorer.config import ESCAPE_RADIUS, FractalConfig
from mandelbrot_explorer.domain.viewport import PixelRect, ViewWindow, pixel_to_plane

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

BAILOUT = ESCAPE_RADIUS * ESCAPE_RADIUS

Color = tuple[int, int, int]


def escape_time(x0: float, y0: float, max_iterations: int) -> int:
    """
    Number of steps of z_n+1 = z_n^2 + c, z_0 = 0, c = x0 + i*y0,
    before |z| exceeds the escape radius, capped at max_iterations.
    """
    x = 0.0
    y = 0.0
    x2 = 0.0
    y2 = 0.0
    iteration = 0

    while x2 + y2 <= BAILOUT and iteration < max_iterations:
        y = 2 * x * y + y0
        x = x2 - y2 + x0
        x2 = x * x
        y2 = y * y
        iteration += 1

    return iteration


def color_for_iterations(iterations: int, max_iterations: int) -> Color:
    hue = iterations * 360.0 / max_iterations
    if hue == 360.0:
        hue = 0.0
    # points that never escaped are inside the set: black
    value = 1.0 if iterations < max_iterations else 0.0

    r, g, b = colorsys.hsv_to_rgb(hue / 360.0, 1.0, value)
    return int(r * 255), int(g * 255), int(b * 255)


def pixel_color(
    px: int, py: int, window: ViewWindow, width: int, height: int, max_iterations: int
) -> Color:
    x0, y0 = pixel_to_plane(px, py, window, width, height)
    return color_for_iterations(escape_time(x0, y0, max_iterations), max_iterations)


def color_table(max_iterations: int) -> np.ndarray:
    """Lookup table mapping an iteration count (0..max_iterations) to RGB."""
    return np.array(
        [color_for_iterations(n, max_iterations) for n in range(max_iterations + 1)],
        dtype=np.uint8,
    )


class RasterBackend(Protocol):
    def render(
        self,
        window: ViewWindow,
        width: int,
        height: int,
        max_iterations: int,
        out: np.ndarray,
    ) -> None: ...


class ScalarBackend:
    """Reference path: one kernel call per pixel, row-major."""

    def render(
        self,
        window: ViewWindow,
        width: int,
        height: int,
        max_iterations: int,
        out: np.ndarray,
    ) -> None:
        for py in range(height):
            for px in range(width):
                out[py, px] = pixel_color(px, py, window, width, height, max_iterations)


class NumpyBackend:
    """
    Vectorized escape time over the whole raster.

    Runs the same float64 recurrence as `escape_time`, but only on the points
    still inside the bailout radius, so the result matches ScalarBackend byte
    for byte.
    """

    def render(
        self,
        window: ViewWindow,
        width: int,
        height: int,
        max_iterations: int,
        out: np.ndarray,
    ) -> None:
        iterations = self.escape_counts(window, width, height, max_iterations)
        out[...] = color_table(max_iterations)[iterations]

    def escape_counts(
        self, window: ViewWindow, width: int, height: int, max_iterations: int
    ) -> np.ndarray:
        re = (
            np.arange(width, dtype=np.float64)
            * (window.x_end - window.x_start)
            / width
            + window.x_start
        )
        imag = (
            np.arange(height, dtype=np.float64)
            * (window.y_end - window.y_start)
            / height
            + window.y_start
        )
        Re, Im = np.meshgrid(re, imag)
        c_re = Re.ravel()
        c_im = Im.ravel()

        counts = np.zeros(c_re.shape, dtype=np.intp)

        # indices of points that have not escaped yet, and their orbit state
        active = np.arange(c_re.size)
        x = np.zeros(c_re.shape, dtype=np.float64)
        y = np.zeros(c_re.shape, dtype=np.float64)
        x2 = np.zeros(c_re.shape, dtype=np.float64)
        y2 = np.zeros(c_re.shape, dtype=np.float64)

        for _ in range(max_iterations):
            if active.size == 0:
                break

            y = 2 * x * y + c_im[active]
            x = x2 - y2 + c_re[active]
            x2 = x * x
            y2 = y * y
            counts[active] += 1

            keep = x2 + y2 <= BAILOUT
            active = active[keep]
            x = x[keep]
            y = y[keep]
            x2 = x2[keep]
            y2 = y2[keep]

        return counts.reshape(height, width)


BACKENDS: dict[str, type] = {
    "scalar": ScalarBackend,
    "numpy": NumpyBackend,
}


def make_backend(name: str) -> RasterBackend:
    try:
        return BACKENDS[name]()
    except KeyError:
        raise ValueError(
            f"unknown backend {name!r}, expected one of {sorted(BACKENDS)}"
        ) from None


def _is_integral(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class FractalViewport:
    """
    Current view of the complex plane and the RGB raster rendered from it.

    Every public mutation (set_size, zoom, reset) recomputes the whole raster
    before returning.
    """

    def __init__(
        self,
        config: Optional[FractalConfig] = None,
        backend: Optional[RasterBackend] = None,
    ) -> None:
        self.config = config if config is not None else FractalConfig()
        self.backend = backend if backend is not None else make_backend(
            self.config.backend
        )
        self._pixels: Optional[np.ndarray] = None
        self.initialize()

    # --- view ---------------------------------------------------------------
    @property
    def window(self) -> ViewWindow:
        return self._window

    @property
    def size(self) -> Optional[tuple[int, int]]:
        if self._pixels is None:
            return None
        height, width = self._pixels.shape[:2]
        return width, height

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    def _default_window(self) -> ViewWindow:
        return ViewWindow(
            x_start=self.config.x_start,
            x_end=self.config.x_end,
            y_start=self.config.y_start,
            y_end=self.config.y_end,
        )

    def initialize(self) -> None:
        self._window = self._default_window()

    def reset(self) -> None:
        self.initialize()
        logger.info("view reset to %s", self._window)
        self.recompute()

    def set_size(self, width: int, height: int) -> None:
        if not _is_integral(width) or not _is_integral(height):
            raise ValueError(f"raster size must be integral, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"raster size must be positive, got {width}x{height}")

        self._pixels = np.zeros((int(height), int(width), 3), dtype=np.uint8)
        self.recompute()

    def zoom(self, rect: PixelRect) -> None:
        """
        Zoom to `rect`, given in current raster pixel coordinates.

        The rect must have positive width and height; the caller filters out
        empty selections. Once float64 cannot resolve the selection any more
        the current view is kept and nothing is recomputed.
        """
        width, height = self._require_size()
        if rect.is_empty:
            raise ValueError(f"cannot zoom into an empty selection: {rect}")

        try:
            window = self._window.zoomed_to(rect, width, height)
        except ValueError:
            # float64 can no longer tell the selection edges apart
            logger.warning(
                "zoom precision limit reached, keeping view %s", self._window
            )
            return

        self._window = window
        logger.info("zoomed to %s", self._window)
        self.recompute()

    def pixel_to_plane(self, px: float, py: float) -> tuple[float, float]:
        width, height = self._require_size()
        return pixel_to_plane(px, py, self._window, width, height)

    # --- computation --------------------------------------------------------
    def classify(self, px: int, py: int, max_iterations: Optional[int] = None) -> int:
        max_iterations = self._resolve_iterations(max_iterations)
        x0, y0 = self.pixel_to_plane(px, py)
        return escape_time(x0, y0, max_iterations)

    def color_pixel(self, px: int, py: int, max_iterations: Optional[int] = None) -> None:
        max_iterations = self._resolve_iterations(max_iterations)
        assert self._pixels is not None
        iterations = self.classify(px, py, max_iterations)
        self._pixels[py, px] = color_for_iterations(iterations, max_iterations)

    def recompute(self, max_iterations: Optional[int] = None) -> None:
        max_iterations = self._resolve_iterations(max_iterations)
        if self._pixels is None:
            return

        height, width = self._pixels.shape[:2]
        started = time.perf_counter()
        self.backend.render(self._window, width, height, max_iterations, self._pixels)
        logger.debug(
            "recomputed %dx%d raster, max_iterations=%d, backend=%s in %.3fs",
            width,
            height,
            max_iterations,
            type(self.backend).__name__,
            time.perf_counter() - started,
        )

    def raster(self) -> Optional[np.ndarray]:
        """
        Read-only view of the (height, width, 3) uint8 RGB raster, or None
        before the first set_size. Contents are replaced on every recompute.
        """
        if self._pixels is None:
            return None
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def _resolve_iterations(self, max_iterations: Optional[int]) -> int:
        if max_iterations is None:
            return self.max_iterations
        if not _is_integral(max_iterations) or max_iterations < 1:
            raise ValueError(
                f"max_iterations must be a positive integer, got {max_iterations!r}"
            )
        return int(max_iterations)

    def _require_size(self) -> tuple[int, int]:
        size = self.size
        if size is None:
            raise RuntimeError("no raster yet, call set_size() first")
        return size
