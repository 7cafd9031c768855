"""Escape-time rendering of the Mandelbrot set onto an RGBA surface."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

import numpy as np

from .plane import Plane

MAX_ZOOM_LEVEL = 1e11
_ESCAPE_LIMIT = 4.0


class Surface:
    """A white RGBA pixel buffer whose alpha channel carries the image."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.data = np.full((self.height, self.width, 4), 255, dtype=np.uint8)

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @property
    def alpha(self) -> np.ndarray:
        """Writable flat view of the alpha channel, one entry per pixel."""
        return self.data.reshape(-1, 4)[:, 3]

    def set_alpha(self, offset: int, a: int) -> None:
        """Set the alpha of the pixel at flat index ``offset``."""
        if not 0 <= offset < self.size:
            raise IndexError(f"pixel offset {offset} out of range 0..{self.size - 1}")
        if not 0 <= a <= 255:
            raise ValueError(f"alpha {a} out of range 0..255")
        self.alpha[offset] = a


class Impl(enum.Enum):
    """Available plotting strategies."""

    SCALAR = "Scalar"
    SSE4 = "SSE4"
    AVX2 = "AVX2"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return self.value


Plotter = Callable[[Plane, Surface, int], None]


def zoom_speed(z: float) -> float:
    """Zoom speed grows with the fourth power of the decimal zoom exponent."""
    level = math.log10(z)
    return 2 + 2 * level * level * level * level


def zoom_effort(z: float) -> int:
    """Iteration budget per pixel for zoom ``z``."""
    level = math.log(z)
    return int(100 + 100 * (level if level > 0 else 0))


def _check_inputs(plane: Plane, effort: int) -> None:
    if effort < 1:
        raise ValueError(f"effort must be at least 1, got {effort}")
    if plane.screen.x <= 0:
        raise ValueError(f"plane screen width must be positive, got {plane.screen.x}")


def _escape_counts(cx: np.ndarray, cy: np.ndarray, effort: int) -> np.ndarray:
    """Index of the first orbit point outside radius 2, capped at ``effort``."""
    counts = np.full(cx.shape, effort, dtype=np.int64)
    alive = np.arange(cx.size)
    zx = np.zeros_like(cx)
    zy = np.zeros_like(cy)
    for n in range(effort):
        zx2 = zx * zx
        zy2 = zy * zy
        inside = (zx2 + zy2) <= _ESCAPE_LIMIT
        if not inside.all():
            counts[alive[~inside]] = n
            alive = alive[inside]
            if alive.size == 0:
                break
            zx, zy, zx2, zy2 = zx[inside], zy[inside], zx2[inside], zy2[inside]
            cx, cy = cx[inside], cy[inside]
        zxzy = zx * zy
        zx = zx2 - zy2 + cx
        zy = zxzy + zxzy + cy
    return counts


def plot_scalar(plane: Plane, surface: Surface, effort: int) -> None:
    """Plot pixel by pixel; the alpha is ``round(255 * (steps - 1) / effort)``."""
    _check_inputs(plane, effort)
    width = plane.screen.x
    index = np.arange(surface.size)
    x = index % width
    y = index // width
    transform_x = 1 / plane.scale / plane.zoom
    transform_y = -1 / plane.scale / plane.zoom
    cx = x * transform_x - plane.offset.x
    cy = y * transform_y - plane.offset.y

    steps_before = np.minimum(_escape_counts(cx, cy, effort), effort - 1)
    values = 255.0 * (steps_before / effort)
    surface.alpha[:] = np.floor(values + 0.5).astype(np.uint8)


def _plot_lanes(plane: Plane, surface: Surface, effort: int, lanes: int) -> None:
    """Plot in groups of ``lanes`` pixels sharing the first pixel's row.

    Within a group x simply counts up from the first pixel, so a group that
    crosses a row end keeps using the row it started on.
    """
    _check_inputs(plane, effort)
    width = plane.screen.x
    index = np.arange(surface.size)
    start = index - index % lanes
    x = start % width + (index - start)
    y = start // width
    transform_x = 1.0 / (plane.scale * plane.zoom)
    transform_y = -1.0 / (plane.scale * plane.zoom)
    cx = x * transform_x - plane.offset.x
    cy = y * transform_y - plane.offset.y

    counts = _escape_counts(cx, cy, effort)
    values = counts / effort * 255.0
    surface.alpha[:] = np.rint(values).astype(np.uint8)


def plot_sse4(plane: Plane, surface: Surface, effort: int) -> None:
    """Plot two pixels at a time; the alpha is ``rint(255 * iterations / effort)``."""
    _plot_lanes(plane, surface, effort, 2)


def plot_avx2(plane: Plane, surface: Surface, effort: int) -> None:
    """Plot four pixels at a time; the alpha is ``rint(255 * iterations / effort)``."""
    _plot_lanes(plane, surface, effort, 4)


_PLOTTERS: dict[Impl, Plotter] = {
    Impl.SCALAR: plot_scalar,
    Impl.SSE4: plot_sse4,
    Impl.AVX2: plot_avx2,
}


def plotter_for(impl: Impl) -> Plotter:
    """Return the plotting function for ``impl``."""
    return _PLOTTERS[impl]