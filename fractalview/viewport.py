"""The visible region of the complex plane and per-pixel colouring values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from fractalview.fractal import ROOTS, mandelbrot_escape, newton_root_index

MANDELBROT_LIMIT = 30
NEWTON_ITERATIONS = 30


@dataclass
class Viewport:
    """A square window onto the plane, centred on a point and scaled by ``zoom``."""

    width: int = 800
    height: int = 800
    zoom: float = 0.5
    center_x: float = field(default=0.0, init=False)
    center_y: float = field(default=0.0, init=False)
    left: float = field(default=0.0, init=False)
    right: float = field(default=0.0, init=False)
    top: float = field(default=0.0, init=False)
    bottom: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport size must be positive")
        if self.zoom <= 0:
            raise ValueError("zoom must be positive")
        self.reset()

    def _fit(self) -> None:
        half = 1 / self.zoom
        self.left = self.center_x - half
        self.right = self.center_x + half
        self.top = self.center_y - half
        self.bottom = self.center_y + half

    def recenter(self, mousex: int, mousey: int) -> None:
        """Centre on the plane point under pixel ``(mousex, mousey)`` at the current zoom."""
        self.center_x = mousex / self.width * (self.right - self.left) + self.left
        self.center_y = mousey / self.height * (self.bottom - self.top) + self.top
        self._fit()

    def reset(self) -> None:
        """Centre on the origin at the current zoom."""
        self.center_x = 0.0
        self.center_y = 0.0
        self._fit()

    def zoom_in(self, factor: float) -> None:
        """Multiply the zoom; the bounds change on the next recentre or reset."""
        self.zoom *= factor

    def point(self, i: int, j: int) -> complex:
        """Return the plane point shown at pixel column ``i`` and row ``j``."""
        x = self.left + (self.right - self.left) * i / self.width
        y = self.top + (self.bottom - self.top) * j / self.height
        return complex(x, y)


def pixel_value(c: complex, fractal: int, iterations: int) -> tuple[int, int]:
    """Return ``(hue, valuehue)`` for point ``c``.

    Fractal 0 is the Mandelbrot set; 1 and 2 are the Newton fractals.
    A ``valuehue`` of 0 marks a point coloured black.
    """
    if fractal == 0:
        if iterations <= 0:
            raise ValueError("iterations must be positive")
        value = mandelbrot_escape(c, iterations, MANDELBROT_LIMIT)
        scale = iterations
    else:
        value = newton_root_index(c, fractal - 1, NEWTON_ITERATIONS)
        scale = len(ROOTS[0])
    hue = int(180 + 60 * value / scale)
    return hue, (0 if value == 0 else 1)


def render_pixels(
    viewport: Viewport, fractal: int, iterations: int
) -> Iterator[tuple[int, int, int, int]]:
    """Yield ``(i, j, hue, valuehue)`` row by row, edges inclusive."""
    for j in range(viewport.height + 1):
        for i in range(viewport.width + 1):
            hue, valuehue = pixel_value(viewport.point(i, j), fractal, iterations)
            yield i, j, hue, valuehue