"""Interactive fractal viewer: click to zoom, keys to control."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

import pygame

from fractalview.viewport import Viewport, render_pixels
from fractalview.window import RenderWindow

WIDTH = 800
HEIGHT = 800
START_ITERATIONS = 100
ZOOM_STEP = 4
FRACTALS = (0, 1, 2)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_fractal(text: str) -> int:
    """Read the fractal number from a command-line argument.

    Unreadable input gives 0; trailing characters are reported on stderr
    but the leading number is kept.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        print(f"Invalid number: {text}", file=sys.stderr)
        return 0
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        print(f"Invalid number: {text}", file=sys.stderr)
        return max(_INT_MIN, min(_INT_MAX, value))
    if match.end() != len(text):
        print(f"Trailing characters after number: {text}", file=sys.stderr)
    return value


def _render(window: RenderWindow, viewport: Viewport, fractal: int, iterations: int) -> None:
    for i, j, hue, valuehue in render_pixels(viewport, fractal, iterations):
        window.draw(i, j, hue, valuehue)
    window.display()
    window.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; the optional first argument selects the fractal."""
    args = list(sys.argv[1:] if argv is None else argv)
    fractal = parse_fractal(args[0]) if args else 0
    if fractal not in FRACTALS:
        print(f"Unknown fractal: {fractal}", file=sys.stderr)
        return 1

    try:
        pygame.display.init()
    except pygame.error:
        print("Couldn't initialize the display", file=sys.stderr)
        return 1

    viewport = Viewport(WIDTH, HEIGHT)
    iterations = START_ITERATIONS
    mouse = (0, 0)
    window = RenderWindow("Mandelbrot", WIDTH, HEIGHT, False)
    try:
        window.display()
        viewport.reset()
        _render(window, viewport, fractal, iterations)
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                viewport.zoom_in(ZOOM_STEP)
                mouse = event.pos
                viewport.recenter(*mouse)
                _render(window, viewport, fractal, iterations)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_f:
                    window.toggle_fullscreen()
                elif event.key == pygame.K_q:
                    running = False
                elif event.key == pygame.K_m:
                    iterations *= 2
                    viewport.recenter(*mouse)
                    _render(window, viewport, fractal, iterations)
    finally:
        window.close()
        pygame.quit()
    return 0