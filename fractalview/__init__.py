"""Interactive Mandelbrot and Newton fractal viewer with click-to-zoom."""

__version__ = "0.1.0"
__all__ = ["app", "color", "fractal", "viewport", "window"]