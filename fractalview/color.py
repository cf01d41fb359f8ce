"""HSV/RGB conversion and the pixel colouring used by the viewer."""

from __future__ import annotations

import math

BLACK = (0, 0, 0)

# Saturation and value used for every drawn pixel.
_PIXEL_SATURATION = 1.0
_PIXEL_VALUE = 8.0


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB fractions to ``(hue in degrees, saturation, value)``."""
    low = min(r, g, b)
    high = max(r, g, b)
    v = high
    delta = high - low
    if delta < 0.00001:
        return 0.0, 0.0, v
    if high <= 0.0:
        return math.nan, 0.0, v
    s = delta / high
    if r >= high:
        h = (g - b) / delta
    elif g >= high:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    h *= 60.0
    if h < 0.0:
        h += 360.0
    return h, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert ``(hue in degrees, saturation, value)`` to RGB fractions."""
    if s <= 0.0:
        return v, v, v
    hh = 0.0 if h >= 360.0 else h
    hh /= 60.0
    sector = int(hh)
    ff = hh - sector
    p = v * (1.0 - s)
    q = v * (1.0 - s * ff)
    t = v * (1.0 - s * (1.0 - ff))
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def _channel(fraction: float) -> int:
    # Channels beyond full intensity wrap around into the byte range.
    return int(fraction * 255) % 256


def pixel_color(hue: int, valuehue: int) -> tuple[int, int, int]:
    """Return the 8-bit RGB colour drawn for a pixel of the given hue.

    A ``valuehue`` of 0 marks a point inside the set and is drawn black.
    """
    if valuehue == 0:
        return BLACK
    r, g, b = hsv_to_rgb(hue, _PIXEL_SATURATION, _PIXEL_VALUE)
    return _channel(r), _channel(g), _channel(b)