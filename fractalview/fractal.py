"""Escape-time and Newton iteration kernels for the fractal viewer."""

from __future__ import annotations

import math

_SQRT2 = math.sqrt(2)
_SQRT3_HALF = math.sqrt(3) / 2

ROOTS: tuple[tuple[complex, ...], ...] = (
    (
        complex(1, 0),
        complex(-0.5, _SQRT3_HALF),
        complex(-0.5, -_SQRT3_HALF),
    ),
    (
        complex(1, 0),
        complex(-1, 0),
        complex(0, 1),
        complex(0, -1),
        complex(-_SQRT2, -_SQRT2),
        complex(_SQRT2, _SQRT2),
        complex(_SQRT2, -_SQRT2),
        complex(-_SQRT2, _SQRT2),
    ),
)
"""Roots of the polynomials behind each Newton fractal, in colouring order."""

NEWTON_TOLERANCE = 0.0001


def _norm(z: complex) -> float:
    """Squared magnitude of ``z``."""
    return z.real * z.real + z.imag * z.imag


def mandelbrot_escape(c: complex, iterations: int, limit: float) -> int:
    """Return the step at which ``z -> z*z + c`` exceeds ``limit`` in squared norm.

    Points that stay bounded give 0; points that neither escape nor settle
    below a squared norm of 2 give ``iterations``.
    """
    z = 0j
    z_abs = 0.0
    for step in range(iterations):
        if z_abs > limit:
            return step
        z = z * z + c
        z_abs = _norm(z)
    if z_abs < 2:
        return 0
    return iterations


def newton_cubic(z: complex) -> complex:
    """Newton step for ``z**3 - 1``: ``f(z) / f'(z)``."""
    z2 = z * z
    return (z2 * z - 1) / (3 * z2)


def newton_octic(z: complex) -> complex:
    """Newton step for ``z**8 + 15 z**4 - 16``: ``f(z) / f'(z)``."""
    z3 = z * z * z
    z4 = z3 * z
    z7 = z4 * z3
    return (z7 * z + 15 * z4 - 16) / (8 * z7 + 60 * z3)


_STEPS = (newton_cubic, newton_octic)


def newton_root_index(z: complex, func_index: int, iterations: int) -> int:
    """Return the 1-based index of the root Newton's method reaches from ``z``.

    Returns 0 when no root is reached within ``iterations`` steps.
    """
    if not 0 <= func_index < len(ROOTS):
        raise ValueError(f"unknown Newton function: {func_index}")
    roots = ROOTS[func_index]
    step = _STEPS[func_index]
    for _ in range(iterations):
        for number, root in enumerate(roots, start=1):
            if _norm(z - root) < NEWTON_TOLERANCE:
                return number
        try:
            z = z - step(z)
        except (ZeroDivisionError, OverflowError):
            # The iteration has left the finite plane and cannot converge.
            return 0
    return 0