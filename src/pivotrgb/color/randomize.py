"""Random and seeded color generation."""

from __future__ import annotations

import numpy as np

from pivotrgb.color.values import Color
from pivotrgb.constants import RANDOM_EDIT_ATTEMPTS
from pivotrgb.validators import validate_range

_MASK64 = (1 << 64) - 1
_GOLDEN = 0x9E3779B97F4A7C15

# Per-axis multipliers for the seeded offset generator
_MUL_X = 0xD1B54A32D192ED03
_MUL_Y = 0xABC98388FB8FAC03
_MUL_Z = 0x8CB92BA72F3D8DD7

_HALF_23_BITS = 0x7FFFFF * 0.5
_SCALE_22 = 2.0**-22


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _offset(seed: int, multiplier: int) -> float:
    # Top 23 bits of the product, centered on zero and scaled to about [-1, 1]
    return (((seed * multiplier) & _MASK64) >> 41) - _HALF_23_BITS


def random_color(rng: np.random.Generator | None = None) -> Color:
    """Opaque color with uniformly random RGB channels.

    :param rng: NumPy generator; a fresh default generator when None
    """
    if rng is None:
        rng = np.random.default_rng()
    r, g, b = rng.random(3)
    return Color(float(r), float(g), float(b), 1.0)


def subrandom_color(r: float, g: float, b: float) -> Color:
    """Opaque color from quasi-random channel inputs, clamped to [0, 1].

    Meant for low-discrepancy sequences (such as an R3 sequence) where each
    input is already roughly in [0, 1].
    """
    return Color(_clamp01(r), _clamp01(g), _clamp01(b), 1.0)


@validate_range(0.0, 1.0, "variance", param_index=2)
def random_edit(color: Color, seed: int, variance: float) -> Color:
    """Deterministically perturb a color inside a sphere in RGB space.

    The same ``seed`` always gives the same result. Up to 50 candidate offsets
    are tried; if none falls inside the sphere the color is returned as-is.

    :param color: Starting color; alpha is kept
    :param seed: Any int (negative values are treated as 64-bit unsigned)
    :param variance: Sphere radius, 0.0 to 1.0
    :returns: Perturbed color with channels clamped to [0, 1]
    """
    seed &= _MASK64
    limit = variance * variance
    for _ in range(RANDOM_EDIT_ATTEMPTS):
        x = _offset(seed, _MUL_X) * _SCALE_22 * variance
        y = _offset(seed, _MUL_Y) * _SCALE_22 * variance
        z = _offset(seed, _MUL_Z) * _SCALE_22 * variance
        seed = (seed + _GOLDEN) & _MASK64
        if x * x + y * y + z * z <= limit:
            return Color(
                _clamp01(color.r + x),
                _clamp01(color.g + y),
                _clamp01(color.b + z),
                color.a,
            )
    return color
