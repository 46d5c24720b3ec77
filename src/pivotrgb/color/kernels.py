"""
Numba-optimized kernels for tinting pixel arrays.

All kernels take pixel rows [N, C] with C = 3 (RGB) or C = 4 (RGBA) and write
into a caller-provided output buffer, which may be the input itself.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray


@njit(fastmath=True, cache=True, nogil=True, inline="always")
def _clamp01(value):
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def multiply_tint_numba(
    colors: NDArray[np.float32],
    r: float,
    g: float,
    b: float,
    a: float,
    clamp: bool,
    out: NDArray[np.float32],
) -> None:
    """
    Multiplicative tint around the 0.5 pivot: ``out = colors * tint * 2``.

    Args:
        colors: Pixel rows [N, 3] or [N, 4]
        r, g, b: Tint channels (0.5 = unchanged)
        a: Tint alpha, multiplied into the alpha column when present
        clamp: Clamp results to [0, 1]
        out: Output buffer [N, C] (modified in-place)
    """
    n = colors.shape[0]
    has_alpha = colors.shape[1] == 4
    r2 = r * 2.0
    g2 = g * 2.0
    b2 = b * 2.0

    for i in prange(n):
        vr = colors[i, 0] * r2
        vg = colors[i, 1] * g2
        vb = colors[i, 2] * b2
        if clamp:
            vr = _clamp01(vr)
            vg = _clamp01(vg)
            vb = _clamp01(vb)
        out[i, 0] = vr
        out[i, 1] = vg
        out[i, 2] = vb
        if has_alpha:
            va = colors[i, 3] * a
            out[i, 3] = _clamp01(va) if clamp else va


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def add_tint_numba(
    colors: NDArray[np.float32],
    r: float,
    g: float,
    b: float,
    a: float,
    clamp: bool,
    out: NDArray[np.float32],
) -> None:
    """
    Additive tint around the 0.5 pivot: ``out = colors + (tint - 0.5)``.

    Args:
        colors: Pixel rows [N, 3] or [N, 4]
        r, g, b: Tint channels (0.5 = unchanged)
        a: Tint alpha, multiplied into the alpha column when present
        clamp: Clamp results to [0, 1]
        out: Output buffer [N, C] (modified in-place)
    """
    n = colors.shape[0]
    has_alpha = colors.shape[1] == 4
    dr = r - 0.5
    dg = g - 0.5
    db = b - 0.5

    for i in prange(n):
        vr = colors[i, 0] + dr
        vg = colors[i, 1] + dg
        vb = colors[i, 2] + db
        if clamp:
            vr = _clamp01(vr)
            vg = _clamp01(vg)
            vb = _clamp01(vb)
        out[i, 0] = vr
        out[i, 1] = vg
        out[i, 2] = vb
        if has_alpha:
            va = colors[i, 3] * a
            out[i, 3] = _clamp01(va) if clamp else va


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def apply_lut_interleaved_numba(
    colors: NDArray[np.float32],
    lut: NDArray[np.float32],
    alpha_factor: float,
    out: NDArray[np.float32],
) -> None:
    """
    Map RGB through an interleaved LUT with linear interpolation.

    Inputs outside [0, 1] are clamped to the LUT domain. The alpha column,
    when present, is multiplied by ``alpha_factor`` and clamped.

    Args:
        colors: Pixel rows [N, 3] or [N, 4]
        lut: Interleaved LUT [lut_size, 3]
        alpha_factor: Alpha multiplier
        out: Output buffer [N, C] (modified in-place)
    """
    n = colors.shape[0]
    has_alpha = colors.shape[1] == 4
    last = lut.shape[0] - 1

    for i in prange(n):
        for c in range(3):
            pos = _clamp01(colors[i, c]) * last
            lo = int(pos)
            if lo >= last:
                out[i, c] = lut[last, c]
            else:
                frac = pos - lo
                out[i, c] = lut[lo, c] + (lut[lo + 1, c] - lut[lo, c]) * frac
        if has_alpha:
            out[i, 3] = _clamp01(colors[i, 3] * alpha_factor)
