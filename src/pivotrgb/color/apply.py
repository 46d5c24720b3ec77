"""Apply neutral-pivot tints to pixel arrays.

Pixel arrays hold channel values in [0, 1] and may be shaped [N, 3], [N, 4],
[H, W, 3] or [H, W, 4]. Image-shaped arrays are processed as rows of pixels
and returned in their original shape.

Tint modes (same math as :class:`~pivotrgb.color.values.Color`):
- multiply: ``rgb * tint * 2`` (0.5 = unchanged, higher lightens, lower darkens)
- add: ``rgb + (tint - 0.5)``
- alpha, when present, is multiplied by the tint's alpha
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from pivotrgb.color.kernels import add_tint_numba, multiply_tint_numba
from pivotrgb.color.values import Color
from pivotrgb.config import CONFIG
from pivotrgb.types import PixelArray
from pivotrgb.validators import validate_choices

logger = logging.getLogger(__name__)

TINT_MODES = ("multiply", "add")


def as_pixel_rows(pixels: PixelArray, inplace: bool) -> tuple[np.ndarray, np.ndarray]:
    """Prepare a pixel array for the row kernels.

    :param pixels: [N, C] or [H, W, C] with C in (3, 4)
    :param inplace: Reuse the input buffer when it is float32 and contiguous
    :returns: Tuple of (result array in the input's shape, [N, C] view of it)
    :raises ValueError: If the shape is not a supported pixel layout
    """
    pixels = np.asarray(pixels)
    if pixels.ndim not in (2, 3) or pixels.shape[-1] not in (3, 4):
        raise ValueError(
            f"Expected pixels with shape [N, 3|4] or [H, W, 3|4], got {pixels.shape}"
        )

    if pixels.dtype != np.float32:
        result = pixels.astype(np.float32)
    elif not pixels.flags["C_CONTIGUOUS"]:
        result = np.ascontiguousarray(pixels)
    elif inplace:
        result = pixels
    else:
        result = pixels.copy()

    return result, result.reshape(-1, result.shape[-1])


@validate_choices(TINT_MODES, "mode", param_index=2)
def apply_tint(
    pixels: PixelArray,
    tint: Color,
    mode: str = "multiply",
    clamp: bool = True,
    inplace: bool = False,
) -> NDArray[np.float32]:
    """Tint every pixel of an array.

    :param pixels: Channel values [N, 3], [N, 4], [H, W, 3] or [H, W, 4]
    :param tint: Tint color; :data:`~pivotrgb.color.values.NEUTRAL` is a no-op
    :param mode: "multiply" (pivot blend) or "add" (pivot offset)
    :param clamp: Clamp results to [0, 1]
    :param inplace: Modify the input directly when it is float32 and contiguous
    :returns: Tinted pixels as float32, same shape as the input
    :raises ValueError: If mode or shape is invalid

    Example:
        >>> image = np.full((4, 4, 3), 0.25, dtype=np.float32)
        >>> apply_tint(image, Color(0.75, 0.5, 0.25))[0, 0]
        array([0.375, 0.25 , 0.125], dtype=float32)
    """
    result, rows = as_pixel_rows(pixels, inplace)

    if tint.is_neutral():
        logger.debug("[Tint] Neutral tint, skipping %d pixels", rows.shape[0])
        return result

    kernel = multiply_tint_numba if mode == "multiply" else add_tint_numba
    kernel(rows, tint.r, tint.g, tint.b, tint.a, clamp, rows)

    logger.info("[Tint] Applied %s tint to %d pixels (clamp=%s)", mode, rows.shape[0], clamp)
    return result


def blend_arrays(
    a: np.ndarray, b: np.ndarray, clamp: bool | None = None
) -> NDArray[np.float32]:
    """Blend two equally shaped channel arrays around the 0.5 pivot.

    Equivalent to :func:`~pivotrgb.color.values.blend` per element: RGB channels
    give ``2 * a * b``, and a fourth (alpha) channel multiplies.

    :param a: Channel values [..., 3] or [..., 4]
    :param b: Channel values with the same shape as ``a``
    :param clamp: Clamp results to [0, 1] (default: CONFIG.clamp_blend)
    :returns: Blended channels as float32
    :raises ValueError: If the shapes differ or the last axis is not 3 or 4
    """
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    if a.ndim == 0 or a.shape[-1] not in (3, 4):
        raise ValueError(f"Expected last axis of size 3 or 4, got shape {a.shape}")

    out = a * b
    out[..., :3] *= 2.0
    if clamp is None:
        clamp = CONFIG.clamp_blend
    if clamp:
        np.clip(out, 0.0, 1.0, out=out)
    return out
