"""Packed-float color encoding.

A packed color stores four channels in the raw bits of one float32::

    bits 24-31  alpha (7 bits, lowest bit always cleared)
    bits 16-23  blue
    bits  8-15  green
    bits  0-7   red

Clearing the low alpha bit keeps the exponent below 255, so a packed color is
never NaN or infinite and survives float round-trips unchanged.

Example:
    >>> packed = pack(1.0, 0.5, 0.0)
    >>> red_int(packed), green_int(packed), blue_int(packed), alpha_int(packed)
    (255, 127, 0, 254)
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pivotrgb.constants import (
    ALPHA_DECODE,
    ALPHA_MASK,
    CHANNEL_MASK,
    ENCODE_SCALE,
    RGB_MASK,
)


def float_to_bits(packed: float) -> int:
    """Get the raw 32 bits of a packed float as an unsigned int."""
    return int(np.float32(packed).view(np.uint32))


def bits_to_float(bits: int) -> float:
    """Reinterpret 32 raw bits as a float32, returned as a Python float."""
    return float(np.uint32(bits & 0xFFFFFFFF).view(np.float32))


def _saturate(value: float) -> float:
    # NaN compares false both ways and would slip through min/max
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def _encode_channel(value: float) -> int:
    return int(_saturate(value) * ENCODE_SCALE)


def _encode_alpha(value: float) -> int:
    return int(_saturate(value) * 255.0) & 0xFE


def pack_bits(r: float, g: float, b: float, a: float = 1.0) -> int:
    """Encode channels into packed bits, clamping each channel to [0, 1].

    Infinite channels saturate like any other out-of-range value and NaN
    channels encode as 0.

    :param r: Red, 0.0 to 1.0
    :param g: Green, 0.0 to 1.0
    :param b: Blue, 0.0 to 1.0
    :param a: Alpha, 0.0 (transparent) to 1.0 (opaque)
    :returns: 32-bit unsigned int in the packed layout
    """
    return (
        _encode_channel(r)
        | _encode_channel(g) << 8
        | _encode_channel(b) << 16
        | _encode_alpha(a) << 24
    )


def pack(r: float, g: float, b: float, a: float = 1.0) -> float:
    """Encode channels into a packed float.

    Channels outside [0, 1] saturate, so ``pack(2.0, 0, 0)`` stores full red.

    :returns: Packed color
    """
    return bits_to_float(pack_bits(r, g, b, a))


def unpack(packed: float) -> tuple[float, float, float, float]:
    """Decode a packed float into ``(r, g, b, a)`` floats in [0, 1]."""
    bits = float_to_bits(packed)
    return (
        (bits & CHANNEL_MASK) / 255.0,
        (bits >> 8 & CHANNEL_MASK) / 255.0,
        (bits >> 16 & CHANNEL_MASK) / 255.0,
        ((bits & ALPHA_MASK) >> 24) / ALPHA_DECODE,
    )


def red_int(packed: float) -> int:
    """Red channel of a packed color, 0 to 255."""
    return float_to_bits(packed) & CHANNEL_MASK


def green_int(packed: float) -> int:
    """Green channel of a packed color, 0 to 255."""
    return float_to_bits(packed) >> 8 & CHANNEL_MASK


def blue_int(packed: float) -> int:
    """Blue channel of a packed color, 0 to 255."""
    return float_to_bits(packed) >> 16 & CHANNEL_MASK


def alpha_int(packed: float) -> int:
    """Alpha channel of a packed color, an even int from 0 to 254."""
    return (float_to_bits(packed) & ALPHA_MASK) >> 24


def red(packed: float) -> float:
    return red_int(packed) / 255.0


def green(packed: float) -> float:
    return green_int(packed) / 255.0


def blue(packed: float) -> float:
    return blue_int(packed) / 255.0


def alpha(packed: float) -> float:
    return alpha_int(packed) / ALPHA_DECODE


def _reverse_bytes(value: int) -> int:
    return int.from_bytes((value & 0xFFFFFFFF).to_bytes(4, "little"), "big")


def to_rgba8888(packed: float) -> int:
    """Convert a packed color to an ``0xRRGGBBAA`` int."""
    return _reverse_bytes(float_to_bits(packed))


def from_rgba8888(rgba: int) -> float:
    """Convert an ``0xRRGGBBAA`` int to a packed color.

    The lowest alpha bit is dropped, so alpha 0xFF becomes 0xFE.
    """
    return bits_to_float(_reverse_bytes(rgba) & (ALPHA_MASK | RGB_MASK))


# =============================================================================
# Array versions
# =============================================================================


def pack_array(colors: NDArray[np.floating]) -> NDArray[np.float32]:
    """Pack an array of colors.

    Channels saturate to [0, 1] and NaN encodes as 0, as in :func:`pack_bits`.

    :param colors: Channel values [N, 3] or [N, 4]; missing alpha means opaque
    :returns: Packed colors [N] as float32
    :raises ValueError: If colors is not [N, 3] or [N, 4]
    """
    colors = np.asarray(colors, dtype=np.float64)
    if colors.ndim != 2 or colors.shape[1] not in (3, 4):
        raise ValueError(f"Expected colors with shape [N, 3] or [N, 4], got {colors.shape}")

    colors = np.nan_to_num(np.clip(colors, 0.0, 1.0), nan=0.0)
    rgb = np.trunc(colors[:, :3] * ENCODE_SCALE).astype(np.uint32)
    if colors.shape[1] == 4:
        a = np.trunc(colors[:, 3] * 255.0).astype(np.uint32) & 0xFE
    else:
        a = np.full(colors.shape[0], 0xFE, dtype=np.uint32)

    bits = rgb[:, 0] | (rgb[:, 1] << 8) | (rgb[:, 2] << 16) | (a << 24)
    return bits.astype(np.uint32).view(np.float32)


def unpack_array(packed: NDArray[np.float32]) -> NDArray[np.float32]:
    """Unpack an array of packed colors.

    :param packed: Packed colors [N]
    :returns: RGBA channel values [N, 4] as float32
    """
    bits = np.ascontiguousarray(packed, dtype=np.float32).view(np.uint32)
    out = np.empty((bits.shape[0], 4), dtype=np.float32)
    out[:, 0] = (bits & CHANNEL_MASK) / 255.0
    out[:, 1] = (bits >> 8 & CHANNEL_MASK) / 255.0
    out[:, 2] = (bits >> 16 & CHANNEL_MASK) / 255.0
    out[:, 3] = ((bits & ALPHA_MASK) >> 24) / ALPHA_DECODE
    return out
