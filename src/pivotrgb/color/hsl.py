"""Hue, saturation and lightness for RGB channel values.

Hue runs from 0.0 (red) through orange, yellow, green, blue and purple before
wrapping back to red at 1.0. Saturation as returned by :func:`saturation` is
the chroma (max channel minus min channel); :func:`rgb_to_hsl` returns the
HSL saturation used by :func:`hsl_to_rgb`.
"""

from __future__ import annotations

from pivotrgb.constants import HSL_EPSILON


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _sort_channels(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    # x = max channel, y and w are the others; z carries the hue sector offset
    if g < b:
        x, y, z, w = b, g, -1.0, 2.0 / 3.0
    else:
        x, y, z, w = g, b, 0.0, -1.0 / 3.0
    if r < x:
        z, w = w, r
    else:
        w, x = x, r
    return x, y, z, w


def hue(r: float, g: float, b: float) -> float:
    """Hue of RGB channels, from 0.0 (inclusive) to 1.0 (exclusive)."""
    x, y, z, w = _sort_channels(r, g, b)
    d = x - min(w, y)
    return abs(z + (w - y) / (6.0 * d + HSL_EPSILON))


def saturation(r: float, g: float, b: float) -> float:
    """Chroma of RGB channels: 0.0 for grays up to 1.0 for fully bright colors."""
    x, y, _, w = _sort_channels(r, g, b)
    return x - min(w, y)


def lightness(r: float, g: float, b: float) -> float:
    """Lightness of RGB channels, 0.0 (black) to 1.0 (white)."""
    x, y, _, w = _sort_channels(r, g, b)
    d = x - min(w, y)
    return x * (1.0 - 0.5 * d / (x + HSL_EPSILON))


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB channels to ``(hue, saturation, lightness)``.

    :returns: HSL triple, each component in [0, 1]
    """
    x, y, z, w = _sort_channels(r, g, b)
    d = x - min(w, y)
    light = x * (1.0 - 0.5 * d / (x + HSL_EPSILON))
    h = abs(z + (w - y) / (6.0 * d + HSL_EPSILON))
    s = (x - light) / (min(light, 1.0 - light) + HSL_EPSILON)
    return h, _clamp01(s), light


def _hue_channel(h: float) -> float:
    return _clamp01(abs(h * 6.0 - 3.0) - 1.0)


def hsl_to_rgb(h: float, s: float, light: float) -> tuple[float, float, float]:
    """Convert HSL to RGB channels.

    Hue may be any value; only its fractional part is used.

    :param h: Hue, 0.0 to 1.0 (wraps)
    :param s: Saturation, 0.0 (gray) to 1.0 (bright)
    :param light: Lightness, 0.0 (black) to 1.0 (white)
    :returns: ``(r, g, b)`` in [0, 1]
    """
    h -= int(h)
    if h < 0.0:
        h += 1.0
    y = h + 2.0 / 3.0
    z = h + 1.0 / 3.0
    y -= int(y)
    z -= int(z)

    x = _hue_channel(h)
    y = _hue_channel(y)
    z = _hue_channel(z)

    v = light + s * min(light, 1.0 - light)
    d = 2.0 * (1.0 - light / (v + HSL_EPSILON))
    return (
        _clamp01(v * (1.0 + (x - 1.0) * d)),
        _clamp01(v * (1.0 + (y - 1.0) * d)),
        _clamp01(v * (1.0 + (z - 1.0) * d)),
    )
