"""Interpolation and mixing of colors."""

from __future__ import annotations

from pivotrgb.color.values import TRANSPARENT, Color


def lerp(start: Color, end: Color, change: float) -> Color:
    """Linearly interpolate all four channels from ``start`` to ``end``.

    :param change: 0.0 returns start, 1.0 returns end
    """
    return Color(
        start.r + change * (end.r - start.r),
        start.g + change * (end.g - start.g),
        start.b + change * (end.b - start.b),
        start.a + change * (end.a - start.a),
    )


def lerp_blended(start: Color, end: Color, change: float) -> Color:
    """Interpolate RGB toward ``end`` weighted by end's alpha.

    A half-transparent ``end`` moves the color half as far; the alpha of
    ``start`` is kept.
    """
    change *= end.a
    return Color(
        start.r + change * (end.r - start.r),
        start.g + change * (end.g - start.g),
        start.b + change * (end.b - start.b),
        start.a,
    )


def mix(*colors: Color) -> Color:
    """Average any number of colors with equal weight.

    :returns: The average, or TRANSPARENT when no colors are given
    """
    if not colors:
        return TRANSPARENT
    result = colors[0]
    for i, color in enumerate(colors[1:], start=1):
        result = lerp(result, color, 1.0 / (i + 1))
    return result


def uneven_mix(*colors_and_weights: Color | float) -> Color:
    """Weighted average from alternating ``color, weight`` arguments.

    Example:
        >>> uneven_mix(BLACK, 3.0, WHITE, 1.0)  # 25% of the way to white
        Color(r=0.25, g=0.25, b=0.25, a=1.0)

    :returns: The weighted mix, or TRANSPARENT when no complete pair is given
    :raises ValueError: If the total weight is not positive
    """
    pairs = len(colors_and_weights) // 2
    if pairs == 0:
        return TRANSPARENT
    if pairs == 1:
        return colors_and_weights[0]

    weights = [float(colors_and_weights[i * 2 + 1]) for i in range(pairs)]
    total = sum(weights)
    if total <= 0.0:
        raise ValueError(f"Total weight must be positive, got {total}")

    result = colors_and_weights[0]
    current = weights[0] / total
    for i in range(1, pairs):
        weight = weights[i] / total
        current += weight
        if current > 0.0:
            result = lerp(result, colors_and_weights[i * 2], weight / current)
    return result
