"""Preset library of tint colors.

Presets are plain :class:`~pivotrgb.color.values.Color` values meant to be
used as the tint argument of blend, ``apply_tint`` or ``Tint.multiply``.
"""

from __future__ import annotations

from pivotrgb.color.values import Color

# ============================================================================
# Tint Presets
# ============================================================================

NEUTRAL = Color(0.5, 0.5, 0.5)

WARM = Color(0.6, 0.5, 0.4)
COOL = Color(0.4, 0.5, 0.6)

BRIGHTEN = Color(0.625, 0.625, 0.625)
DARKEN = Color(0.375, 0.375, 0.375)

SEPIA = Color(0.62, 0.52, 0.38)
GOLDEN_HOUR = Color(0.68, 0.55, 0.36)
MOONLIGHT = Color(0.4, 0.45, 0.62)
SUNSET = Color(0.7, 0.45, 0.4)
FOREST = Color(0.44, 0.58, 0.44)
NIGHT_VISION = Color(0.3, 0.75, 0.3)
FADED = Color(0.5, 0.5, 0.5, 0.75)

TINT_PRESETS: dict[str, Color] = {
    "neutral": NEUTRAL,
    "warm": WARM,
    "cool": COOL,
    "brighten": BRIGHTEN,
    "darken": DARKEN,
    "sepia": SEPIA,
    "golden_hour": GOLDEN_HOUR,
    "moonlight": MOONLIGHT,
    "sunset": SUNSET,
    "forest": FOREST,
    "night_vision": NIGHT_VISION,
    "faded": FADED,
}


def get_tint_preset(name: str) -> Color:
    """Get tint preset by name.

    :param name: Preset name (case-insensitive)
    :returns: Tint color
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in TINT_PRESETS:
        available = ", ".join(TINT_PRESETS.keys())
        raise KeyError(f"Unknown tint preset '{name}'. Available: {available}")
    return TINT_PRESETS[name_lower]


# ============================================================================
# Dict Loading/Saving
# ============================================================================


def tint_from_dict(d: dict) -> Color:
    """Create a tint color from a dictionary.

    Accepts channel keys (``r``, ``g``, ``b``, optional ``a``; missing RGB
    channels default to neutral 0.5), a ``hex`` string, or a ``preset`` name.

    :param d: Dictionary with tint parameters
    :returns: Tint color
    :raises KeyError: If a preset name is unknown
    :raises ValueError: If a hex string is malformed

    Example:
        >>> tint_from_dict({"r": 0.7, "b": 0.3})
        Color(r=0.7, g=0.5, b=0.3, a=1.0)
        >>> tint_from_dict({"preset": "warm"})
        Color(r=0.6, g=0.5, b=0.4, a=1.0)
    """
    if "preset" in d:
        return get_tint_preset(d["preset"])
    if "hex" in d:
        return Color.from_hex(d["hex"])

    valid_fields = {"r", "g", "b", "a"}
    kwargs = {k: float(v) for k, v in d.items() if k in valid_fields}
    return Color(
        kwargs.get("r", 0.5),
        kwargs.get("g", 0.5),
        kwargs.get("b", 0.5),
        kwargs.get("a", 1.0),
    )


def tint_to_dict(color: Color) -> dict:
    """Convert a tint color to a dictionary.

    :param color: Tint color
    :returns: Dictionary with ``r``, ``g``, ``b`` and ``a`` keys
    """
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}
