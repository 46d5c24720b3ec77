"""
Palette module - named colors viewed by name, by value, and by hue.

Example:
    >>> from pivotrgb.palette import BASIC
    >>> BASIC.by_name("Grey")
    Color(r=0.5, g=0.5, b=0.5, a=1.0)
"""

from pivotrgb.palette.palette import (
    BASIC,
    GRAY_SATURATION,
    Palette,
    normalize_name,
    palette_from_dict,
    palette_to_dict,
)

__all__ = [
    "Palette",
    "BASIC",
    "GRAY_SATURATION",
    "normalize_name",
    "palette_from_dict",
    "palette_to_dict",
]
