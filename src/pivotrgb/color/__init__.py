"""
Color module - neutral-pivot color values, packing, and pixel tinting.

Example:
    >>> from pivotrgb.color import Color, Tint, apply_tint
    >>> warm = Color(0.75, 0.5, 0.25)
    >>> Color(0.25, 0.5, 0.75) * warm
    Color(r=0.375, g=0.5, b=0.375, a=1.0)
    >>> result = Tint().multiply(warm).lessen(0.5)(pixels)
"""

from pivotrgb.color.values import (
    BLACK,
    NEUTRAL,
    TRANSPARENT,
    WHITE,
    Color,
    blend,
    create,
    tint,
)
from pivotrgb.color.ops import lerp, lerp_blended, mix, uneven_mix
from pivotrgb.color.randomize import random_color, random_edit, subrandom_color
from pivotrgb.color.apply import apply_tint, blend_arrays
from pivotrgb.color.pipeline import Tint

__all__ = [
    "Color",
    "NEUTRAL",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "create",
    "blend",
    "tint",
    # Interpolation
    "lerp",
    "lerp_blended",
    "mix",
    "uneven_mix",
    # Random
    "random_color",
    "subrandom_color",
    "random_edit",
    # Arrays
    "apply_tint",
    "blend_arrays",
    "Tint",
]
