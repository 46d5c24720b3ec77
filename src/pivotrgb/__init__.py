"""
pivotrgb - RGB colors with a neutral point of 0.5

In this color space every channel is neutral at 0.5 instead of 1.0, so a
tint color can lighten as well as darken when multiplied in: channels above
0.5 push toward 1, channels below 0.5 push toward 0, and 0.5 leaves the
channel unchanged.

Features:
- Immutable Color values with multiplicative (``*``) and additive (``+``) tints
- Packed-float encoding (ABGR, 7-bit alpha) for compact color storage
- HSL queries and edits, lighten/darken/fade, interpolation and mixing
- Seeded random colors and deterministic random edits
- Numba-accelerated tinting of pixel arrays and LUT-compiled Tint pipelines
- Named palettes viewed by name, value, and hue
- Tint presets and frozen configuration

Example - Colors:
    >>> from pivotrgb import Color, NEUTRAL
    >>> base = Color(0.2, 0.4, 0.6)
    >>> base * NEUTRAL == base
    True
    >>> base * Color(1.0, 0.5, 0.0)
    Color(r=0.4, g=0.4, b=0.0, a=1.0)

Example - Pixel arrays:
    >>> from pivotrgb import Tint, apply_tint, WARM
    >>> tinted = apply_tint(image, WARM)                  # [H, W, 3] or [N, 4]
    >>> tinted = Tint().multiply(WARM).contrast(1.1).lessen(0.5)(image)
"""

__version__ = "0.1.0"

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
from pivotrgb.color.hsl import hsl_to_rgb, rgb_to_hsl
from pivotrgb.color.ops import lerp, lerp_blended, mix, uneven_mix
from pivotrgb.color.packing import pack, pack_array, unpack, unpack_array
from pivotrgb.color.randomize import random_color, random_edit, subrandom_color
from pivotrgb.color.apply import apply_tint, blend_arrays
from pivotrgb.color.pipeline import Tint
from pivotrgb.config import (
    CONFIG,
    COOL,
    SEPIA,
    TINT_PRESETS,
    WARM,
    OperationSpec,
    PivotConfig,
    TintConfig,
    get_tint_preset,
    tint_from_dict,
    tint_to_dict,
)
from pivotrgb.palette import BASIC, Palette, palette_from_dict, palette_to_dict
from pivotrgb.protocols import PaletteSource, TintStage

__all__ = [
    "__version__",
    # Colors
    "Color",
    "NEUTRAL",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "create",
    "blend",
    "tint",
    "rgb_to_hsl",
    "hsl_to_rgb",
    # Packing
    "pack",
    "unpack",
    "pack_array",
    "unpack_array",
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
    # Config
    "CONFIG",
    "PivotConfig",
    "TintConfig",
    "OperationSpec",
    # Presets
    "WARM",
    "COOL",
    "SEPIA",
    "TINT_PRESETS",
    "get_tint_preset",
    "tint_from_dict",
    "tint_to_dict",
    # Palettes
    "Palette",
    "BASIC",
    "palette_from_dict",
    "palette_to_dict",
    # Protocols
    "PaletteSource",
    "TintStage",
]
