"""Configuration module for pivotrgb operations.

This module provides parameter specifications for tint operations, the
library-wide defaults, and named tint presets.

Usage:
    from pivotrgb.config import CONFIG
    CONFIG.tint.multiply.neutral  # 0.5
    CONFIG.lut_size  # 1024

    from pivotrgb.config import get_tint_preset
    get_tint_preset("warm")  # Color(r=0.6, g=0.5, b=0.4, a=1.0)
"""

from pivotrgb.config.config import CONFIG, TINT_CONFIG, PivotConfig
from pivotrgb.config.operations import OperationSpec
from pivotrgb.config.presets import (
    BRIGHTEN,
    COOL,
    DARKEN,
    FADED,
    FOREST,
    GOLDEN_HOUR,
    MOONLIGHT,
    NEUTRAL,
    NIGHT_VISION,
    SEPIA,
    SUNSET,
    TINT_PRESETS,
    WARM,
    get_tint_preset,
    tint_from_dict,
    tint_to_dict,
)
from pivotrgb.config.tint import TintConfig

__all__ = [
    # Config
    "CONFIG",
    "TINT_CONFIG",
    "PivotConfig",
    "TintConfig",
    "OperationSpec",
    # Presets
    "NEUTRAL",
    "WARM",
    "COOL",
    "BRIGHTEN",
    "DARKEN",
    "SEPIA",
    "GOLDEN_HOUR",
    "MOONLIGHT",
    "SUNSET",
    "FOREST",
    "NIGHT_VISION",
    "FADED",
    "TINT_PRESETS",
    "get_tint_preset",
    "tint_from_dict",
    "tint_to_dict",
]
