"""Unified pivotrgb configuration.

Top-level configuration dataclass holding the tint operation specs and the
library-wide defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

from pivotrgb.config.tint import TintConfig
from pivotrgb.constants import DEFAULT_LUT_SIZE


@dataclass(frozen=True)
class PivotConfig:
    """Top-level configuration.

    Provides hierarchical access to operation specifications:
        CONFIG.tint.multiply
        CONFIG.tint.lighten

    Attributes:
        tint: Tint pipeline operation specifications
        clamp_blend: Default for the ``clamp`` argument of blend (channels
            above 1.0 are kept unless clamping is requested)
        lut_size: Default LUT resolution for Tint pipelines
    """

    tint: TintConfig = TintConfig()
    clamp_blend: bool = False
    lut_size: int = DEFAULT_LUT_SIZE

    def get_all_specs(self) -> dict[str, dict[str, object]]:
        """Get all operation specs organized by process."""
        return {"tint": self.tint.get_all_specs()}


# Main singleton instance
CONFIG = PivotConfig()

TINT_CONFIG = CONFIG.tint
