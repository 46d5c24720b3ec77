"""Tint operation configuration.

Parameter specifications for the operations of the Tint pipeline. Channel
specs (multiply, add) apply to each of R, G and B separately.
"""

from __future__ import annotations

from dataclasses import dataclass

from pivotrgb.config.operations import OperationSpec


@dataclass(frozen=True)
class TintConfig:
    """Configuration for all tint pipeline operations."""

    multiply: OperationSpec = OperationSpec(
        name="multiply",
        min_value=0.0,
        max_value=1.0,
        neutral=0.5,
        composition="pivot",
        description="Multiplicative tint channel: 0=black, 0.5=no change, 1=double",
    )

    add: OperationSpec = OperationSpec(
        name="add",
        min_value=0.0,
        max_value=1.0,
        neutral=0.5,
        composition="additive",
        description="Additive tint channel: 0=-0.5, 0.5=no change, 1=+0.5",
    )

    lighten: OperationSpec = OperationSpec(
        name="lighten",
        min_value=0.0,
        max_value=1.0,
        neutral=0.0,
        composition="complement",
        description="Move toward white: 0=no change, 1=white",
    )

    darken: OperationSpec = OperationSpec(
        name="darken",
        min_value=0.0,
        max_value=1.0,
        neutral=0.0,
        composition="complement",
        description="Move toward black: 0=no change, 1=black",
    )

    contrast: OperationSpec = OperationSpec(
        name="contrast",
        min_value=0.0,
        max_value=5.0,
        neutral=1.0,
        composition="multiplicative",
        description="Contrast around 0.5: 1.0=no change",
    )

    lessen: OperationSpec = OperationSpec(
        name="lessen",
        min_value=0.0,
        max_value=1.0,
        neutral=1.0,
        composition="multiplicative",
        description="Strength kept of the tint so far: 0=none, 1=full",
    )

    alpha: OperationSpec = OperationSpec(
        name="alpha",
        min_value=0.0,
        max_value=1.0,
        neutral=1.0,
        composition="multiplicative",
        description="Alpha factor: 0=transparent, 1=no change",
    )

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping operation names to specs
        """
        return {
            "multiply": self.multiply,
            "add": self.add,
            "lighten": self.lighten,
            "darken": self.darken,
            "contrast": self.contrast,
            "lessen": self.lessen,
            "alpha": self.alpha,
        }
