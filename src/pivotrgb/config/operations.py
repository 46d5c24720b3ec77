"""Argument limits and stacking rules for tint operations.

Every operation a :class:`~pivotrgb.color.Tint` pipeline accepts has an
:class:`OperationSpec`. The pipeline checks its arguments against
``min_value``/``max_value``, treats ``neutral`` as "no change" when looking for
identity pipelines, and uses :meth:`OperationSpec.combine` to fold a run of
the same operation into one step before compiling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

# How two consecutive values of one operation fold into a single value:
#   multiplicative  a * b            (contrast factors, lessen fractions)
#   additive        a + b - neutral  (offsets around the pivot)
#   pivot           a * b / neutral  (2ab for the 0.5 pivot, the blend rule)
#   complement      1 - (1-a)(1-b)   (fractions of the remaining distance)
Composition = Literal["multiplicative", "additive", "pivot", "complement"]


@dataclass(frozen=True)
class OperationSpec:
    """Limits and stacking rule of one tint operation argument.

    Channel operations (multiply, add) apply the same spec to R, G and B.

    Attributes:
        name: Operation name, as used by the Tint pipeline
        min_value: Smallest accepted argument
        max_value: Largest accepted argument
        neutral: Argument that leaves pixels unchanged
        composition: Rule for folding two consecutive arguments
        description: What the argument means at its extremes
    """

    name: str
    min_value: float
    max_value: float
    neutral: float
    composition: Composition
    description: str = ""

    def validate(self, value: float) -> float:
        """Saturate a value into ``[min_value, max_value]``.

        :param value: Number to saturate
        :returns: The value as a float within the limits
        :raises ValueError: If value is not a number or is NaN
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")
        if math.isnan(value):
            raise ValueError(f"{self.name}: expected number, got NaN")
        return max(self.min_value, min(self.max_value, float(value)))

    def is_neutral(self, value: float, tolerance: float = 1e-6) -> bool:
        """Check if ``value`` leaves pixels unchanged."""
        return abs(value - self.neutral) < tolerance

    def combine(self, a: float, b: float) -> float:
        """Fold ``a`` followed by ``b`` into one argument with the same effect.

        :param a: Earlier argument
        :param b: Later argument
        :returns: Single equivalent argument
        """
        if self.composition == "multiplicative":
            return a * b
        if self.composition == "pivot":
            return a * b / self.neutral
        if self.composition == "complement":
            return 1.0 - (1.0 - a) * (1.0 - b)
        # additive: both offsets are measured from neutral
        return a + b - self.neutral

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"neutral={self.neutral}, {self.composition})"
        )
