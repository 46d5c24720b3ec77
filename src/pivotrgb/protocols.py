"""
Protocol definitions for pivotrgb interfaces.

Defines the interfaces through which external palette data and tint stages
are consumed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from pivotrgb.color.values import Color


@runtime_checkable
class PaletteSource(Protocol):
    """
    Protocol for palette data (by value, by hue, by name).

    :class:`~pivotrgb.palette.Palette` implements this; any other source of
    named colors can be used wherever a palette is expected.
    """

    def by_name(self, name: str) -> Color:
        """
        Look up a color by name.

        :raises KeyError: If the name is unknown
        """
        ...

    def by_value(self) -> list[tuple[str, Color]]:
        """Entries ordered from darkest to lightest."""
        ...

    def by_hue(self) -> list[tuple[str, Color]]:
        """Entries ordered by hue."""
        ...


@runtime_checkable
class TintStage(Protocol):
    """Protocol for anything that tints pixel arrays (e.g. :class:`~pivotrgb.color.Tint`)."""

    def apply(self, pixels: np.ndarray, inplace: bool = False) -> np.ndarray:
        """
        Apply the stage to pixels.

        :param pixels: Channel values [N, 3|4] or [H, W, 3|4]
        :param inplace: If True, modify pixels in-place where possible
        :returns: Tinted pixels
        """
        ...

    def reset(self) -> TintStage:
        """Remove all operations."""
        ...

    def is_identity(self) -> bool:
        """Check if the stage changes nothing."""
        ...
