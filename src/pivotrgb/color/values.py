"""Neutral-pivot RGB color values.

In this color space a channel value of 0.5 is neutral instead of 1.0. Blending
one color with another multiplies each channel and doubles the result, so a
tint channel above 0.5 lightens, a tint channel below 0.5 darkens, and 0.5
leaves the channel unchanged:

    blend(a, b).c = 2 * a.c * b.c

Colors are immutable; every operation returns a new Color.

Example:
    >>> base = Color(0.2, 0.4, 0.6)
    >>> base * NEUTRAL == base
    True
    >>> base.blend(Color(1.0, 0.5, 0.0))
    Color(r=0.4, g=0.4, b=0.0, a=1.0)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pivotrgb.color import hsl, packing
from pivotrgb.constants import BLACK_LIGHTNESS, NEUTRAL_VALUE
from pivotrgb.validators import validate_range

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class Color:
    """RGBA color with 0.5 as the neutral channel value.

    Channels are plain floats and are not validated: values outside [0, 1]
    are kept until :meth:`clamp` is called or the color is packed.

    Composition:
    - ``a * b`` / :meth:`blend`: multiplicative tint, ``2 * a * b`` per channel
    - ``a + b`` / :meth:`tint`: additive tint, ``a + (b - 0.5)`` per channel
    - alpha always multiplies
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def create(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Create a color from channel values (not range-checked)."""
        return cls(float(r), float(g), float(b), float(a))

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def blend(self, other: Color, clamp: bool = False) -> Color:
        """Multiplicatively blend with another color around the 0.5 pivot.

        :param other: Tint color; 0.5 channels leave this color unchanged
        :param clamp: Clamp the resulting channels into [0, 1]
        :returns: New blended color
        """
        result = Color(
            2.0 * self.r * other.r,
            2.0 * self.g * other.g,
            2.0 * self.b * other.b,
            self.a * other.a,
        )
        return result.clamp() if clamp else result

    def tint(self, other: Color, clamp: bool = False) -> Color:
        """Additively tint with another color around the 0.5 pivot.

        :param other: Tint color; 0.5 channels leave this color unchanged
        :param clamp: Clamp the resulting channels into [0, 1]
        :returns: New tinted color
        """
        result = Color(
            self.r + (other.r - NEUTRAL_VALUE),
            self.g + (other.g - NEUTRAL_VALUE),
            self.b + (other.b - NEUTRAL_VALUE),
            self.a * other.a,
        )
        return result.clamp() if clamp else result

    def __mul__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return self.blend(other)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return self.tint(other)

    def __radd__(self, other):
        """Support sum() with initial value 0."""
        if other == 0:
            return self
        return self.__add__(other)

    def clamp(self) -> Color:
        """Clamp all channels to [0, 1]."""
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b), _clamp01(self.a))

    def is_neutral(self, tolerance: float = 1e-6) -> bool:
        """Check if blending or tinting with this color is a no-op."""
        return (
            abs(self.r - NEUTRAL_VALUE) < tolerance
            and abs(self.g - NEUTRAL_VALUE) < tolerance
            and abs(self.b - NEUTRAL_VALUE) < tolerance
            and abs(self.a - 1.0) < tolerance
        )

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    @validate_range(0.0, 1.0, "change")
    def lighten(self, change: float) -> Color:
        """Move RGB toward white by ``change``; alpha is kept."""
        return Color(
            self.r + (1.0 - self.r) * change,
            self.g + (1.0 - self.g) * change,
            self.b + (1.0 - self.b) * change,
            self.a,
        )

    @validate_range(0.0, 1.0, "change")
    def darken(self, change: float) -> Color:
        """Move RGB toward black by ``change``; alpha is kept."""
        keep = 1.0 - change
        return Color(self.r * keep, self.g * keep, self.b * keep, self.a)

    @validate_range(0.0, 1.0, "change")
    def blot(self, change: float) -> Color:
        """Move alpha toward fully opaque by ``change``."""
        return Color(self.r, self.g, self.b, self.a + (1.0 - self.a) * change)

    @validate_range(0.0, 1.0, "change")
    def fade(self, change: float) -> Color:
        """Move alpha toward fully transparent by ``change``."""
        return Color(self.r, self.g, self.b, self.a * (1.0 - change))

    @validate_range(0.0, 1.0, "fraction")
    def lessen_change(self, fraction: float) -> Color:
        """Weaken this color as a tint.

        Interpolates from opaque neutral gray (fraction 0.0) to this color
        (fraction 1.0), so blending with the result has a proportionally
        smaller effect.
        """
        return Color(
            NEUTRAL_VALUE + fraction * (self.r - NEUTRAL_VALUE),
            NEUTRAL_VALUE + fraction * (self.g - NEUTRAL_VALUE),
            NEUTRAL_VALUE + fraction * (self.b - NEUTRAL_VALUE),
            1.0 + fraction * (self.a - 1.0),
        )

    def multiply_alpha(self, factor: float) -> Color:
        """Multiply alpha by ``factor``, clamping the result to [0, 1]."""
        return Color(self.r, self.g, self.b, _clamp01(self.a * factor))

    def with_alpha(self, alpha: float) -> Color:
        """Replace alpha, clamped to [0, 1]."""
        return Color(self.r, self.g, self.b, _clamp01(alpha))

    def edit(
        self,
        hue: float = 0.0,
        saturation: float = 0.0,
        lightness: float = 0.0,
        alpha: float = 0.0,
    ) -> Color:
        """Apply additive HSL and alpha changes.

        Hue wraps around the color wheel; saturation, lightness and alpha are
        clamped to [0, 1] after the change.

        :param hue: Hue change, -1.0 to 1.0
        :param saturation: HSL saturation change, -1.0 to 1.0
        :param lightness: Lightness change, -1.0 to 1.0
        :param alpha: Alpha change, -1.0 to 1.0
        :returns: Edited color
        """
        h, s, light = hsl.rgb_to_hsl(self.r, self.g, self.b)
        h += hue + 1.0
        return Color.from_hsl(
            h - int(h),
            _clamp01(s + saturation),
            _clamp01(light + lightness),
            _clamp01(self.a + alpha),
        )

    # ------------------------------------------------------------------
    # HSL
    # ------------------------------------------------------------------

    @property
    def hue(self) -> float:
        return hsl.hue(self.r, self.g, self.b)

    @property
    def saturation(self) -> float:
        return hsl.saturation(self.r, self.g, self.b)

    @property
    def lightness(self) -> float:
        return hsl.lightness(self.r, self.g, self.b)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> Color:
        """Create a color from hue, saturation and lightness.

        Lightness at or below 0.001 always gives black with the given alpha.
        """
        if lightness <= BLACK_LIGHTNESS:
            return cls(0.0, 0.0, 0.0, alpha)
        r, g, b = hsl.hsl_to_rgb(hue, saturation, lightness)
        return cls(r, g, b, alpha)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_packed(self) -> float:
        """Encode as a packed float; channels outside [0, 1] saturate."""
        return packing.pack(self.r, self.g, self.b, self.a)

    @classmethod
    def from_packed(cls, packed: float) -> Color:
        return cls(*packing.unpack(packed))

    def to_rgba8888(self) -> int:
        return packing.to_rgba8888(self.to_packed())

    @classmethod
    def from_rgba8888(cls, rgba: int) -> Color:
        return cls.from_packed(packing.from_rgba8888(rgba))

    def to_hex(self, include_alpha: bool = False) -> str:
        """Format as ``#rrggbb`` (or ``#rrggbbaa``), clamping channels."""
        channels = (self.r, self.g, self.b, self.a) if include_alpha else (self.r, self.g, self.b)
        return "#" + "".join(f"{round(_clamp01(c) * 255):02x}" for c in channels)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

        :raises ValueError: If the text is not a hex color
        """
        match = _HEX_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid hex color '{text}'. Expected #rgb, #rrggbb or #rrggbbaa")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        values = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
        return cls(*values)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a


# Anchor colors
NEUTRAL = Color(NEUTRAL_VALUE, NEUTRAL_VALUE, NEUTRAL_VALUE, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)


def create(r: float, g: float, b: float, a: float = 1.0) -> Color:
    """Create a color from channel values."""
    return Color.create(r, g, b, a)


def blend(a: Color, b: Color, clamp: bool = False) -> Color:
    """Blend two colors multiplicatively around the 0.5 pivot.

    Commutative, with :data:`NEUTRAL` as identity. Never raises; channels are
    clamped only when ``clamp`` is True.
    """
    return a.blend(b, clamp=clamp)


def tint(a: Color, b: Color, clamp: bool = False) -> Color:
    """Tint two colors additively around the 0.5 pivot."""
    return a.tint(b, clamp=clamp)
