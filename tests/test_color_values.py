"""Tests for Color values (neutral-pivot blend, additive tint, edits, conversions)."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

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


@pytest.fixture
def random_colors():
    """Generate sample colors with channels in [0, 1]."""
    rng = np.random.default_rng(42)
    return [Color.create(*rng.random(4)) for _ in range(200)]


class TestCreate:
    """Test construction of colors."""

    def test_create_defaults_alpha(self):
        """Test create fills in opaque alpha."""
        color = create(0.1, 0.2, 0.3)
        assert color == Color(0.1, 0.2, 0.3, 1.0)

    def test_create_accepts_out_of_range(self):
        """Test out-of-range channels are kept as given."""
        color = create(-0.5, 1.5, 2.0)
        assert (color.r, color.g, color.b) == (-0.5, 1.5, 2.0)

    def test_create_converts_to_float(self):
        """Test numpy scalars and ints become Python floats."""
        color = Color.create(np.float32(0.5), 1, 0)
        assert all(type(c) is float for c in color)

    def test_immutable(self):
        """Test colors cannot be mutated."""
        color = Color(0.1, 0.2, 0.3)
        with pytest.raises(FrozenInstanceError):
            color.r = 0.5

    def test_hashable_value_type(self):
        """Test equal colors hash equally."""
        assert len({Color(0.1, 0.2, 0.3), Color(0.1, 0.2, 0.3)}) == 1


class TestBlend:
    """Test multiplicative blend around the 0.5 pivot."""

    def test_neutral_is_identity(self, random_colors):
        """Test blending with neutral gray leaves every color unchanged."""
        for color in random_colors:
            assert blend(color, NEUTRAL) == color
            assert color * NEUTRAL == color

    def test_commutative(self, random_colors):
        """Test blend(a, b) == blend(b, a)."""
        for a, b in zip(random_colors[::2], random_colors[1::2], strict=True):
            assert blend(a, b) == blend(b, a)

    def test_formula(self):
        """Test each channel is 2 * a * b and alpha multiplies."""
        result = Color(0.2, 0.4, 0.6, 0.5).blend(Color(1.0, 0.5, 0.0, 0.5))
        assert result == Color(0.4, 0.4, 0.0, 0.25)

    def test_lightens_above_neutral(self):
        """Test tint channels above 0.5 lighten and below 0.5 darken."""
        base = Color(0.4, 0.4, 0.4)
        result = base * Color(0.75, 0.5, 0.25)
        assert result.r > base.r
        assert result.g == base.g
        assert result.b < base.b

    def test_unclamped_by_default(self):
        """Test white blended with white exceeds 1.0 unless clamped."""
        assert blend(WHITE, WHITE) == Color(2.0, 2.0, 2.0, 1.0)
        assert blend(WHITE, WHITE, clamp=True) == WHITE

    def test_zero_absorbs(self, random_colors):
        """Test black blended with anything stays black."""
        for color in random_colors:
            result = blend(BLACK, color)
            assert (result.r, result.g, result.b) == (0.0, 0.0, 0.0)

    def test_packed_form_saturates(self):
        """Test unclamped results saturate at 255 when packed."""
        overflow = blend(WHITE, WHITE)
        assert Color.from_packed(overflow.to_packed()) == WHITE

    def test_mul_rejects_other_types(self):
        """Test multiplying by a non-color is unsupported."""
        with pytest.raises(TypeError):
            Color(0.5, 0.5, 0.5) * 2


class TestTint:
    """Test additive tint around the 0.5 pivot."""

    def test_neutral_is_identity(self, random_colors):
        """Test additive tint with neutral gray is a no-op."""
        for color in random_colors:
            assert tint(color, NEUTRAL) == color

    def test_formula(self):
        """Test each channel is a + (b - 0.5)."""
        result = Color(0.2, 0.4, 0.6) + Color(0.7, 0.5, 0.3)
        assert result.r == pytest.approx(0.4)
        assert result.g == pytest.approx(0.4)
        assert result.b == pytest.approx(0.4)

    def test_clamp(self):
        """Test clamp keeps channels in [0, 1]."""
        assert tint(WHITE, WHITE, clamp=True) == WHITE
        assert tint(BLACK, BLACK, clamp=True) == BLACK

    def test_sum_support(self):
        """Test sum() works with colors via __radd__."""
        total = sum([Color(0.6, 0.5, 0.5), Color(0.6, 0.5, 0.5)])
        assert total.r == pytest.approx(0.7)
        assert total.g == pytest.approx(0.5)


class TestNeutralAndClamp:
    """Test clamp and is_neutral."""

    def test_clamp(self):
        """Test clamp limits all four channels."""
        assert Color(-1.0, 0.5, 2.0, 1.5).clamp() == Color(0.0, 0.5, 1.0, 1.0)

    def test_is_neutral(self):
        """Test is_neutral with tolerance."""
        assert NEUTRAL.is_neutral()
        assert Color(0.5 + 1e-9, 0.5, 0.5).is_neutral()
        assert not Color(0.6, 0.5, 0.5).is_neutral()
        assert not Color(0.5, 0.5, 0.5, 0.5).is_neutral()


class TestEdits:
    """Test unary edits."""

    def test_lighten(self):
        """Test lighten moves RGB toward white and keeps alpha."""
        result = Color(0.2, 0.4, 0.6, 0.3).lighten(0.5)
        assert result.to_tuple() == pytest.approx((0.6, 0.7, 0.8, 0.3))

    def test_darken(self):
        """Test darken moves RGB toward black and keeps alpha."""
        result = Color(0.2, 0.4, 0.6, 0.3).darken(0.5)
        assert result.to_tuple() == pytest.approx((0.1, 0.2, 0.3, 0.3))

    def test_fade_and_blot(self):
        """Test fade and blot change only alpha."""
        color = Color(0.2, 0.4, 0.6, 0.5)
        assert color.fade(0.5) == Color(0.2, 0.4, 0.6, 0.25)
        assert color.blot(0.5) == Color(0.2, 0.4, 0.6, 0.75)

    def test_lessen_change(self):
        """Test lessen_change interpolates from neutral to the color."""
        color = Color(0.9, 0.1, 0.5, 0.5)
        assert color.lessen_change(0.0) == NEUTRAL
        assert color.lessen_change(1.0).to_tuple() == pytest.approx(color.to_tuple())
        assert color.lessen_change(0.5).to_tuple() == pytest.approx((0.7, 0.3, 0.5, 0.75))

    def test_alpha_helpers(self):
        """Test multiply_alpha and with_alpha clamp alpha."""
        color = Color(0.2, 0.4, 0.6, 0.8)
        assert color.multiply_alpha(0.5).a == pytest.approx(0.4)
        assert color.multiply_alpha(2.0).a == 1.0
        assert color.with_alpha(-1.0).a == 0.0

    def test_edits_validate_change(self):
        """Test edit amounts outside [0, 1] raise."""
        with pytest.raises(ValueError, match="outside valid range"):
            Color(0.2, 0.2, 0.2).darken(-0.1)
        with pytest.raises(ValueError, match="outside valid range"):
            Color(0.2, 0.2, 0.2).fade(2.0)


class TestHSLProperties:
    """Test hue, saturation, lightness and HSL edits."""

    @pytest.mark.parametrize(
        "color,expected_hue",
        [
            (Color(1.0, 0.0, 0.0), 0.0),
            (Color(0.0, 1.0, 0.0), 1.0 / 3.0),
            (Color(0.0, 0.0, 1.0), 2.0 / 3.0),
        ],
    )
    def test_primary_hues(self, color, expected_hue):
        """Test hue of primary colors."""
        assert color.hue == pytest.approx(expected_hue, abs=1e-6)

    def test_saturation_and_lightness(self):
        """Test chroma and lightness of red and gray."""
        red = Color(1.0, 0.0, 0.0)
        assert red.saturation == pytest.approx(1.0)
        assert red.lightness == pytest.approx(0.5, abs=1e-6)
        assert NEUTRAL.saturation == 0.0
        assert NEUTRAL.lightness == pytest.approx(0.5)
        assert WHITE.lightness == pytest.approx(1.0)

    def test_from_hsl_primaries(self):
        """Test from_hsl builds pure red and green."""
        red = Color.from_hsl(0.0, 1.0, 0.5)
        green = Color.from_hsl(1.0 / 3.0, 1.0, 0.5)
        assert red.to_tuple() == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=1e-6)
        assert green.to_tuple() == pytest.approx((0.0, 1.0, 0.0, 1.0), abs=1e-6)

    def test_from_hsl_black(self):
        """Test very low lightness gives black with the given alpha."""
        assert Color.from_hsl(0.3, 1.0, 0.0005, 0.25) == Color(0.0, 0.0, 0.0, 0.25)

    def test_edit_hue_wraps(self):
        """Test hue edits wrap around the color wheel."""
        green = Color(1.0, 0.0, 0.0).edit(hue=1.0 / 3.0)
        assert green.to_tuple() == pytest.approx((0.0, 1.0, 0.0, 1.0), abs=1e-6)
        red = Color(0.0, 0.0, 1.0).edit(hue=1.0 / 3.0)
        assert red.to_tuple() == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=1e-6)

    def test_edit_clamps(self):
        """Test lightness and alpha edits clamp into [0, 1]."""
        result = Color(0.2, 0.4, 0.6, 0.5).edit(lightness=5.0, alpha=-5.0)
        assert result.to_tuple() == pytest.approx((1.0, 1.0, 1.0, 0.0), abs=1e-6)

    def test_edit_no_change(self):
        """Test an empty edit keeps the color (within HSL round-off)."""
        color = Color(0.2, 0.4, 0.6, 0.5)
        assert color.edit().to_tuple() == pytest.approx(color.to_tuple(), abs=1e-6)


class TestConversions:
    """Test packed, RGBA8888 and hex conversions."""

    def test_packed_round_trip(self, random_colors):
        """Test unpack(pack(c)) stays within one 8-bit step."""
        for color in random_colors:
            decoded = Color.from_packed(color.to_packed())
            for original, restored in zip(color, decoded, strict=True):
                assert abs(original - restored) <= 1.0 / 127.0

    def test_rgba8888(self):
        """Test RGBA8888 ints order channels as 0xRRGGBBAA."""
        assert Color(1.0, 0.0, 0.0, 1.0).to_rgba8888() == 0xFF0000FE
        assert Color.from_rgba8888(0x00FF00FF) == Color(0.0, 1.0, 0.0, 1.0)

    def test_hex(self):
        """Test hex formatting and parsing."""
        assert Color(1.0, 0.5, 0.0).to_hex() == "#ff8000"
        assert Color(1.0, 0.0, 0.0, 0.0).to_hex(include_alpha=True) == "#ff000000"
        assert Color.from_hex("#ff8000") == Color(1.0, 128 / 255.0, 0.0)
        assert Color.from_hex("f80") == Color.from_hex("#ff8800")
        assert Color.from_hex("#00000000") == TRANSPARENT

    def test_invalid_hex_raises(self):
        """Test malformed hex strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid hex color"):
            Color.from_hex("#12345")
        with pytest.raises(ValueError, match="Invalid hex color"):
            Color.from_hex("orange")

    def test_iteration(self):
        """Test colors unpack as (r, g, b, a)."""
        r, g, b, a = Color(0.1, 0.2, 0.3, 0.4)
        assert (r, g, b, a) == (0.1, 0.2, 0.3, 0.4)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
