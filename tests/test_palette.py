"""Tests for named color palettes."""

import pytest

from pivotrgb.color.packing import pack
from pivotrgb.color.values import BLACK, NEUTRAL, WHITE, Color
from pivotrgb.palette import BASIC, Palette, normalize_name, palette_from_dict, palette_to_dict
from pivotrgb.protocols import PaletteSource

RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


@pytest.fixture
def primaries():
    """Palette of primaries plus a gray, in non-sorted order."""
    return Palette({"Blue": BLUE, "gray": NEUTRAL, "Red": RED, "Green": GREEN})


class TestByName:
    """Test name lookups."""

    def test_case_insensitive(self, primaries):
        """Test lookups ignore case."""
        assert primaries.by_name("red") == RED
        assert primaries.by_name("GREEN") == GREEN

    def test_separators_normalized(self):
        """Test spaces and underscores are interchangeable."""
        palette = palette_from_dict({"Sky Blue": "#87ceeb"})
        assert palette.by_name("sky_blue") == palette.by_name("SKY  BLUE")
        assert normalize_name("  Deep_Sea  Green ") == "deep sea green"

    def test_unknown_name_lists_available(self, primaries):
        """Test unknown names raise KeyError with the available names."""
        with pytest.raises(KeyError, match="Available: Blue, gray, Red, Green"):
            primaries.by_name("purple")

    def test_aliases(self):
        """Test aliases resolve to their entries."""
        assert BASIC.by_name("grey") == NEUTRAL
        assert BASIC.by_name("Neutral") == NEUTRAL
        assert "grey" in BASIC
        assert "purple" not in BASIC
        assert 42 not in BASIC

    def test_alias_to_unknown_raises(self):
        """Test aliases must point at existing entries."""
        with pytest.raises(KeyError, match="unknown color"):
            Palette({"red": RED}, aliases={"crimson": "scarlet"})

    def test_duplicate_names_raise(self):
        """Test names that normalize to the same key are rejected."""
        with pytest.raises(ValueError, match="Duplicate color name"):
            Palette({"Sky Blue": BLUE, "sky_blue": BLUE})

    def test_get_default(self, primaries):
        """Test get returns a default for unknown names."""
        assert primaries.get("purple") is None
        assert primaries.get("purple", BLACK) == BLACK
        assert primaries["red"] == RED


class TestOrderedViews:
    """Test by_value and by_hue."""

    def test_by_value(self):
        """Test entries sort from darkest to lightest, ties by name."""
        names = [name for name, _ in BASIC.by_value()]
        assert names == ["black", "transparent", "gray", "white"]

    def test_by_hue_grays_last(self, primaries):
        """Test chromatic entries sort by hue and grays come last."""
        names = [name for name, _ in primaries.by_hue()]
        assert names == ["Red", "Green", "Blue", "gray"]

    def test_nearest(self, primaries):
        """Test nearest finds the closest entry by RGB distance."""
        assert primaries.nearest(Color(0.9, 0.1, 0.1)) == ("Red", RED)
        assert primaries.nearest(Color(0.45, 0.5, 0.55)) == ("gray", NEUTRAL)

    def test_nearest_empty_raises(self):
        """Test nearest needs at least one entry."""
        with pytest.raises(ValueError, match="empty palette"):
            Palette({}).nearest(RED)


class TestPaletteContainer:
    """Test container behavior and immutability."""

    def test_len_iter_names(self, primaries):
        """Test len, iteration order and names."""
        assert len(primaries) == 4
        assert list(primaries) == ["Blue", "gray", "Red", "Green"]
        assert primaries.names == ["Blue", "gray", "Red", "Green"]

    def test_with_entry_returns_new_palette(self, primaries):
        """Test with_entry leaves the original untouched."""
        extended = primaries.with_entry("Purple", Color(0.5, 0.0, 0.5))
        assert "purple" in extended
        assert "purple" not in primaries
        assert len(extended) == 5

    def test_with_entry_replaces_same_name(self, primaries):
        """Test with_entry replaces entries whose names normalize equally."""
        replaced = primaries.with_entry("RED", Color(0.8, 0.0, 0.0))
        assert len(replaced) == 4
        assert replaced.by_name("red") == Color(0.8, 0.0, 0.0)

    def test_with_entry_keeps_aliases(self):
        """Test aliases survive adding entries."""
        extended = BASIC.with_entry("red", RED)
        assert extended.by_name("grey") == NEUTRAL

    def test_satisfies_palette_source_protocol(self):
        """Test Palette implements the PaletteSource protocol."""
        assert isinstance(BASIC, PaletteSource)


class TestPaletteDict:
    """Test palette_from_dict and palette_to_dict."""

    def test_value_formats(self):
        """Test hex strings, lists, packed floats and Colors are accepted."""
        palette = palette_from_dict(
            {
                "hex": "#ff0000",
                "list": [0.0, 1.0, 0.0],
                "rgba": [0.0, 0.0, 1.0, 0.5],
                "packed": pack(1.0, 1.0, 1.0),
                "color": BLACK,
            }
        )
        assert palette.by_name("hex") == RED
        assert palette.by_name("list") == GREEN
        assert palette.by_name("rgba") == Color(0.0, 0.0, 1.0, 0.5)
        assert palette.by_name("packed") == WHITE
        assert palette.by_name("color") == BLACK

    def test_aliases_key(self):
        """Test the aliases key defines aliases."""
        palette = palette_from_dict({"red": "#ff0000", "aliases": {"scarlet": "red"}})
        assert palette.by_name("scarlet") == RED
        assert len(palette) == 1

    def test_invalid_value_raises(self):
        """Test unreadable values raise ValueError."""
        with pytest.raises(ValueError, match="must be a hex string"):
            palette_from_dict({"bad": True})
        with pytest.raises(ValueError, match="must be a hex string"):
            palette_from_dict({"bad": {"r": 1.0}})
        with pytest.raises(ValueError, match="Invalid hex color"):
            palette_from_dict({"bad": "#zzz"})

    def test_integer_packed_values(self):
        """Test packed values stored as ints (as JSON may) are read as packed floats."""
        palette = palette_from_dict({"zero": 0, "white": pack(1.0, 1.0, 1.0)})
        assert palette.by_name("zero") == Color(0.0, 0.0, 0.0, 0.0)
        assert palette.by_name("white") == WHITE

    def test_aliases_must_be_mapping(self):
        """Test a malformed alias table raises ValueError."""
        with pytest.raises(ValueError, match="must map alternate names"):
            palette_from_dict({"red": "#ff0000", "aliases": [0.0, 0.0, 0.0]})

    def test_reserved_aliases_name(self):
        """Test an entry cannot use the alias table's key as its name."""
        with pytest.raises(ValueError, match="reserved for the alias table"):
            Palette({"aliases": WHITE})
        with pytest.raises(ValueError, match="reserved for the alias table"):
            BASIC.with_entry("Aliases", WHITE)

    def test_round_trip_with_aliases_and_packed(self):
        """Test a packed dict with aliases reads back to an equal palette."""
        palette = palette_from_dict({"red": "#ff0000", "aliases": {"scarlet": "red"}})
        restored = palette_from_dict(palette_to_dict(palette, packed=True))
        assert restored == palette
        assert restored.by_name("scarlet") == Color(1.0, 0.0, 0.0)

    def test_round_trip(self):
        """Test palette_to_dict output is accepted by palette_from_dict."""
        assert palette_from_dict(palette_to_dict(BASIC)) == BASIC

    def test_packed_output(self):
        """Test packed output stores floats."""
        d = palette_to_dict(BASIC, packed=True)
        assert isinstance(d["white"], float)
        assert palette_from_dict(d).by_name("white") == WHITE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
