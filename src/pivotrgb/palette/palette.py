"""Named color palettes.

A Palette is an immutable, ordered mapping from names to colors with the
three views that palette data is usually consumed through:

- by name (case-insensitive; spaces and underscores are interchangeable)
- by value (darkest to lightest)
- by hue (red through purple, with grays last)

Example:
    >>> palette = palette_from_dict({"Sky Blue": "#87ceeb", "rust": [0.72, 0.25, 0.05]})
    >>> palette.by_name("sky_blue").to_hex()
    '#87ceeb'
    >>> [name for name, _ in palette.by_value()]
    ['rust', 'Sky Blue']
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping

from pivotrgb.color.values import BLACK, NEUTRAL, TRANSPARENT, WHITE, Color
from pivotrgb.types import ChannelsLike

logger = logging.getLogger(__name__)

# Colors with a chroma below this sort as grays in by_hue()
GRAY_SATURATION = 0.05

_SEPARATORS = re.compile(r"[\s_]+")

# Key of the alias table in palette dicts
ALIASES_KEY = "aliases"


def normalize_name(name: str) -> str:
    """Normalize a color name for lookup: lowercase, single spaces."""
    return _SEPARATORS.sub(" ", name.strip().lower())


class Palette:
    """Immutable named color palette.

    :param entries: Mapping of display name to color, in palette order
    :param aliases: Optional mapping of alternate name to an entry name
    :raises ValueError: If two names normalize to the same key, or a name is
        reserved (``"aliases"`` holds the alias table in palette dicts)
    :raises KeyError: If an alias points to an unknown entry
    """

    __slots__ = ("_entries", "_index", "_aliases")

    def __init__(self, entries: Mapping[str, Color], aliases: Mapping[str, str] | None = None):
        self._entries: dict[str, Color] = dict(entries)
        self._index: dict[str, str] = {}
        for name in self._entries:
            key = normalize_name(name)
            if key == ALIASES_KEY:
                raise ValueError(f"Color name '{name}' is reserved for the alias table")
            if key in self._index:
                raise ValueError(
                    f"Duplicate color name '{name}' (same as '{self._index[key]}')"
                )
            self._index[key] = name

        self._aliases: dict[str, str] = {}
        for alias, target in (aliases or {}).items():
            target_key = normalize_name(target)
            if target_key not in self._index:
                raise KeyError(f"Alias '{alias}' points to unknown color '{target}'")
            self._aliases[normalize_name(alias)] = self._index[target_key]

        logger.debug(
            "[Palette] Created with %d colors, %d aliases", len(self._entries), len(self._aliases)
        )

    def _resolve(self, name: str) -> str | None:
        key = normalize_name(name)
        if key in self._index:
            return self._index[key]
        return self._aliases.get(key)

    def by_name(self, name: str) -> Color:
        """Look up a color by name or alias.

        :raises KeyError: If the name is unknown
        """
        resolved = self._resolve(name)
        if resolved is None:
            available = ", ".join(self._entries)
            raise KeyError(f"Unknown color '{name}'. Available: {available}")
        return self._entries[resolved]

    def get(self, name: str, default: Color | None = None) -> Color | None:
        resolved = self._resolve(name)
        return default if resolved is None else self._entries[resolved]

    def by_value(self) -> list[tuple[str, Color]]:
        """Entries sorted by lightness (darkest first), ties broken by name."""
        return sorted(self._entries.items(), key=lambda item: (item[1].lightness, item[0]))

    def by_hue(self) -> list[tuple[str, Color]]:
        """Entries sorted by hue, then lightness; grays follow, darkest first."""
        chromatic = []
        grays = []
        for item in self._entries.items():
            if item[1].saturation < GRAY_SATURATION:
                grays.append(item)
            else:
                chromatic.append(item)
        chromatic.sort(key=lambda item: (item[1].hue, item[1].lightness, item[0]))
        grays.sort(key=lambda item: (item[1].lightness, item[0]))
        return chromatic + grays

    def nearest(self, color: Color) -> tuple[str, Color]:
        """Find the entry closest to ``color`` by RGB distance.

        :raises ValueError: If the palette is empty
        """
        if not self._entries:
            raise ValueError("Cannot find nearest color in an empty palette")

        def distance(item: tuple[str, Color]) -> float:
            other = item[1]
            dr = other.r - color.r
            dg = other.g - color.g
            db = other.b - color.b
            return dr * dr + dg * dg + db * db

        return min(self._entries.items(), key=distance)

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    @property
    def aliases(self) -> dict[str, str]:
        """Normalized alias to entry name."""
        return dict(self._aliases)

    def with_entry(self, name: str, color: Color) -> Palette:
        """Return a new palette with ``name`` added or replaced."""
        entries = dict(self._entries)
        existing = self._index.get(normalize_name(name))
        if existing is not None:
            del entries[existing]
        entries[name] = color
        aliases = {alias: target for alias, target in self._aliases.items() if target in entries}
        return Palette(entries, aliases)

    def items(self) -> list[tuple[str, Color]]:
        return list(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._resolve(name) is not None

    def __getitem__(self, name: str) -> Color:
        return self.by_name(name)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._entries == other._entries and self._aliases == other._aliases

    def __repr__(self) -> str:
        preview = ", ".join(list(self._entries)[:5])
        more = f", ... (+{len(self) - 5})" if len(self) > 5 else ""
        return f"Palette([{preview}{more}])"


def _color_from_value(name: str, value: Color | str | float | ChannelsLike) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    # JSON may store a packed float with an integral value as an int
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Color.from_packed(float(value))
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return Color.create(*value)
    raise ValueError(
        f"Color '{name}' must be a hex string, packed float or [r, g, b(, a)] list, "
        f"got {value!r}"
    )


def palette_from_dict(d: Mapping[str, object]) -> Palette:
    """Create a palette from a dictionary.

    Values may be hex strings, ``[r, g, b]`` / ``[r, g, b, a]`` lists, packed
    floats (or ints) or Colors. An optional ``"aliases"`` key holds a mapping
    of alternate names to entry names.

    :param d: Dictionary of name to color value
    :returns: Palette in the dictionary's order
    :raises ValueError: If a value cannot be read as a color, or the alias
        table is not a mapping
    """
    aliases = d.get(ALIASES_KEY)
    if aliases is not None and not isinstance(aliases, Mapping):
        raise ValueError(
            f"'{ALIASES_KEY}' must map alternate names to color names, got {aliases!r}"
        )
    entries = {name: _color_from_value(name, v) for name, v in d.items() if name != ALIASES_KEY}
    return Palette(entries, aliases)


def palette_to_dict(palette: Palette, packed: bool = False) -> dict[str, object]:
    """Convert a palette to a dictionary.

    :param palette: Palette to convert
    :param packed: Store packed floats instead of ``[r, g, b, a]`` lists
    :returns: Dictionary accepted by :func:`palette_from_dict`
    """
    d: dict[str, object] = {}
    for name, color in palette.items():
        d[name] = color.to_packed() if packed else list(color.to_tuple())
    if palette.aliases:
        d[ALIASES_KEY] = palette.aliases
    return d


BASIC = Palette(
    {
        "transparent": TRANSPARENT,
        "black": BLACK,
        "gray": NEUTRAL,
        "white": WHITE,
    },
    aliases={"grey": "gray", "neutral": "gray", "clear": "transparent"},
)
