"""Search domain types."""

from collections.abc import Mapping
from enum import StrEnum

from erplookup.domain.shared.model.value import ValueObject

# A raw global-search row has no fixed schema; values are limited to JSON scalars.
FieldValue = str | int | float | bool | None
SearchResult = Mapping[str, FieldValue]


class Glyph(StrEnum):
    """Glyph identifiers for list rows."""

    COIN = "coin"
    BOX = "box"
    CHECK = "check"
    PERSON = "person"
    COG = "cog"
    DOCUMENT = "document"

    @property
    def symbol(self) -> str:
        """Terminal symbol used to draw this glyph."""
        return GLYPH_SYMBOLS[self]


GLYPH_SYMBOLS: dict[Glyph, str] = {
    Glyph.COIN: "\u25c9",
    Glyph.BOX: "\u25a3",
    Glyph.CHECK: "\u2713",
    Glyph.PERSON: "\u263a",
    Glyph.COG: "\u2699",
    Glyph.DOCUMENT: "\u25a4",
}


class Color(StrEnum):
    """Row tint, expressed as rich color names."""

    GREEN = "green"
    ORANGE = "dark_orange"
    PURPLE = "purple"
    MAGENTA = "magenta"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"


class Icon(ValueObject):
    """Glyph and tint for a rendered row."""

    glyph: Glyph
    color: Color


class ResolvedResult(ValueObject):
    """A search row after field resolution.

    Everything the list renderer needs to draw one row.
    """

    doctype: str
    name: str
    label: str
    subtitle: str
    icon: Icon

    @property
    def title(self) -> str:
        """List title, e.g. '[Customer] Acme Corp'."""
        return f"[{self.doctype}] {self.label}"
