"""DocType to icon lookup."""

from erplookup.domain.search.model import Color, Glyph, Icon

DEFAULT_ICON = Icon(glyph=Glyph.DOCUMENT, color=Color.BLUE)

ICONS: dict[str, Icon] = {
    "Sales Invoice": Icon(glyph=Glyph.COIN, color=Color.GREEN),
    "Purchase Invoice": Icon(glyph=Glyph.COIN, color=Color.GREEN),
    "Item": Icon(glyph=Glyph.BOX, color=Color.ORANGE),
    "ToDo": Icon(glyph=Glyph.CHECK, color=Color.PURPLE),
    "Customer": Icon(glyph=Glyph.PERSON, color=Color.MAGENTA),
    "Supplier": Icon(glyph=Glyph.PERSON, color=Color.MAGENTA),
    "DocType": Icon(glyph=Glyph.COG, color=Color.RED),
    "Contact": Icon(glyph=Glyph.PERSON, color=Color.YELLOW),
    "Employee": Icon(glyph=Glyph.PERSON, color=Color.YELLOW),
}


def resolve_icon(doctype: str) -> Icon:
    """Return the icon for a DocType, or the generic document icon."""
    return ICONS.get(doctype, DEFAULT_ICON)
