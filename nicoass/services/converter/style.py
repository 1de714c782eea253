"""Comment style resolution.

Style tokens arrive as the space separated `mail` field of a comment.
They are resolved once into a StyleResolution; the rest of the converter
matches on its Placement instead of re-scanning strings.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

WHITE = "FFFFFF"
BLACK = "000000"

COLOR_MAP: dict[str, str] = {
    "black": "000000",
    "white": "FFFFFF",
    "red": "FF0000",
    "green": "00ff00",
    "yellow": "FFFF00",
    "blue": "0000FF",
    "orange": "ffcc00",
    "pink": "FF8080",
    "cyan": "00FFFF",
    "purple": "C000FF",
    # Premium palette and their short aliases
    "niconicowhite": "cccc99",
    "white2": "cccc99",
    "truered": "cc0033",
    "red2": "cc0033",
    "passionorange": "ff6600",
    "orange2": "ff6600",
    "madyellow": "999900",
    "yellow2": "999900",
    "elementalgreen": "00cc66",
    "green2": "00cc66",
    "marineblue": "33ffcc",
    "blue2": "33ffcc",
    "nobleviolet": "6633cc",
    "purple2": "6633cc",
}

_HEX_COLOR_RE = re.compile(r"#([0-9A-Fa-f]{6})")

TOP_TOKEN = "ue"
BOTTOM_TOKEN = "shita"
AA_FONT_TOKENS = frozenset({"gothic", "mincho"})


class Placement(str, Enum):
    """Where a user comment is drawn."""

    SCROLL = "scroll"
    TOP = "top"
    BOTTOM = "bottom"
    ASCII_ART = "ascii-art"

    @property
    def alignment(self) -> int:
        """Numpad alignment used by fixed comments."""
        return {Placement.TOP: 8, Placement.BOTTOM: 2}.get(self, 7)


def ass_color(color: str) -> str:
    """Render an RGB hex color as ASS override tags.

    ASS stores colors as BGR. Black text gets a white outline so it stays
    readable on dark video.

    Args:
        color: 6 hex digit RGB color

    Returns:
        Override tags, e.g. ``\\1c&H0000FF&`` for red
    """
    tags = f"\\1c&H{color[4:6]}{color[2:4]}{color[0:2]}&"
    if color == BLACK:
        tags += "\\3c&HFFFFFF&"
    return tags


@dataclass(frozen=True)
class StyleResolution:
    """Resolved style of a comment.

    Attributes:
        color: 6 hex digit RGB color
        placement: Where the comment is drawn
    """

    color: str = WHITE
    placement: Placement = Placement.SCROLL

    @property
    def forced_outline(self) -> bool:
        """Whether a white outline is added to keep the text legible."""
        return self.color == BLACK

    @property
    def tags(self) -> str:
        """Color override tags for this style."""
        return ass_color(self.color)


def resolve_color(tokens: Iterable[str]) -> str:
    """Resolve the display color of a comment.

    Named colors apply in order (last wins); an explicit ``#RRGGBB`` token
    overrides any named color regardless of position.

    Args:
        tokens: Style tokens

    Returns:
        6 hex digit RGB color
    """
    color = WHITE
    explicit: str | None = None
    for token in tokens:
        match = _HEX_COLOR_RE.search(token)
        if match:
            explicit = match.group(1)
        elif token in COLOR_MAP:
            color = COLOR_MAP[token]
    return explicit if explicit is not None else color


def resolve_placement(tokens: Iterable[str]) -> Placement:
    """Resolve where a comment is drawn.

    An AA font token wins over position tokens; among ``ue``/``shita`` the
    last one wins.

    Args:
        tokens: Style tokens

    Returns:
        Placement of the comment
    """
    placement = Placement.SCROLL
    is_aa = False
    for token in tokens:
        if token == TOP_TOKEN:
            placement = Placement.TOP
        elif token == BOTTOM_TOKEN:
            placement = Placement.BOTTOM
        elif token in AA_FONT_TOKENS:
            is_aa = True
    return Placement.ASCII_ART if is_aa else placement


def resolve_style(tokens: Iterable[str]) -> StyleResolution:
    """Resolve color and placement from style tokens.

    Args:
        tokens: Style tokens

    Returns:
        StyleResolution
    """
    tokens = list(tokens)
    return StyleResolution(color=resolve_color(tokens), placement=resolve_placement(tokens))
