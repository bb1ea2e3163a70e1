from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Theme


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    gradient_start: str
    gradient_end: str


# Both gradient stops are the same fully transparent color, so the overflow
# fade renders nothing.
_PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        background="#FFFFFF",
        text="#333333",
        gradient_start="rgba(254, 254, 254, 0)",
        gradient_end="rgba(254, 254, 254, 0)",
    ),
    Theme.DARK: Palette(
        background="#22272e",
        text="#c9d1d9",
        gradient_start="rgba(13, 17, 23, 0)",
        gradient_end="rgba(13, 17, 23, 0)",
    ),
}


def resolve_palette(theme: Theme | bool) -> Palette:
    """Return the palette for a theme or an ``is_dark`` flag."""
    if isinstance(theme, bool):
        theme = Theme.from_flag(theme)
    return _PALETTES[Theme(theme)]
