"""Tile display formatting with colors for terminal output."""

from typing import Iterable, List, Optional

from rich.text import Text

from mahjong_tutor.core.tile import TileSuit, decode, is_valid_tile, tile_name


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
    TileSuit.INVALID: "dim",
}

_HONOR_KEYS = ["tile.east", "tile.south", "tile.west", "tile.north",
               "tile.haku", "tile.hatsu", "tile.chun"]


def get_tile_short_names() -> list:
    """Get localized tile short names for display.

    Number tiles (1m-9s) are universal. Honor tiles are translated.
    """
    from mahjong_tutor.ui.i18n import t
    return [tile_name(i) for i in range(27)] + [t(key) for key in _HONOR_KEYS]


def _tile_display_width(name: str) -> int:
    """Calculate the display width of a tile name, accounting for fullwidth chars."""
    w = 0
    for ch in name:
        if ('\u4e00' <= ch <= '\u9fff' or '\u3000' <= ch <= '\u30ff' or
                '\uac00' <= ch <= '\ud7af' or '\uff00' <= ch <= '\uffef'):
            w += 2  # Fullwidth character (CJK, kana, hangul)
        else:
            w += 1
    return w


def tile_to_display_str(tile: int) -> str:
    """Localized string representation of a tile (for UI display)."""
    if not is_valid_tile(tile):
        return "?"
    return get_tile_short_names()[tile]


def tile_to_rich_text(tile: int, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    color = SUIT_COLORS[decode(tile).suit]
    style = f"bold {color}"
    if highlight:
        style += " on white"
    return Text(f"[{tile_to_display_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: Iterable[int], separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def format_discard_pool(tiles: List[int], last_tile_marked: bool = False,
                        width: Optional[int] = None) -> Text:
    """Format a discard pool; the newest tile is highlighted when marked.

    With width set, a line break is inserted every `width` tiles.
    """
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append("\n" if width and i % width == 0 else " ")
        is_last = last_tile_marked and i == len(tiles) - 1
        result.append_text(tile_to_rich_text(tile, highlight=is_last))
    return result
