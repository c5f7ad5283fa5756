"""Tile model - 34 symbols identified by integer index.

Tiles are plain ints in the conventional 34 encoding. Physical copies are
not distinguished: two 5m tiles are the same value.

    0-8    1m..9m   (man)
    9-17   1p..9p   (pin)
    18-26  1s..9s   (sou)
    27-30  東 南 西 北 (winds)
    31-33  白 發 中   (dragons)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional


class TileSuit(IntEnum):
    MAN = 0   # 万子
    PIN = 1   # 筒子
    SOU = 2   # 索子
    HONOR = 3  # 字牌 (winds then dragons)
    INVALID = 9


NUMBER_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)

NUM_TILE_TYPES = 34
COPIES_PER_TILE = 4
TOTAL_TILES = NUM_TILE_TYPES * COPIES_PER_TILE

EAST, SOUTH, WEST, NORTH = 27, 28, 29, 30
HAKU, HATSU, CHUN = 31, 32, 33

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]

# ASCII aliases accepted when parsing hand strings
HONOR_ALIASES = {
    "東": EAST, "南": SOUTH, "西": WEST, "北": NORTH,
    "白": HAKU, "發": HATSU, "中": CHUN,
    "E": EAST, "S": SOUTH, "W": WEST, "N": NORTH,
    "H": HAKU, "G": HATSU, "R": CHUN,
}


@dataclass(frozen=True)
class TileInfo:
    """Decoded tile: suit plus rank (1-9 for numbers, 1-7 ordinal for honors)."""
    suit: TileSuit
    rank: int

    @property
    def is_valid(self) -> bool:
        return self.suit != TileSuit.INVALID


INVALID_TILE = TileInfo(TileSuit.INVALID, 0)


def is_valid_tile(tile) -> bool:
    return isinstance(tile, int) and not isinstance(tile, bool) and 0 <= tile < NUM_TILE_TYPES


def decode(tile) -> TileInfo:
    """Decode a tile index into suit and rank. Never raises.

    Anything outside 0..33 decodes to INVALID with rank 0.
    """
    if not is_valid_tile(tile):
        return INVALID_TILE
    if tile < 27:
        return TileInfo(TileSuit(tile // 9), tile % 9 + 1)
    return TileInfo(TileSuit.HONOR, tile - 27 + 1)


def is_honor(tile) -> bool:
    return decode(tile).suit == TileSuit.HONOR


def sort_key(tile):
    info = decode(tile)
    return (int(info.suit), info.rank, tile if is_valid_tile(tile) else -1)


def sort_hand(tiles: Iterable[int]) -> List[int]:
    """Sort tiles by (suit, rank). Display order only."""
    return sorted(tiles, key=sort_key)


def tile_name(tile) -> str:
    """Get tile name from 34 encoding ('?' for invalid tiles)."""
    if not is_valid_tile(tile):
        return "?"
    return TILE_NAMES_34[tile]


def tile_from_name(name: str) -> Optional[int]:
    """Parse a single tile name like '5p' or '中'. Returns None if unknown."""
    name = name.strip()
    if name in HONOR_ALIASES:
        return HONOR_ALIASES[name]
    if len(name) == 2 and name[0] in "123456789" and name[1] in "mps":
        return {"m": 0, "p": 9, "s": 18}[name[1]] + int(name[0]) - 1
    return None


def tiles_to_34_array(tiles: Iterable[int]) -> List[int]:
    """Convert list of tiles to 34-length count array (invalid tiles ignored)."""
    arr = [0] * NUM_TILE_TYPES
    for t in tiles:
        if is_valid_tile(t):
            arr[t] += 1
    return arr


def make_tiles_from_string(s: str) -> List[int]:
    """Parse a shorthand string like '123m456p789s東東' into tiles.

    Honors may be written in kanji or as E S W N (winds) and H G R
    (white, green, red dragons).
    """
    tiles = []
    numbers = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in ('m', 'p', 's'):
            suit_offset = {'m': 0, 'p': 9, 's': 18}[ch]
            for n in numbers:
                tiles.append(suit_offset + n - 1)
            numbers = []
        elif ch in HONOR_ALIASES:
            tiles.append(HONOR_ALIASES[ch])
    return tiles


ALL_TILE_TYPES = list(range(NUM_TILE_TYPES))
