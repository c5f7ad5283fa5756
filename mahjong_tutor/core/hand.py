"""Hand management - closed tiles, melds, discard pool.

Hands are frozen; every operation returns a new Hand.
"""

from dataclasses import dataclass, replace
from typing import Iterable

from .tile import sort_hand
from .meld import Meld


def remove_tiles(tiles: Iterable[int], to_remove: Iterable[int]) -> tuple:
    """Remove one copy of each tile in to_remove. Raises ValueError if absent."""
    remaining = list(tiles)
    for t in to_remove:
        remaining.remove(t)
    return tuple(remaining)


@dataclass(frozen=True)
class Hand:
    """A seat's tiles during a game.

    Attributes:
        closed: Concealed tiles (13 between turns, fewer after calls)
        melds: Called or declared melds
        discards: Discard pool in order; a claimed tile is removed from it
    """
    closed: tuple = ()
    melds: tuple = ()
    discards: tuple = ()

    def count(self, tile: int) -> int:
        return self.closed.count(tile)

    def add(self, *tiles: int) -> 'Hand':
        return replace(self, closed=self.closed + tuple(tiles))

    def remove(self, *tiles: int) -> 'Hand':
        return replace(self, closed=remove_tiles(self.closed, tiles))

    def add_meld(self, meld: Meld) -> 'Hand':
        return replace(self, melds=self.melds + (meld,))

    def add_discard(self, tile: int) -> 'Hand':
        return replace(self, discards=self.discards + (tile,))

    def pop_discard(self) -> 'Hand':
        """Drop the most recent discard (it was claimed by another seat)."""
        return replace(self, discards=self.discards[:-1])

    def sorted(self) -> 'Hand':
        return replace(self, closed=tuple(sort_hand(self.closed)))

    @property
    def is_menzen(self) -> bool:
        """Whether hand has no called melds (門前). Closed kans count as called here."""
        return not self.melds

    @property
    def meld_tile_count(self) -> int:
        return sum(len(m.tiles) for m in self.melds)
