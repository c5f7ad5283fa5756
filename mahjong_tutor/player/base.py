"""Player interface, difficulty levels and GameView (read-only information barrier)."""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from mahjong_tutor.core.hand import Hand
from mahjong_tutor.core.meld import Meld


class Difficulty(Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> 'Difficulty':
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


@dataclass
class OpponentView:
    """Read-only view of an opponent (no hidden tiles)."""
    seat: int
    name: str
    melds: List[Meld]
    discard_pool: List[int]
    num_closed_tiles: int


@dataclass
class GameView:
    """Read-only view of visible game state.

    This is the information barrier - the UI only sees what the human may
    legally see. No access to bots' closed tiles or the wall order.
    """
    # Own hand (full access)
    my_hand: Hand
    my_seat: int
    my_score: int
    is_riichi: bool = False
    drawn_tile: Optional[int] = None

    # Opponents (limited view)
    opponents: List[OpponentView] = field(default_factory=list)

    # Table state
    remaining_tiles: int = 0
    kan_count: int = 0

    # Turn info
    current_seat: int = 0
    last_discard: Optional[int] = None
    last_discard_player: Optional[int] = None


class Player(ABC):
    """Decision interface for a computer-controlled seat."""

    @abstractmethod
    def choose_discard(self, hand: Sequence[int], drawn: Optional[int],
                       rng: random.Random) -> int:
        """Choose a tile to discard after a draw."""
        ...

    @abstractmethod
    def choose_discard_after_call(self, hand: Sequence[int],
                                  rng: random.Random) -> int:
        """Choose a tile to discard right after claiming a meld."""
        ...

    @abstractmethod
    def wants_pon(self, hand: Sequence[int], tile: int,
                  rng: random.Random) -> bool:
        """Decide whether to claim tile for a pon."""
        ...


def build_game_view(state, seat: int = 0) -> GameView:
    """Build a GameView of a GameState for the given seat."""
    me = state.seats[seat]

    opponents = []
    for p in state.seats:
        if p.seat == seat:
            continue
        opponents.append(OpponentView(
            seat=p.seat,
            name=p.name,
            melds=list(p.hand.melds),
            discard_pool=list(p.hand.discards),
            num_closed_tiles=len(p.hand.closed),
        ))

    drawn = state.drawn_tile if state.current_seat == seat else None
    last = state.last_discard
    return GameView(
        my_hand=me.hand,
        my_seat=seat,
        my_score=me.score,
        is_riichi=me.is_riichi,
        drawn_tile=drawn,
        opponents=opponents,
        remaining_tiles=state.wall_remaining,
        kan_count=state.kan_count,
        current_seat=state.current_seat,
        last_discard=last.tile if last else None,
        last_discard_player=last.seat if last else None,
    )
