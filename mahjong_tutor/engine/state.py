"""Immutable game state threaded through the round transitions."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from mahjong_tutor.core.player_state import HUMAN_SEAT, PlayerState
from mahjong_tutor.engine.action import NO_ACTIONS, AvailableActions

TSUMO_REWARD = 4000
RON_REWARD = 3000
RIICHI_COST = 1000
MAX_KANS = 4
STARTING_SCORE = 25000


class TurnPhase(Enum):
    HUMAN_TURN = "human_turn"              # Seat 0 to act, waits indefinitely
    BOT_TURN = "bot_turn"                  # A bot is about to draw and discard
    BOT_CALL_DISCARD = "bot_call_discard"  # A bot claimed pon and owes a discard
    INTERRUPT = "interrupt"                # Seat 0 may call the last discard
    GAME_OVER = "game_over"


class Outcome(Enum):
    TSUMO = "tsumo"
    RON = "ron"
    EXHAUSTIVE_DRAW = "exhaustive_draw"


@dataclass(frozen=True)
class PendingInterrupt:
    """A discard that seat 0 may still claim."""
    tile: int
    from_seat: int


@dataclass(frozen=True)
class DiscardRecord:
    tile: int
    seat: int


@dataclass(frozen=True)
class GameResult:
    """How the game ended.

    score_change is the human's point change (+4000 tsumo, +3000 ron);
    bot wins move no points.
    """
    outcome: Outcome
    winner: Optional[int] = None
    loser: Optional[int] = None
    score_change: int = 0
    winning_tile: Optional[int] = None

    @property
    def is_draw(self) -> bool:
        return self.outcome == Outcome.EXHAUSTIVE_DRAW

    @property
    def human_won(self) -> bool:
        return self.winner == HUMAN_SEAT


@dataclass(frozen=True)
class GameState:
    """One snapshot of a practice game.

    Attributes:
        game_id: Generation token, new for every game
        seats: Four PlayerState records, seat 0 is the human
        wall: Undealt tiles; draws come from the tail
        current_seat: Seat whose turn it is
        phase: Where the turn machine is waiting
        drawn_tile: Tile just drawn by current_seat, not yet in its hand
        last_discard: Most recent discard still on a pile
        pending_interrupt: Call window open for seat 0
        available: Seat 0's choices at this point
        kan_count: Kans declared so far this game
        turn_count: Discards made so far
        result: Set once phase is GAME_OVER
        events: Events produced by the transition that built this state
    """
    game_id: int
    seats: Tuple[PlayerState, ...]
    wall: tuple
    current_seat: int = 0
    phase: TurnPhase = TurnPhase.HUMAN_TURN
    drawn_tile: Optional[int] = None
    last_discard: Optional[DiscardRecord] = None
    pending_interrupt: Optional[PendingInterrupt] = None
    available: AvailableActions = NO_ACTIONS
    kan_count: int = 0
    turn_count: int = 0
    result: Optional[GameResult] = None
    events: tuple = ()

    def update(self, **changes) -> 'GameState':
        return replace(self, **changes)

    def with_seat(self, player: PlayerState) -> 'GameState':
        seats = list(self.seats)
        seats[player.seat] = player
        return replace(self, seats=tuple(seats))

    @property
    def human(self) -> PlayerState:
        return self.seats[HUMAN_SEAT]

    @property
    def is_over(self) -> bool:
        return self.phase == TurnPhase.GAME_OVER

    @property
    def wall_remaining(self) -> int:
        return len(self.wall)

    @property
    def can_kan_more(self) -> bool:
        return self.kan_count < MAX_KANS

    def tile_count(self) -> int:
        """Tiles accounted for anywhere on the table; always 136."""
        total = len(self.wall)
        if self.drawn_tile is not None:
            total += 1
        for p in self.seats:
            total += len(p.hand.closed) + p.hand.meld_tile_count + len(p.hand.discards)
        return total
