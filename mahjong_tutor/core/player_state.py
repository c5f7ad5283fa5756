"""Per-seat state."""

from dataclasses import dataclass, field, replace

from .hand import Hand

HUMAN_SEAT = 0


@dataclass(frozen=True)
class PlayerState:
    """Complete state for one seat.

    Attributes:
        seat: Seat index (0 = human)
        name: Display name
        hand: Closed tiles, melds and discards
        score: Points (only tracked for the human seat)
        is_riichi: Whether riichi has been declared (human seat only)
    """
    seat: int
    name: str
    hand: Hand = field(default_factory=Hand)
    score: int = 25000
    is_riichi: bool = False

    def with_hand(self, hand: Hand) -> 'PlayerState':
        return replace(self, hand=hand)

    def __repr__(self):
        return f"PlayerState({self.name}, seat={self.seat}, {self.score}点)"
