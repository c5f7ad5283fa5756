"""Bot opponents - deliberately simple, difficulty-scaled heuristics.

Bots never declare riichi, never chi, never self-kan and never look at
tenpai. Difficulty changes only:
- Thinking delay before acting
- Chance of claiming pon on a matching discard
- Whether isolated honor tiles are thrown first
"""

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from mahjong_tutor.core.tile import is_honor
from mahjong_tutor.player.base import Difficulty, Player

CALL_DISCARD_DELAY = 1.0  # Seconds between a bot pon and its discard

_PROFILES = {
    Difficulty.EASY: (2.0, 0.05, False),
    Difficulty.NORMAL: (1.2, 0.20, True),
    Difficulty.HARD: (0.8, 0.60, True),
}


def find_isolated_honor(hand: Sequence[int], drawn: Optional[int] = None) -> Optional[int]:
    """First honor tile held exactly once across hand and drawn tile.

    Hand order is searched first; the drawn tile comes last.
    """
    full = list(hand) + ([drawn] if drawn is not None else [])
    for tile in full:
        if is_honor(tile) and full.count(tile) == 1:
            return tile
    return None


@dataclass(frozen=True)
class BotPolicy(Player):
    """Discard and call policy shared by all three bots."""
    difficulty: Difficulty
    delay: float
    pon_chance: float
    discard_honors_first: bool

    @classmethod
    def for_difficulty(cls, difficulty) -> 'BotPolicy':
        difficulty = Difficulty.parse(difficulty)
        delay, pon_chance, honors_first = _PROFILES[difficulty]
        return cls(difficulty, delay, pon_chance, honors_first)

    def choose_discard(self, hand: Sequence[int], drawn: Optional[int],
                       rng: random.Random) -> int:
        if self.discard_honors_first:
            honor = find_isolated_honor(hand, drawn)
            if honor is not None:
                return honor

        if drawn is None:
            return rng.choice(list(hand))
        if not hand or rng.random() < 0.5:
            return drawn
        return rng.choice(list(hand))

    def choose_discard_after_call(self, hand: Sequence[int],
                                  rng: random.Random) -> int:
        return rng.choice(list(hand))

    def wants_pon(self, hand: Sequence[int], tile: int,
                  rng: random.Random) -> bool:
        if list(hand).count(tile) < 2:
            return False
        return rng.random() < self.pon_chance
