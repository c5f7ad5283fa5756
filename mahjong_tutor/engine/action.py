"""Action definitions for the game engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ActionType(Enum):
    DISCARD = "discard"
    CHI = "chi"
    PON = "pon"
    KAN = "kan"        # Open kan on a discard, or closed kan on own turn
    RIICHI = "riichi"
    TSUMO = "tsumo"
    RON = "ron"
    SKIP = "skip"


CALL_TYPES = (ActionType.CHI, ActionType.PON, ActionType.KAN, ActionType.RON)


@dataclass(frozen=True)
class Action:
    """A player action."""
    action_type: ActionType
    player: int  # Seat index
    tile: Optional[int] = None  # The tile involved
    chi_option: Optional[Tuple[int, int]] = None  # Hand tiles used for chi

    def __repr__(self):
        parts = [f"{self.action_type.value}"]
        if self.tile is not None:
            parts.append(f"tile={self.tile}")
        return f"Action({', '.join(parts)}, p{self.player})"


@dataclass(frozen=True)
class AvailableActions:
    """Available actions for the human at a decision point.

    After a draw: tsumo / riichi / kan / discard.
    In an interrupt window: chi / pon / kan / ron (skip is always allowed).
    """
    player: int = 0
    can_tsumo: bool = False
    can_riichi: bool = False
    riichi_candidates: tuple = ()
    can_kan: bool = False
    kan_tiles: tuple = ()  # Self-kan symbols (count 4 in hand + drawn)
    discard_tiles: tuple = ()
    chi_options: tuple = ()  # Pairs of hand tiles completing a sequence
    can_pon: bool = False
    can_ron: bool = False

    @property
    def can_chi(self) -> bool:
        return len(self.chi_options) > 0

    @property
    def can_discard(self) -> bool:
        return len(self.discard_tiles) > 0

    @property
    def has_action(self) -> bool:
        """Whether there's any action available beyond just discarding."""
        return (self.can_tsumo or self.can_riichi or self.can_kan or
                self.can_chi or self.can_pon or self.can_ron)

    def allows(self, action_type: ActionType) -> bool:
        return {
            ActionType.TSUMO: self.can_tsumo,
            ActionType.RIICHI: self.can_riichi,
            ActionType.KAN: self.can_kan,
            ActionType.CHI: self.can_chi,
            ActionType.PON: self.can_pon,
            ActionType.RON: self.can_ron,
            ActionType.DISCARD: self.can_discard,
            ActionType.SKIP: True,
        }[action_type]


NO_ACTIONS = AvailableActions()
