"""Tenpai (聴牌) checks - one tile away from a complete hand."""

from typing import List, Optional, Sequence

from mahjong_tutor.core.tile import ALL_TILE_TYPES, sort_hand
from mahjong_tutor.rules.agari import is_winning_hand


def get_waiting_tiles(hand: Sequence[int]) -> List[int]:
    """Find all tile types that would complete this hand (size 3k+1)."""
    hand = list(hand)
    if len(hand) % 3 != 1:
        return []
    return [t for t in ALL_TILE_TYPES if is_winning_hand(hand + [t])]


def is_tenpai(hand: Sequence[int]) -> bool:
    """True if adding any one of the 34 tile types completes the hand."""
    hand = list(hand)
    if len(hand) % 3 != 1:
        return False
    return any(is_winning_hand(hand + [t]) for t in ALL_TILE_TYPES)


def riichi_candidates(hand: Sequence[int], drawn: Optional[int] = None) -> List[int]:
    """Tiles whose discard from hand(+drawn) leaves a tenpai hand.

    Each tile type is listed once, in display order.
    """
    full = list(hand) + ([drawn] if drawn is not None else [])
    candidates = []
    for tile in sort_hand(set(full)):
        rest = list(full)
        rest.remove(tile)
        if is_tenpai(rest):
            candidates.append(tile)
    return candidates
