"""Call and self-action availability for the human seat."""

from typing import List, Optional, Sequence, Tuple

from mahjong_tutor.core.tile import NUMBER_SUITS, decode, sort_hand
from mahjong_tutor.core.wall import NUM_SEATS
from mahjong_tutor.engine.action import AvailableActions
from mahjong_tutor.engine.state import RIICHI_COST
from mahjong_tutor.rules.agari import is_winning_hand
from mahjong_tutor.rules.tenpai import riichi_candidates


def chi_options(hand: Sequence[int], tile: int) -> List[Tuple[int, int]]:
    """Pairs of hand tiles that complete a sequence with tile.

    Order of preference: closed wait (r-1, r+1), then (r-2, r-1), then
    (r+1, r+2).
    """
    info = decode(tile)
    if info.suit not in NUMBER_SUITS:
        return []

    def has(rank):
        return 1 <= rank <= 9 and (tile - info.rank + rank) in hand

    options = []
    for low, high in ((-1, 1), (-2, -1), (1, 2)):
        if has(info.rank + low) and has(info.rank + high):
            options.append((tile + low, tile + high))
    return options


def get_response_actions(hand: Sequence[int], tile: int, from_seat: int,
                         is_riichi: bool = False, seat: int = 0,
                         allow_kan: bool = True) -> AvailableActions:
    """Calls available to seat on another seat's discard.

    In riichi only ron is evaluated. Chi is only offered on a discard from
    the seat immediately before this one.
    """
    hand = list(hand)
    can_ron = is_winning_hand(hand + [tile])

    if is_riichi:
        return AvailableActions(player=seat, can_ron=can_ron)

    same = hand.count(tile)
    chi = ()
    if from_seat == (seat - 1) % NUM_SEATS:
        chi = tuple(chi_options(hand, tile))

    return AvailableActions(
        player=seat,
        can_pon=same >= 2,
        can_kan=same >= 3 and allow_kan,
        chi_options=chi,
        can_ron=can_ron,
    )


def self_kan_tiles(hand: Sequence[int], drawn: Optional[int]) -> List[int]:
    """Symbols held four times across hand and drawn tile."""
    full = list(hand) + ([drawn] if drawn is not None else [])
    return [t for t in sort_hand(set(full)) if full.count(t) == 4]


def get_draw_actions(hand: Sequence[int], drawn: Optional[int], *,
                     is_menzen: bool = True, score: int = 0,
                     is_riichi: bool = False, allow_kan: bool = True,
                     seat: int = 0) -> AvailableActions:
    """Self actions after a draw (SELF_CHECK)."""
    hand = list(hand)
    full = hand + ([drawn] if drawn is not None else [])

    can_tsumo = drawn is not None and is_winning_hand(full)

    kan_tiles = ()
    if allow_kan and not is_riichi:
        kan_tiles = tuple(self_kan_tiles(hand, drawn))

    candidates = ()
    if is_menzen and not is_riichi and score >= RIICHI_COST and drawn is not None:
        candidates = tuple(riichi_candidates(hand, drawn))

    if is_riichi and drawn is not None:
        # Must tsumogiri (discard drawn tile)
        discards = (drawn,)
    else:
        discards = tuple(sort_hand(set(full)))

    return AvailableActions(
        player=seat,
        can_tsumo=can_tsumo,
        can_riichi=len(candidates) > 0,
        riichi_candidates=candidates,
        can_kan=len(kan_tiles) > 0,
        kan_tiles=kan_tiles,
        discard_tiles=discards,
    )


def get_discard_only_actions(hand: Sequence[int], seat: int = 0) -> AvailableActions:
    """After a chi/pon the caller only discards."""
    return AvailableActions(player=seat, discard_tiles=tuple(sort_hand(set(hand))))
