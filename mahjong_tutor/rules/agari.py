"""Win (和了) detection - standard form and seven pairs.

Counts are immutable 34-tuples; each branch of the search builds its own
copy, so nothing is restored on backtrack.
"""

from typing import Iterable, Optional, Sequence, Tuple

from mahjong_tutor.core.tile import (
    NUM_TILE_TYPES, NUMBER_SUITS, decode, is_valid_tile, tiles_to_34_array,
)

Counts = Tuple[int, ...]


def to_counts(tiles: Iterable[int]) -> Counts:
    return tuple(tiles_to_34_array(tiles))


def _take(counts: Counts, *indices: int) -> Counts:
    """Return a copy of counts with one tile removed at each index."""
    new = list(counts)
    for i in indices:
        new[i] -= 1
    return tuple(new)


def _first_nonzero(counts: Counts) -> Optional[int]:
    for i in range(NUM_TILE_TYPES):
        if counts[i] > 0:
            return i
    return None


def can_form_sets(counts: Sequence[int], sets_needed: int) -> bool:
    """Check whether counts decompose into exactly sets_needed sets.

    The pivot is always the lowest tile still present: it has to be used by a
    triplet or as the start of a sequence, since nothing lower is left to
    absorb it.
    """
    counts = tuple(counts)
    if sets_needed == 0:
        return True

    pivot = _first_nonzero(counts)
    if pivot is None:
        return False

    # Koutsu (triplet)
    if counts[pivot] >= 3:
        if can_form_sets(_take(counts, pivot, pivot, pivot), sets_needed - 1):
            return True

    # Shuntsu (sequence) - number tiles ranked 1..7 only
    info = decode(pivot)
    if info.suit in NUMBER_SUITS and info.rank <= 7:
        if counts[pivot + 1] > 0 and counts[pivot + 2] > 0:
            if can_form_sets(_take(counts, pivot, pivot + 1, pivot + 2), sets_needed - 1):
                return True

    return False


def is_seven_pairs(counts: Sequence[int]) -> bool:
    """Seven pairs (七対子): 14 tiles, 7 distinct symbols each held exactly twice.

    Both the pair count and the distinct count are checked, so a quadruplet
    never stands in for two pairs.
    """
    if sum(counts) != 14:
        return False
    pairs = sum(1 for c in counts if c >= 2)
    unique = sum(1 for c in counts if c > 0)
    return pairs == 7 and unique == 7


def is_standard_agari(counts: Sequence[int]) -> bool:
    """Check standard form (N sets + 1 pair)."""
    total = sum(counts)
    if total < 2 or (total - 2) % 3 != 0:
        return False
    sets_needed = (total - 2) // 3
    counts = tuple(counts)

    # Try each possible head (pair)
    for head in range(NUM_TILE_TYPES):
        if counts[head] < 2:
            continue
        if can_form_sets(_take(counts, head, head), sets_needed):
            return True
    return False


def is_winning_hand(tiles: Sequence[int]) -> bool:
    """Decide whether a tile multiset (size 3k+2) is a complete hand."""
    tiles = list(tiles)
    if len(tiles) < 2 or (len(tiles) - 2) % 3 != 0:
        return False
    if not all(is_valid_tile(t) for t in tiles):
        return False

    counts = to_counts(tiles)
    if len(tiles) == 14 and is_seven_pairs(counts):
        return True
    return is_standard_agari(counts)


def get_agari_type(tiles: Sequence[int]) -> Optional[str]:
    """Determine the agari type: 'chiitoi', 'standard', or None."""
    if not is_winning_hand(tiles):
        return None
    counts = to_counts(tiles)
    if is_standard_agari(counts):
        return 'standard'
    return 'chiitoi'
