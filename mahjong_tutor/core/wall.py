"""Wall (牌山) generation and drawing."""

import random
from typing import Optional, Sequence, Tuple

from .tile import ALL_TILE_TYPES, COPIES_PER_TILE

HAND_SIZE = 13
NUM_SEATS = 4


def generate_wall(rng: Optional[random.Random] = None) -> list:
    """Build the 136-tile set (4 copies of each symbol) and shuffle it.

    random.shuffle is an unbiased Fisher-Yates permutation.
    """
    rng = rng or random.Random()
    tiles = [t for t in ALL_TILE_TYPES for _ in range(COPIES_PER_TILE)]
    rng.shuffle(tiles)
    return tiles


def deal_hands(wall: Sequence[int]) -> Tuple[Tuple[tuple, ...], tuple]:
    """Deal 13 tiles to each seat from the head of the wall.

    Returns (hands, remaining_wall).
    """
    hands = []
    for seat in range(NUM_SEATS):
        start = seat * HAND_SIZE
        hands.append(tuple(wall[start:start + HAND_SIZE]))
    return tuple(hands), tuple(wall[NUM_SEATS * HAND_SIZE:])


def draw_from_tail(wall: Sequence[int]) -> Tuple[Optional[int], tuple]:
    """Draw one tile from the tail. Returns (None, wall) when exhausted."""
    if not wall:
        return None, tuple(wall)
    return wall[-1], tuple(wall[:-1])
