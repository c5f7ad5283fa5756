"""Tests for wall.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random
from collections import Counter

from mahjong_tutor.core.wall import (
    HAND_SIZE, NUM_SEATS, deal_hands, draw_from_tail, generate_wall,
)


class TestWall:
    def test_wall_composition(self):
        wall = generate_wall(random.Random(1))
        assert len(wall) == 136
        counts = Counter(wall)
        assert len(counts) == 34
        assert all(c == 4 for c in counts.values())

    def test_seeded_wall_is_reproducible(self):
        assert generate_wall(random.Random(7)) == generate_wall(random.Random(7))

    def test_wall_is_shuffled(self):
        ordered = sorted(generate_wall(random.Random(3)))
        assert generate_wall(random.Random(3)) != ordered

    def test_deal(self):
        wall = generate_wall(random.Random(5))
        hands, rest = deal_hands(wall)
        assert len(hands) == NUM_SEATS
        assert all(len(h) == HAND_SIZE for h in hands)
        assert len(rest) == 136 - NUM_SEATS * HAND_SIZE
        assert Counter(sum(hands, ()) + rest) == Counter(wall)

    def test_draw_from_tail(self):
        tile, rest = draw_from_tail((1, 2, 3))
        assert tile == 3
        assert rest == (1, 2)

    def test_draw_until_empty(self):
        wall = tuple(generate_wall(random.Random(9)))
        count = 0
        while True:
            tile, wall = draw_from_tail(wall)
            if tile is None:
                break
            count += 1
        assert count == 136
        assert draw_from_tail(wall) == (None, ())
