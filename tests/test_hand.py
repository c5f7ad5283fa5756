"""Tests for hand.py and meld.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_tutor.core.hand import Hand, remove_tiles
from mahjong_tutor.core.meld import Meld, MeldType
from mahjong_tutor.core.tile import make_tiles_from_string


def hand_of(tiles_str):
    return Hand(closed=tuple(make_tiles_from_string(tiles_str)))


class TestHand:
    def test_add_and_remove_return_new_hands(self):
        hand = hand_of("123m")
        bigger = hand.add(9)
        assert hand.closed == (0, 1, 2)
        assert bigger.closed == (0, 1, 2, 9)
        assert bigger.remove(1).closed == (0, 2, 9)

    def test_remove_one_copy_each(self):
        assert remove_tiles((4, 4, 4, 5), (4, 4)) == (4, 5)

    def test_remove_missing_tile(self):
        with pytest.raises(ValueError):
            hand_of("123m").remove(9)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            hand_of("1m").closed = ()

    def test_sort(self):
        hand = hand_of("中1s1p1m")
        assert hand.sorted().closed == (0, 9, 18, 33)

    def test_discards(self):
        hand = hand_of("1m").add_discard(5).add_discard(6)
        assert hand.discards == (5, 6)
        assert hand.pop_discard().discards == (5,)

    def test_count(self):
        assert hand_of("555m1p").count(4) == 3

    def test_melds(self):
        hand = hand_of("123m456p")
        assert hand.is_menzen
        pon = Meld(MeldType.PON, (27, 27, 27), 27, 1)
        hand = hand.add_meld(pon)
        assert not hand.is_menzen
        assert hand.meld_tile_count == 3

    def test_closed_kan_counts_as_call(self):
        hand = hand_of("1m").add_meld(Meld(MeldType.ANKAN, (4, 4, 4, 4)))
        assert not hand.is_menzen
        assert hand.meld_tile_count == 4


class TestMeld:
    def test_types(self):
        ankan = Meld(MeldType.ANKAN, (4, 4, 4, 4))
        assert ankan.is_kan
        assert not ankan.is_open
        assert not ankan.claimed_from_discard

        chi = Meld(MeldType.CHI, (1, 2, 3), 3, 3)
        assert chi.is_open
        assert not chi.is_kan
        assert chi.claimed_from_discard

        assert Meld(MeldType.MINKAN, (9,) * 4, 9, 2).is_kan
