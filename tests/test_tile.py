"""Tests for tile.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mahjong_tutor.core.tile import (
    ALL_TILE_TYPES, TileSuit, decode, is_honor, is_valid_tile,
    make_tiles_from_string, sort_hand, tile_from_name, tile_name,
    tiles_to_34_array,
)


class TestDecode:
    def test_every_symbol_decodes(self):
        for tile in ALL_TILE_TYPES:
            info = decode(tile)
            assert info.is_valid
            assert info.suit != TileSuit.INVALID

    def test_suit_boundaries(self):
        assert decode(0) == decode(0)
        assert decode(0).suit == TileSuit.MAN and decode(0).rank == 1
        assert decode(8).suit == TileSuit.MAN and decode(8).rank == 9
        assert decode(9).suit == TileSuit.PIN and decode(9).rank == 1
        assert decode(18).suit == TileSuit.SOU and decode(18).rank == 1
        assert decode(26).suit == TileSuit.SOU and decode(26).rank == 9

    def test_honors_are_ordinal(self):
        assert decode(27).suit == TileSuit.HONOR
        assert decode(27).rank == 1  # East
        assert decode(30).rank == 4  # North
        assert decode(33).rank == 7  # Red dragon

    def test_invalid_inputs_never_raise(self):
        for bad in (-1, 34, 100, None, "5m", 2.0, True):
            info = decode(bad)
            assert info.suit == TileSuit.INVALID
            assert info.rank == 0

    def test_is_valid_tile(self):
        assert is_valid_tile(0)
        assert is_valid_tile(33)
        assert not is_valid_tile(34)
        assert not is_valid_tile(False)

    def test_is_honor(self):
        assert is_honor(27)
        assert is_honor(33)
        assert not is_honor(26)
        assert not is_honor(-5)


class TestNames:
    def test_tile_name(self):
        assert tile_name(0) == "1m"
        assert tile_name(13) == "5p"
        assert tile_name(26) == "9s"
        assert tile_name(27) == "東"
        assert tile_name(33) == "中"
        assert tile_name(99) == "?"

    def test_tile_from_name(self):
        assert tile_from_name("5p") == 13
        assert tile_from_name("中") == 33
        assert tile_from_name("E") == 27
        assert tile_from_name("R") == 33
        assert tile_from_name("0m") is None
        assert tile_from_name("xx") is None

    def test_make_tiles_from_string(self):
        assert make_tiles_from_string("123m") == [0, 1, 2]
        assert make_tiles_from_string("19p東中") == [9, 17, 27, 33]
        assert make_tiles_from_string("EESWNHGR") == [27, 27, 28, 29, 30, 31, 32, 33]

    def test_name_round_trip(self):
        for tile in ALL_TILE_TYPES:
            assert tile_from_name(tile_name(tile)) == tile


class TestSortAndCount:
    def test_sort_hand(self):
        tiles = make_tiles_from_string("中9s1p東5m")
        assert sort_hand(tiles) == make_tiles_from_string("5m1p9s東中")

    def test_sort_is_stable_for_duplicates(self):
        assert sort_hand([3, 1, 3, 1]) == [1, 1, 3, 3]

    def test_tiles_to_34_array(self):
        arr = tiles_to_34_array(make_tiles_from_string("112m東"))
        assert len(arr) == 34
        assert arr[0] == 2
        assert arr[1] == 1
        assert arr[27] == 1
        assert sum(arr) == 4

    def test_34_array_ignores_invalid(self):
        assert sum(tiles_to_34_array([0, -1, 40])) == 1
