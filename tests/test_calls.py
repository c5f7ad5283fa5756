"""Tests for calls.py - call and self-action availability"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mahjong_tutor.core.tile import make_tiles_from_string
from mahjong_tutor.engine.action import ActionType
from mahjong_tutor.rules.calls import (
    chi_options, get_discard_only_actions, get_draw_actions,
    get_response_actions, self_kan_tiles,
)


def hand(tiles_str):
    return make_tiles_from_string(tiles_str)


class TestChiOptions:
    def test_all_three_shapes_in_order(self):
        # 3m + 4m with 1m2m, 2m4m, 4m5m in hand
        options = chi_options(hand("1245m"), 2)
        assert options == [(1, 3), (0, 1), (3, 4)]

    def test_no_chi_on_honor(self):
        assert chi_options(hand("東東南西"), 27) == []

    def test_no_wrap_across_suits(self):
        # 9m cannot use 1p2p
        assert chi_options(hand("12p"), 8) == []
        # 1p cannot use 8m9m
        assert chi_options(hand("89m"), 9) == []

    def test_edge_ranks(self):
        assert chi_options(hand("23m"), 0) == [(1, 2)]
        assert chi_options(hand("78m"), 8) == [(6, 7)]


class TestResponseActions:
    def test_pon_and_kan(self):
        actions = get_response_actions(hand("555m123p"), 4, from_seat=2)
        assert actions.can_pon
        assert actions.can_kan
        assert not actions.can_chi
        assert not actions.can_ron

    def test_kan_guard(self):
        actions = get_response_actions(hand("555m123p"), 4, from_seat=2, allow_kan=False)
        assert actions.can_pon
        assert not actions.can_kan

    def test_chi_only_from_left(self):
        tiles = hand("45m東南西")
        assert get_response_actions(tiles, 2, from_seat=3).can_chi
        assert not get_response_actions(tiles, 2, from_seat=1).can_chi
        assert not get_response_actions(tiles, 2, from_seat=2).can_chi

    def test_ron(self):
        tiles = hand("123m456p789s東東東中")
        actions = get_response_actions(tiles, 33, from_seat=1)
        assert actions.can_ron
        assert actions.can_pon is False  # one 中 only
        assert actions.allows(ActionType.RON)
        assert actions.allows(ActionType.SKIP)

    def test_riichi_only_reports_ron(self):
        # Holds a pair and a chi shape for the tile, but riichi forbids calls
        tiles = hand("123m456p789s55m4m6m")
        actions = get_response_actions(tiles, 4, from_seat=3, is_riichi=True)
        assert not actions.can_pon
        assert not actions.can_chi
        assert not actions.can_kan

    def test_riichi_ron_still_available(self):
        tiles = hand("123m456p789s東東東中")
        actions = get_response_actions(tiles, 33, from_seat=2, is_riichi=True)
        assert actions.can_ron
        assert actions.chi_options == ()

    def test_riichi_no_calls_regardless_of_hand(self):
        tiles = hand("555m東東東123p789s北")
        actions = get_response_actions(tiles, 4, from_seat=3, is_riichi=True)
        assert not actions.can_pon
        assert not actions.can_kan
        assert not actions.can_chi
        assert not actions.can_ron


class TestDrawActions:
    def test_tsumo(self):
        actions = get_draw_actions(hand("123m456p789s東東東中"), 33, score=25000)
        assert actions.can_tsumo
        assert 33 in actions.discard_tiles

    def test_riichi_needs_menzen_and_points(self):
        tiles = hand("123m456p789s東東東5s")
        assert get_draw_actions(tiles, 33, score=25000).can_riichi
        assert not get_draw_actions(tiles, 33, score=999).can_riichi
        assert not get_draw_actions(tiles, 33, score=25000, is_menzen=False).can_riichi
        assert not get_draw_actions(tiles, 33, score=25000, is_riichi=True).can_riichi

    def test_riichi_forces_drawn_tile_discard(self):
        tiles = hand("123m456p789s東東東5s")
        actions = get_draw_actions(tiles, 32, score=24000, is_riichi=True)
        assert actions.discard_tiles == (32,)
        assert not actions.can_kan

    def test_self_kan(self):
        tiles = hand("555m123p789s東東南西")
        actions = get_draw_actions(tiles, 4, score=25000)
        assert actions.can_kan
        assert actions.kan_tiles == (4,)
        assert not get_draw_actions(tiles, 4, score=25000, allow_kan=False).can_kan

    def test_discard_tiles_unique_and_sorted(self):
        actions = get_draw_actions(hand("中1m1m9s"), 9, score=25000)
        assert actions.discard_tiles == (0, 9, 26, 33)

    def test_self_kan_tiles(self):
        assert self_kan_tiles(hand("5555m1p"), None) == [4]
        assert self_kan_tiles(hand("555m1p"), 4) == [4]
        assert self_kan_tiles(hand("555m1p"), 5) == []

    def test_discard_only(self):
        actions = get_discard_only_actions(hand("11m2p"))
        assert actions.discard_tiles == (0, 10)
        assert not actions.has_action
