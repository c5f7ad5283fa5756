"""Tests for game_logger.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

from mahjong_tutor.core.meld import Meld, MeldType
from mahjong_tutor.engine.event import EventBus, EventType, GameEvent
from mahjong_tutor.engine.game_logger import GameLogger
from mahjong_tutor.engine.round import new_game

NAMES = ["You", "Bot 1", "Bot 2", "Bot 3"]


def make_logger():
    bus = EventBus()
    game_logger = GameLogger(NAMES)
    game_logger.subscribe_events(bus)
    return game_logger, bus


class TestGameLogger:
    def test_records_deal(self):
        game_logger, bus = make_logger()
        state = new_game(random.Random(1), game_id=5)
        bus.emit_all(state.events)

        summary = game_logger.summary()
        assert summary["game_id"] == 5
        assert set(summary["initial_hands"]) == set(NAMES)
        assert all(len(h) == 13 for h in summary["initial_hands"].values())
        assert summary["actions"][0]["action"] == "draw"
        assert summary["actions"][0]["player"] == "You"

    def test_records_calls_and_result(self):
        game_logger, bus = make_logger()
        bus.emit(GameEvent(EventType.GAME_START, {"game_id": 1}))
        meld = Meld(MeldType.PON, (33, 33, 33), 33, 2)
        bus.emit(GameEvent(EventType.PON, {"player": 0, "tile": 33, "from_player": 2, "meld": meld}))
        bus.emit(GameEvent(EventType.RON, {"player": 1, "from_player": 0, "tile": 5}))
        bus.emit(GameEvent(EventType.GAME_END, {
            "outcome": "ron", "winner": 1, "loser": 0, "score_change": 0, "final_score": 25000,
        }))

        pon, ron = game_logger.actions
        assert pon["action"] == "pon"
        assert pon["tiles"] == ["中", "中", "中"]
        assert pon["from_player"] == "Bot 2"
        assert ron["from_player"] == "You"
        assert game_logger.result == {
            "outcome": "ron", "winner": "Bot 1", "loser": "You",
            "score_change": 0, "final_score": 25000,
        }

    def test_new_game_resets(self):
        game_logger, bus = make_logger()
        bus.emit(GameEvent(EventType.GAME_START, {"game_id": 1}))
        bus.emit(GameEvent(EventType.DISCARD, {"player": 3, "tile": 0, "is_tsumogiri": True}))
        assert len(game_logger.actions) == 1
        bus.emit(GameEvent(EventType.GAME_START, {"game_id": 2}))
        assert game_logger.actions == []
        assert game_logger.result is None

    def test_draw_result_has_no_winner(self):
        game_logger, bus = make_logger()
        bus.emit(GameEvent(EventType.EXHAUSTIVE_DRAW, {"turn_count": 70}))
        bus.emit(GameEvent(EventType.GAME_END, {
            "outcome": "exhaustive_draw", "winner": None, "loser": None,
            "score_change": 0, "final_score": 24000,
        }))
        assert game_logger.result["winner"] is None
        assert game_logger.result["loser"] is None
