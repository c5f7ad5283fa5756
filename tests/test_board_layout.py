"""Tests for board_layout.py - end-of-game panels"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import random

import pytest
from rich.console import Console

from mahjong_tutor.core.meld import Meld, MeldType
from mahjong_tutor.engine.event import EventBus, EventType, GameEvent
from mahjong_tutor.engine.game_logger import GameLogger
from mahjong_tutor.engine.round import new_game
from mahjong_tutor.engine.state import GameResult, Outcome
from mahjong_tutor.ui.board_layout import render_game_summary, render_result
from mahjong_tutor.ui.i18n import set_language

NAMES = ["You", "Bot 1", "Bot 2", "Bot 3"]


@pytest.fixture(autouse=True)
def english():
    set_language("en")
    yield
    set_language("en")


def recording_console():
    return Console(record=True, width=100, color_system=None)


class TestRenderResult:
    def test_winning_tile_shown(self):
        console = recording_console()
        result = GameResult(Outcome.RON, winner=2, loser=0, winning_tile=33)
        render_result(console, result, NAMES, 25000, winning_tile=result.winning_tile)
        text = console.export_text()
        assert "Bot 2 won by Ron on You's discard!" in text
        assert "[Rd]" in text

    def test_draw_has_no_tile(self):
        console = recording_console()
        render_result(console, GameResult(Outcome.EXHAUSTIVE_DRAW), NAMES, 24000)
        assert "[Rd]" not in console.export_text()


class TestGameSummary:
    def test_summary_lists_closing_moves(self):
        bus = EventBus()
        game_logger = GameLogger(NAMES)
        game_logger.subscribe_events(bus)
        bus.emit_all(new_game(random.Random(3), game_id=1).events)
        bus.emit(GameEvent(EventType.DISCARD, {"player": 0, "tile": 33, "is_tsumogiri": False}))
        meld = Meld(MeldType.PON, (33, 33, 33), 33, 0)
        bus.emit(GameEvent(EventType.PON, {"player": 2, "tile": 33, "from_player": 0, "meld": meld}))

        console = recording_console()
        render_game_summary(console, game_logger.summary(), "You")
        text = console.export_text()
        assert "Game record" in text
        assert "Your starting hand:" in text
        # Deal draw, discard and pon
        assert "3 actions this game" in text
        assert "You: Discard" in text
        assert "Bot 2: Pon" in text
        assert "from You" in text

    def test_only_last_moves(self):
        bus = EventBus()
        game_logger = GameLogger(NAMES)
        game_logger.subscribe_events(bus)
        for i in range(10):
            bus.emit(GameEvent(EventType.DISCARD, {"player": 1, "tile": i, "is_tsumogiri": True}))

        console = recording_console()
        render_game_summary(console, game_logger.summary(), "You", last=2)
        text = console.export_text()
        assert "10 actions this game" in text
        assert text.count("Bot 1: Discard") == 2
        assert "Your starting hand:" not in text
