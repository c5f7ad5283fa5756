"""Tests for i18n.py and the locale catalogs"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_tutor.player.base import Difficulty
from mahjong_tutor.ui.i18n import difficulty_name, get_language, set_language, t
from mahjong_tutor.ui.locales import en, ko


@pytest.fixture(autouse=True)
def english():
    set_language("en")
    yield
    set_language("en")


class TestI18n:
    def test_catalogs_match(self):
        assert set(en.TRANSLATIONS) == set(ko.TRANSLATIONS)

    def test_format(self):
        assert t("msg.tsumo_win", player="You") == "You won by Tsumo!"

    def test_missing_key_returns_key(self):
        assert t("msg.no_such_key") == "msg.no_such_key"

    def test_missing_format_argument(self):
        assert "{player}" in t("msg.tsumo_win", other="x")

    def test_switch_language(self):
        set_language("ko")
        assert get_language() == "ko"
        assert t("tile.east") == ko.TRANSLATIONS["tile.east"]
        assert difficulty_name(Difficulty.HARD) == ko.TRANSLATIONS["difficulty.hard"]

    def test_unknown_language(self):
        set_language("fr")
        assert get_language() == "en"
        assert difficulty_name(Difficulty.EASY) == en.TRANSLATIONS["difficulty.easy"]
