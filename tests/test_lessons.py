"""Tests for lesson content"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_tutor.core.tile import is_valid_tile, make_tiles_from_string
from mahjong_tutor.lessons.content import (
    LESSON_ORDER, LESSONS, LessonId, get_lesson, next_lesson,
)
from mahjong_tutor.rules.agari import is_winning_hand


class TestLessons:
    @pytest.mark.parametrize("language", ["en", "ko"])
    def test_every_lesson_present(self, language):
        assert set(LESSONS[language]) == set(LessonId)
        for lesson_id in LESSON_ORDER:
            lesson = get_lesson(lesson_id, language)
            assert lesson.lesson_id == lesson_id
            assert lesson.title
            assert lesson.sections

    def test_languages_have_same_shape(self):
        for lesson_id in LESSON_ORDER:
            en = get_lesson(lesson_id, "en")
            ko = get_lesson(lesson_id, "ko")
            assert len(en.sections) == len(ko.sections)
            assert [s.tiles for s in en.sections] == [s.tiles for s in ko.sections]

    def test_example_tiles_parse(self):
        for lesson in LESSONS["en"].values():
            for section in lesson.sections:
                if section.tiles:
                    tiles = make_tiles_from_string(section.tiles)
                    assert tiles
                    assert all(is_valid_tile(t) for t in tiles)

    def test_complete_hand_examples_win(self):
        sections = get_lesson(LessonId.HAND_STRUCTURE).sections
        examples = [s.tiles for s in sections if len(make_tiles_from_string(s.tiles)) == 14]
        assert len(examples) == 2
        assert all(is_winning_hand(make_tiles_from_string(t)) for t in examples)

    def test_unknown_language_falls_back(self):
        assert get_lesson(LessonId.INTRO, "fr") == get_lesson(LessonId.INTRO, "en")

    def test_order(self):
        assert LESSON_ORDER[0] == LessonId.INTRO
        assert next_lesson(LessonId.INTRO) == LessonId.TILES
        assert next_lesson(LESSON_ORDER[-1]) is None

    def test_glossary_terms(self):
        headings = {s.heading for s in get_lesson(LessonId.GLOSSARY).sections}
        for term in ("Chi", "Pon", "Kan", "Ron", "Tsumo", "Riichi", "Tenpai"):
            assert term in headings
