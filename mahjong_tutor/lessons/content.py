"""Static lesson content (English and Korean).

Each section may carry an example hand in shorthand ('123m東東東') that the
lesson view renders as tiles.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class LessonId(Enum):
    INTRO = "intro"
    TILES = "tiles"
    HAND_STRUCTURE = "hand_structure"
    ACTIONS = "actions"
    SCORE = "score"
    TIPS = "tips"
    GLOSSARY = "glossary"


LESSON_ORDER = list(LessonId)


@dataclass(frozen=True)
class Section:
    heading: str
    body: str
    tiles: str = ""


@dataclass(frozen=True)
class Lesson:
    lesson_id: LessonId
    title: str
    intro: str
    sections: Tuple[Section, ...] = ()


_EN = {
    LessonId.INTRO: Lesson(
        LessonId.INTRO, "What is Mahjong?",
        "Mahjong is a four-player game where everyone collects tiles to build a "
        "complete hand. A complete hand is 14 tiles arranged as 4 sets and 1 pair.",
        (
            Section("Goal", "Complete your hand as fast as you can, and for as many points as you can!"),
        ),
    ),
    LessonId.TILES: Lesson(
        LessonId.TILES, "The Tiles",
        "Tiles are split into number tiles (three suits, 1 to 9) and honor tiles.",
        (
            Section("Characters (Man)", "Numbers 1-9 marked with 萬.", "123456789m"),
            Section("Dots (Pin)", "Numbers 1-9 drawn as circles.", "123456789p"),
            Section("Bamboo (Sou)", "Numbers 1-9 drawn as bamboo sticks.", "123456789s"),
            Section("Honors", "Four winds (East, South, West, North) and three dragons "
                    "(White, Green, Red). Honors never form sequences.", "東南西北白發中"),
            Section("Copies", "There are 4 copies of each of the 34 tiles: 136 tiles in total."),
        ),
    ),
    LessonId.HAND_STRUCTURE: Lesson(
        LessonId.HAND_STRUCTURE, "Building a Hand",
        "The basic winning shape is 4 sets of 3 tiles plus 1 pair.",
        (
            Section("1. Sequence", "Three consecutive numbers of the same suit.", "123p"),
            Section("2. Triplet", "Three identical tiles.", "東東東"),
            Section("3. Pair", "Two identical tiles: the head of the hand.", "中中"),
            Section("Complete hand (14 tiles)", "4 sets + 1 pair.", "123m789p789s發發發中中"),
            Section("Seven pairs", "A special shape: seven different pairs.", "1199m55p22s東東白白中中"),
        ),
    ),
    LessonId.ACTIONS: Lesson(
        LessonId.ACTIONS, "Calling Tiles",
        "You can take another player's discard even when it is not your turn.",
        (
            Section("Pon", "When you hold 2 of a tile, take the same discard from anyone "
                    "to make a triplet."),
            Section("Chi", "Make a sequence with a discard, but only from the player on "
                    "your left (the player before you)."),
            Section("Kan", "Four identical tiles count as one set. You draw one bonus "
                    "tile from the wall right after."),
            Section("Ron / Tsumo", "Win with another player's discard (Ron) or with your "
                    "own draw (Tsumo)."),
        ),
    ),
    LessonId.SCORE: Lesson(
        LessonId.SCORE, "Yaku and Points",
        "A hand needs at least one yaku (scoring pattern) to win; the shape alone is not enough.",
        (
            Section("Riichi - 1 han", "With a closed hand (no calls) that is one tile from "
                    "complete, bet 1000 points and declare."),
            Section("Tanyao (All Simples) - 1 han", "Only number tiles 2 to 8: no 1, 9 or honors.",
                    "234m567p55p234678s"),
            Section("Yakuhai - 1 han", "A triplet of dragons, or of the round or seat wind."),
            Section("Toitoi (All Triplets) - 2 han", "Four triplets and a pair, no sequences."),
            Section("Note", "Some yaku need a closed hand; others still count after calling."),
            Section("In this practice table", "Scoring is simplified: Tsumo +4000, Ron +3000, "
                    "Riichi costs 1000."),
        ),
    ),
    LessonId.TIPS: Lesson(
        LessonId.TIPS, "Beginner Tips",
        "A few habits that win more hands.",
        (
            Section("Throw honors first", "Isolated winds and dragons rarely help; discard them early."),
            Section("Trim 1s and 9s", "Terminals extend in one direction only, so they are "
                    "weaker than middle tiles (3-7)."),
            Section("Two-sided waits", "Holding 2-3 waits on 1 or 4. Build as many of these as you can.", "23m"),
            Section("Defense matters", "After someone declares riichi, tiles they already "
                    "discarded are safe to throw."),
        ),
    ),
    LessonId.GLOSSARY: Lesson(
        LessonId.GLOSSARY, "Glossary",
        "Terms used at the table.",
        (
            Section("Chi", "Claim the left player's discard to complete a sequence."),
            Section("Pon", "Claim any player's discard to complete a triplet."),
            Section("Kan", "Declare four identical tiles as one group; always followed by a replacement draw."),
            Section("Ron", "Win by claiming a discard as the final tile."),
            Section("Tsumo", "Win on your own drawn tile."),
            Section("Riichi", "Declare a closed tenpai hand for 1000 points; afterwards only Ron "
                    "is allowed and discards are automatic."),
            Section("Tenpai", "A hand one tile away from completion."),
            Section("Meld", "An open set made by a call, kept apart from the closed hand."),
            Section("Seven Pairs", "A winning shape of seven different pairs."),
        ),
    ),
}

_KO = {
    LessonId.INTRO: Lesson(
        LessonId.INTRO, "마작이란?",
        "마작(Mahjong)은 4명이 패를 모아 완성된 형태(화료)를 만드는 게임입니다. "
        "기본적으로 14개의 패를 [몸통 4개 + 머리 1개]로 맞추면 승리합니다.",
        (
            Section("목표", "가장 빨리, 그리고 높은 점수로 손패를 완성하세요!"),
        ),
    ),
    LessonId.TILES: Lesson(
        LessonId.TILES, "패 배우기",
        "마작패는 크게 수패(숫자)와 자패(글자)로 나뉩니다.",
        (
            Section("만수패 (Characters) - 萬", "1부터 9까지의 만패.", "123456789m"),
            Section("통수패 (Dots) - 통", "1부터 9까지의 통패.", "123456789p"),
            Section("삭수패 (Bamboo) - 대나무", "1부터 9까지의 삭패.", "123456789s"),
            Section("자패 (Honors) - 바람 & 용", "동남서북 바람패와 백발중 삼원패. 자패는 슌쯔를 만들 수 없습니다.",
                    "東南西北白發中"),
            Section("패의 수", "34종류의 패가 각각 4장씩, 모두 136장입니다."),
        ),
    ),
    LessonId.HAND_STRUCTURE: Lesson(
        LessonId.HAND_STRUCTURE, "조립법",
        "마작의 기본 완성 형태는 3개의 묶음(Set) 4개와 머리(Pair) 1개입니다.",
        (
            Section("1. 슌쯔 (Sequence)", "연속된 숫자 3개", "123p"),
            Section("2. 커쯔 (Triplet)", "똑같은 패 3개", "東東東"),
            Section("3. 머리 (Pair)", "똑같은 패 2개", "中中"),
            Section("완성형 예시 (14장)", "몸통 4개 + 머리 1개", "123m789p789s發發發中中"),
            Section("치또이쯔 (Seven Pairs)", "서로 다른 머리 7개로 이루어진 특수한 완성형.", "1199m55p22s東東白白中中"),
        ),
    ),
    LessonId.ACTIONS: Lesson(
        LessonId.ACTIONS, "게임 진행",
        "자신의 차례가 아닐 때도 패를 가져올 수 있습니다 (울기/후로).",
        (
            Section("펑 (Pon)", "똑같은 패가 2개 있을 때 다른 사람이 버린 패를 가져와 커쯔(3개)를 만듭니다."),
            Section("치 (Chi)", "연속된 숫자를 만들 수 있을 때 왼쪽 사람(상가)이 버린 패로만 슌쯔를 만듭니다."),
            Section("깡 (Kan)", "똑같은 패 4개를 모았을 때 4개를 하나로 칩니다. 보너스 패를 하나 더 가져옵니다."),
            Section("론 / 쯔모", "남이 버린 패로 완성하면 론, 직접 뽑은 패로 완성하면 쯔모입니다."),
        ),
    ),
    LessonId.SCORE: Lesson(
        LessonId.SCORE, "점수 계산",
        "마작에는 '족보(Yaku)'가 있어야 날 수 있습니다. 모양만 맞춘다고 승리하지 않습니다!",
        (
            Section("리치 (Riichi) - 1판", "문전(울지 않음) 상태에서 텐파이(1개 남음)시 1000점을 걸고 선언."),
            Section("탕야오 (All Simples) - 1판", "1, 9, 자패가 없이 숫자 2~8로만 구성.", "234m567p55p234678s"),
            Section("역패 (Dragons/Winds) - 1판", "백/발/중 혹은 자풍/장풍패를 3개(커쯔) 모으면 1판."),
            Section("또이또이 (All Pon) - 2판", "슌쯔(연속) 없이 커쯔(똑같은거 3개) 4개와 머리로 구성."),
            Section("주의", "멘젠(울지 않음) 한정 역과 울어도 되는 역이 다릅니다."),
            Section("연습 게임 점수", "점수는 단순화되어 있습니다: 쯔모 +4000, 론 +3000, 리치 -1000."),
        ),
    ),
    LessonId.TIPS: Lesson(
        LessonId.TIPS, "꿀팁",
        "초보자를 위한 몇 가지 요령.",
        (
            Section("자패부터 버려라", "동,남,서,북,백,발,중 등 고립된 자패는 초반에 버리는 것이 유리합니다."),
            Section("1, 9패 정리", "1과 9는 양쪽으로 뻗어나가기 힘들어(변짱), 중간 숫자(3~7)보다 가치가 낮습니다."),
            Section("양면 대기", "2,3을 들고 있으면 1이나 4가 들어오면 됩니다. 이런 '양면' 형태를 많이 만드세요.", "23m"),
            Section("수비도 중요하다", "리치를 건 사람의 현물(버린 패)을 따라 버리면 안전합니다."),
        ),
    ),
    LessonId.GLOSSARY: Lesson(
        LessonId.GLOSSARY, "용어집",
        "테이블에서 쓰는 용어.",
        (
            Section("치", "왼쪽 사람이 버린 패로 슌쯔를 완성합니다."),
            Section("펑", "누구든 버린 패로 커쯔를 완성합니다."),
            Section("깡", "같은 패 4장을 한 묶음으로 선언하고 영상패를 한 장 가져옵니다."),
            Section("론", "남이 버린 패로 화료합니다."),
            Section("쯔모", "직접 뽑은 패로 화료합니다."),
            Section("리치", "1000점을 걸고 문전 텐파이를 선언합니다. 이후에는 론만 가능하고 버림은 자동입니다."),
            Section("텐파이", "한 장만 더 있으면 완성되는 상태."),
            Section("후로", "울어서 공개한 묶음. 손패와 분리됩니다."),
            Section("치또이쯔", "서로 다른 머리 7개로 이루어진 완성형."),
        ),
    ),
}

LESSONS = {"en": _EN, "ko": _KO}


def get_lesson(lesson_id: LessonId, language: str = "en") -> Lesson:
    return LESSONS.get(language, _EN)[lesson_id]


def next_lesson(lesson_id: LessonId) -> Optional[LessonId]:
    """The following lesson, or None after the last one (go practice)."""
    idx = LESSON_ORDER.index(lesson_id)
    if idx + 1 < len(LESSON_ORDER):
        return LESSON_ORDER[idx + 1]
    return None
