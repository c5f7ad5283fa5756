"""Korean translations."""

TRANSLATIONS = {
    # Honor tile names
    "tile.east": "동",
    "tile.south": "남",
    "tile.west": "서",
    "tile.north": "북",
    "tile.haku": "백",
    "tile.hatsu": "발",
    "tile.chun": "중",

    # Labels
    "label.game_title": "마작 튜터",
    "label.subtitle": "기초를 배우고 봇 3명과 연습하세요",
    "label.you": "나",
    "label.your_hand": "내 손패",
    "label.melds": "후로: ",
    "label.discards": "버림패: ",
    "label.points": "{score}점",
    "label.riichi": "[리치]",
    "label.hidden_tiles": "손패 {n}장",
    "label.remaining": "남은 패: {n}장",
    "label.kans": "깡: {n}",
    "label.difficulty": "난이도: {level}",
    "label.last_discard": "마지막 버림패: ",
    "label.coach": "코치",
    "label.tip": "팁",
    "label.game_record": "대국 기록",
    "label.starting_hand": "시작 손패: ",
    "label.action_count": "이번 대국 행동 {n}개",
    "label.from_player": "{player}에게서",
    "label.lesson": "강의 {n}/{total}",

    # Difficulty names
    "difficulty.easy": "쉬움",
    "difficulty.normal": "보통",
    "difficulty.hard": "어려움",

    # Main menu
    "mode.select": "선택하세요:",
    "mode.lessons": "강의",
    "mode.practice": "연습 게임",
    "mode.difficulty": "봇 난이도 ({level})",
    "mode.api_key": "코치 API 키 ({status})",
    "mode.language": "Language / 언어",
    "mode.quit": "종료",
    "mode.key_set": "설정됨",
    "mode.key_unset": "없음",

    # Language menu
    "lang.select": "언어를 선택하세요:",
    "lang.en": "English",
    "lang.ko": "한국어",

    # Prompts
    "prompt.choose": "0-{n} 입력:",
    "prompt.number": "번호:",
    "prompt.invalid_input": "잘못된 입력",
    "prompt.invalid_retry": "잘못된 입력입니다. 다시 입력하세요",
    "prompt.press_enter": "계속하려면 Enter...",
    "prompt.choose_riichi_discard": "리치와 함께 버릴 패를 고르세요:",
    "prompt.choose_chi": "치 조합을 고르세요:",
    "prompt.choose_kan": "깡할 패를 고르세요:",
    "prompt.action_discard": "1-{n} 버리기",
    "prompt.action_tsumo": "t 쯔모",
    "prompt.action_ron": "h 론",
    "prompt.action_riichi": "r 리치",
    "prompt.action_pon": "p 펑",
    "prompt.action_chi": "c 치",
    "prompt.action_kan": "k 깡",
    "prompt.action_skip": "s 패스",
    "prompt.action_advice": "a 코치에게 묻기",
    "prompt.action_quit": "q 게임 종료",
    "prompt.api_key": "API 키를 붙여넣으세요 (비우면 삭제):",
    "prompt.lesson_nav": "n 다음 강의 | p 연습하기 | b 뒤로",

    # Actions
    "action.available": "가능:",
    "action.tsumo": "쯔모",
    "action.ron": "론",
    "action.riichi": "리치",
    "action.pon": "펑",
    "action.chi": "치",
    "action.kan": "깡",
    "action.discard": "버림",

    # Messages
    "msg.game_start": "새 게임! 자리 순서: {players}",
    "msg.call_window": "{player}님이 {tile}을(를) 버렸습니다. 가져올까요?",
    "msg.bot_discard": "{player}: {tile} 버림",
    "msg.call": "{player}: {call}",
    "msg.riichi_declare": "{player}: 리치!",
    "msg.riichi_auto": "리치 중: {tile}을(를) 자동으로 버립니다...",
    "msg.tsumo_win": "{player} 쯔모 승리!",
    "msg.ron_win": "{player} 론 승리! ({loser}의 버림패)",
    "msg.exhaustive_draw": "패가 모두 소진되었습니다: 유국.",
    "msg.score_change": "점수 변화: {change}",
    "msg.final_score": "내 점수: {score}",
    "msg.rejected": "할 수 없습니다: {message}",
    "msg.thinking": "봇이 생각 중...",
    "msg.advice_pending": "코치에게 묻는 중...",
    "msg.advice_unavailable": "지금은 코치 조언을 받을 수 없습니다.",
    "msg.advice_bad_key": "저장된 API 키에 사용할 수 없는 문자가 있어 일반 팁을 보여드립니다.",
    "msg.advice_no_key": "API 키가 없어 일반 팁을 보여드립니다.",
    "msg.key_testing": "키를 확인하는 중...",
    "msg.key_saved": "키가 확인되어 저장되었습니다.",
    "msg.key_rejected": "키가 작동하지 않아 저장하지 않았습니다.",
    "msg.key_removed": "저장된 키를 삭제했습니다.",
    "msg.difficulty_set": "난이도: {level}",
    "msg.lessons_done": "마지막 강의였습니다. 이제 연습해 봅시다!",
    "msg.goodbye": "안녕히 가세요!",
    "msg.game_exit": "게임을 종료했습니다.",
}
