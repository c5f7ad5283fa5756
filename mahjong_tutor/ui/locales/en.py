"""English translations."""

TRANSLATIONS = {
    # Honor tile names
    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "Gr",
    "tile.chun": "Rd",

    # Labels
    "label.game_title": "Mahjong Tutor",
    "label.subtitle": "Learn the basics, then practice against three bots",
    "label.you": "You",
    "label.your_hand": "Your hand",
    "label.melds": "Melds: ",
    "label.discards": "Discards: ",
    "label.points": "{score} pts",
    "label.riichi": "[RIICHI]",
    "label.hidden_tiles": "{n} tiles in hand",
    "label.remaining": "Wall: {n} tiles left",
    "label.kans": "Kans: {n}",
    "label.difficulty": "Difficulty: {level}",
    "label.last_discard": "Last discard: ",
    "label.coach": "Coach",
    "label.tip": "Tip",
    "label.game_record": "Game record",
    "label.starting_hand": "Your starting hand: ",
    "label.action_count": "{n} actions this game",
    "label.from_player": "from {player}",
    "label.lesson": "Lesson {n}/{total}",

    # Difficulty names
    "difficulty.easy": "Easy",
    "difficulty.normal": "Normal",
    "difficulty.hard": "Hard",

    # Main menu
    "mode.select": "Choose:",
    "mode.lessons": "Lessons",
    "mode.practice": "Practice game",
    "mode.difficulty": "Bot difficulty ({level})",
    "mode.api_key": "Coach API key ({status})",
    "mode.language": "Language / 언어",
    "mode.quit": "Quit",
    "mode.key_set": "set",
    "mode.key_unset": "not set",

    # Language menu
    "lang.select": "Select language:",
    "lang.en": "English",
    "lang.ko": "한국어 (Korean)",

    # Prompts
    "prompt.choose": "Enter 0-{n}:",
    "prompt.number": "Number:",
    "prompt.invalid_input": "Invalid input",
    "prompt.invalid_retry": "Invalid input, try again",
    "prompt.press_enter": "Press Enter to continue...",
    "prompt.choose_riichi_discard": "Choose the tile to discard with riichi:",
    "prompt.choose_chi": "Choose the chi combination:",
    "prompt.choose_kan": "Choose the tile to kan:",
    "prompt.action_discard": "1-{n} discard",
    "prompt.action_tsumo": "t Tsumo",
    "prompt.action_ron": "h Ron",
    "prompt.action_riichi": "r Riichi",
    "prompt.action_pon": "p Pon",
    "prompt.action_chi": "c Chi",
    "prompt.action_kan": "k Kan",
    "prompt.action_skip": "s Skip",
    "prompt.action_advice": "a Ask coach",
    "prompt.action_quit": "q Quit game",
    "prompt.api_key": "Paste your API key (empty to remove):",
    "prompt.lesson_nav": "n next lesson | p practice | b back",

    # Actions (shown in the action line)
    "action.available": "You can:",
    "action.tsumo": "Tsumo",
    "action.ron": "Ron",
    "action.riichi": "Riichi",
    "action.pon": "Pon",
    "action.chi": "Chi",
    "action.kan": "Kan",
    "action.discard": "Discard",

    # Messages
    "msg.game_start": "New game! Seat order: {players}",
    "msg.call_window": "{player} discarded {tile}. Call it?",
    "msg.bot_discard": "{player} discards {tile}",
    "msg.call": "{player} calls {call}",
    "msg.riichi_declare": "{player} declares Riichi!",
    "msg.riichi_auto": "Riichi: discarding {tile} automatically...",
    "msg.tsumo_win": "{player} won by Tsumo!",
    "msg.ron_win": "{player} won by Ron on {loser}'s discard!",
    "msg.exhaustive_draw": "The wall is empty: draw.",
    "msg.score_change": "Score change: {change}",
    "msg.final_score": "Your score: {score}",
    "msg.rejected": "Not allowed: {message}",
    "msg.thinking": "The bots are thinking...",
    "msg.advice_pending": "Asking the coach...",
    "msg.advice_unavailable": "Coach advice is not available right now.",
    "msg.advice_bad_key": "The saved API key has characters a key cannot contain; here is a general tip instead.",
    "msg.advice_no_key": "No API key set; here is a general tip instead.",
    "msg.key_testing": "Testing the key...",
    "msg.key_saved": "Key verified and saved.",
    "msg.key_rejected": "The key did not work; nothing was saved.",
    "msg.key_removed": "Stored key removed.",
    "msg.difficulty_set": "Difficulty set to {level}.",
    "msg.lessons_done": "That was the last lesson. Time to practice!",
    "msg.goodbye": "Goodbye!",
    "msg.game_exit": "Game exited.",
}
