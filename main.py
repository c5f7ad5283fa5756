#!/usr/bin/env python3
"""Mahjong Tutor - lessons and a practice table in the terminal"""

import time

from rich.console import Console
from rich.panel import Panel

from mahjong_tutor.coach.advice import AdviceClient
from mahjong_tutor.coach.credentials import CredentialStore
from mahjong_tutor.engine.action import ActionType
from mahjong_tutor.engine.event import EventBus
from mahjong_tutor.engine.game import GameConfig, PracticeGame
from mahjong_tutor.engine.game_logger import GameLogger
from mahjong_tutor.engine.scheduler import Scheduler
from mahjong_tutor.engine.state import TurnPhase
from mahjong_tutor.lessons.content import LESSON_ORDER, get_lesson, next_lesson
from mahjong_tutor.logging import setup_logging
from mahjong_tutor.player.base import Difficulty
from mahjong_tutor.settings import TutorSettings
from mahjong_tutor.ui.board_layout import render_advice, render_game_summary, render_result
from mahjong_tutor.ui.i18n import difficulty_name, set_language, t
from mahjong_tutor.ui.input_handler import ADVICE, QUIT, get_player_input
from mahjong_tutor.ui.lesson_view import render_lesson
from mahjong_tutor.ui.renderer import Renderer
from mahjong_tutor.ui.tile_display import tile_to_display_str

console = Console()


class Session:
    """Menu-level state that outlives a single game."""

    def __init__(self, settings: TutorSettings):
        self.language = settings.language
        self.difficulty = settings.difficulty
        self.store = CredentialStore(settings.credential_path)
        self.client = AdviceClient(
            api_base=settings.advice_api_base,
            model=settings.advice_model,
            timeout=settings.advice_timeout,
            language=settings.language,
        )

    def set_language(self, lang: str):
        self.language = lang
        self.client.language = lang
        set_language(lang)


def _ask_int(low: int, high: int) -> int:
    while True:
        try:
            choice = int(console.input(f"  > {t('prompt.choose', n=high)} ").strip())
            if low <= choice <= high:
                return choice
        except ValueError:
            pass
        console.print(f"  [red]{t('prompt.invalid_input')}[/red]")


def change_language(session: Session):
    """Show language selection submenu."""
    console.print(f"\n  {t('lang.select')}")
    console.print(f"    1. {t('lang.en')}")
    console.print(f"    2. {t('lang.ko')}")
    console.print()
    choice = _ask_int(1, 2)
    session.set_language("en" if choice == 1 else "ko")


def change_difficulty(session: Session):
    levels = list(Difficulty)
    for i, level in enumerate(levels):
        console.print(f"    {i + 1}. {difficulty_name(level)}")
    session.difficulty = levels[_ask_int(1, len(levels)) - 1]
    console.print(f"  {t('msg.difficulty_set', level=difficulty_name(session.difficulty))}")


def manage_api_key(session: Session):
    """Verify a pasted key with a test request before storing it."""
    key = console.input(f"  {t('prompt.api_key')} ", password=True).strip()
    if not key:
        session.store.clear()
        console.print(f"  {t('msg.key_removed')}")
        return
    with console.status(t("msg.key_testing")):
        ok = session.client.test_connection(key)
    if ok:
        session.store.save(key)
        console.print(f"  [green]{t('msg.key_saved')}[/green]")
    else:
        console.print(f"  [red]{t('msg.key_rejected')}[/red]")


def show_menu(session: Session) -> int:
    """Show main menu and return choice."""
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.game_title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    key_status = t("mode.key_set") if session.store.has_credential else t("mode.key_unset")
    console.print()
    console.print(f"  {t('mode.select')}")
    console.print(f"    1. {t('mode.lessons')}")
    console.print(f"    2. {t('mode.practice')}")
    console.print(f"    3. {t('mode.difficulty', level=difficulty_name(session.difficulty))}")
    console.print(f"    4. {t('mode.api_key', status=key_status)}")
    console.print(f"    5. {t('mode.language')}")
    console.print(f"    0. {t('mode.quit')}")
    console.print()
    return _ask_int(0, 5)


def run_lessons(session: Session) -> bool:
    """Browse lessons. Returns True when the player asks to practice."""
    console.print()
    for i, lesson_id in enumerate(LESSON_ORDER):
        console.print(f"    {i + 1}. {get_lesson(lesson_id, session.language).title}")
    console.print(f"    0. {t('mode.quit')}")
    choice = _ask_int(0, len(LESSON_ORDER))
    if choice == 0:
        return False

    lesson_id = LESSON_ORDER[choice - 1]
    while True:
        render_lesson(console, get_lesson(lesson_id, session.language))
        nav = console.input(f"  {t('prompt.lesson_nav')} > ").strip().lower()
        if nav == "p":
            return True
        if nav == "b":
            return False
        if nav == "n":
            following = next_lesson(lesson_id)
            if following is None:
                console.print(f"\n  [bold green]{t('msg.lessons_done')}[/bold green]")
                console.input(f"  {t('prompt.press_enter')}")
                return True
            lesson_id = following


def _dispatch(game: PracticeGame, action):
    """Route a parsed Action to the matching PracticeGame command."""
    kind = action.action_type
    if kind == ActionType.DISCARD:
        game.discard(action.tile)
    elif kind == ActionType.RIICHI:
        game.declare_riichi(action.tile)
    elif kind == ActionType.TSUMO:
        game.tsumo()
    elif kind == ActionType.KAN:
        game.kan(action.tile)
    elif kind == ActionType.SKIP:
        game.skip()
    else:
        game.call(kind, action.chi_option)


def _wait_for_advice(game: PracticeGame, timeout: float):
    if not game.request_advice():
        render_advice(console, game.advice, game.coach_tip)
        return
    deadline = time.monotonic() + timeout
    with console.status(t("msg.advice_pending")):
        while game.advice is None and game.coach_tip is None and time.monotonic() < deadline:
            time.sleep(0.05)
            game.scheduler.run_due()


def play_game(session: Session):
    """Play one practice game against three bots."""
    event_bus = EventBus()
    config = GameConfig(difficulty=session.difficulty, human_name=t("label.you"))
    renderer = Renderer(console, event_bus, config.player_names)
    game_logger = GameLogger(config.player_names)
    game_logger.subscribe_events(event_bus)

    game = PracticeGame(
        config,
        scheduler=Scheduler(),
        event_bus=event_bus,
        advice_client=session.client,
        credential=session.store.load(),
        language=session.language,
    )

    try:
        game.start()
        players = ", ".join(config.player_names)
        console.print(f"\n  [bold]{t('msg.game_start', players=players)}[/bold]")
        shown = None
        announced = None
        while not game.is_over:
            state = game.state
            if game.waiting_for_human:
                if state is not shown:
                    renderer.render_game_view(game.view(), config.difficulty)
                    if state.phase == TurnPhase.INTERRUPT:
                        pending = state.pending_interrupt
                        msg = t("msg.call_window",
                                player=config.player_names[pending.from_seat],
                                tile=tile_to_display_str(pending.tile))
                        console.print(f"  [bold yellow]{msg}[/bold yellow]")
                    renderer.render_actions(state.available)
                    shown = state
                command = get_player_input(console, game.view(), state.available)
                if command == QUIT:
                    console.print(f"\n  [dim]{t('msg.game_exit')}[/dim]")
                    return
                if command == ADVICE:
                    _wait_for_advice(game, session.client.timeout + 1.0)
                    continue
                _dispatch(game, command)
                continue

            if game.auto_discard_pending and announced is not state:
                msg = t("msg.riichi_auto", tile=tile_to_display_str(state.drawn_tile))
                console.print(f"  [yellow]{msg}[/yellow]")
                announced = state

            wait = game.scheduler.time_until_next()
            if wait is None:
                break
            if wait > 0:
                with console.status(t("msg.thinking")):
                    time.sleep(wait)
            game.scheduler.run_due()

        state = game.state
        renderer.render_game_view(game.view(), config.difficulty)
        if state.result is not None:
            render_result(console, state.result, config.player_names, state.human.score,
                          winning_tile=state.result.winning_tile)
        render_game_summary(console, game_logger.summary(), config.human_name)
        renderer.pause()
    finally:
        game.shutdown()


def main():
    """Main entry point."""
    settings = TutorSettings()
    setup_logging(settings.log_dir, settings.log_level)
    session = Session(settings)
    session.set_language(settings.language)
    try:
        while True:
            choice = show_menu(session)
            if choice == 0:
                console.print(f"\n  {t('msg.goodbye')}\n")
                break
            elif choice == 1:
                if run_lessons(session):
                    play_game(session)
            elif choice == 2:
                play_game(session)
            elif choice == 3:
                change_difficulty(session)
            elif choice == 4:
                manage_api_key(session)
            elif choice == 5:
                change_language(session)
            console.print()
    except KeyboardInterrupt:
        console.print(f"\n\n  [dim]{t('msg.game_exit')}[/dim]\n")
    except EOFError:
        console.print(f"\n\n  [dim]{t('msg.game_exit')}[/dim]\n")


if __name__ == "__main__":
    main()
