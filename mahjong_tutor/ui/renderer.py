"""Rich rendering engine - ties together all UI components."""

from collections import deque
from typing import List

from rich.console import Console
from rich.text import Text

from mahjong_tutor.coach.advice import Advice, AdviceFailure
from mahjong_tutor.core.player_state import HUMAN_SEAT
from mahjong_tutor.engine.action import AvailableActions
from mahjong_tutor.engine.event import EventBus, EventType, GameEvent
from mahjong_tutor.player.base import GameView
from mahjong_tutor.ui.board_layout import render_action_prompt, render_advice, render_board
from mahjong_tutor.ui.i18n import t
from mahjong_tutor.ui.tile_display import tile_to_display_str, tiles_to_rich_text

RECENT_LINES = 6


class Renderer:
    """Main rendering engine that subscribes to game events.

    Table narration (bot discards, calls, riichi) is printed as it happens
    and the last few lines are repeated under the board on every redraw.
    """

    def __init__(self, console: Console, event_bus: EventBus,
                 player_names: List[str]):
        self.console = console
        self.event_bus = event_bus
        self.player_names = list(player_names)
        self.recent = deque(maxlen=RECENT_LINES)
        self._subscribe_events()

    def _subscribe_events(self):
        """Subscribe to relevant game events."""
        self.event_bus.subscribe(EventType.GAME_START, self._on_game_start)
        self.event_bus.subscribe(EventType.DISCARD, self._on_discard)
        self.event_bus.subscribe(EventType.CHI, self._on_call)
        self.event_bus.subscribe(EventType.PON, self._on_call)
        self.event_bus.subscribe(EventType.KAN, self._on_call)
        self.event_bus.subscribe(EventType.RIICHI_DECLARE, self._on_riichi)
        self.event_bus.subscribe(EventType.ACTION_REJECTED, self._on_rejected)
        self.event_bus.subscribe(EventType.ADVICE, self._on_advice)

    def _name(self, seat: int) -> str:
        if seat == HUMAN_SEAT:
            return t("label.you")
        return self.player_names[seat]

    def _say(self, line: Text):
        self.recent.append(line)
        self.console.print(Text("  ").append_text(line))

    def render_game_view(self, game_view: GameView, difficulty=None):
        """Render the current board state from the human player's perspective."""
        render_board(self.console, game_view, difficulty)
        for line in self.recent:
            self.console.print(Text("  ").append_text(line), style="dim")
        if self.recent:
            self.console.print()

    def render_actions(self, available: AvailableActions):
        """Show available actions to the player."""
        render_action_prompt(self.console, available)

    def _on_game_start(self, event: GameEvent):
        self.recent.clear()

    def _on_discard(self, event: GameEvent):
        seat = event.data["player"]
        if seat == HUMAN_SEAT:
            return
        self._say(Text(t("msg.bot_discard", player=self._name(seat),
                         tile=tile_to_display_str(event.data["tile"]))))

    def _on_call(self, event: GameEvent):
        meld = event.data["meld"]
        line = Text(t("msg.call", player=self._name(event.data["player"]),
                      call=t(f"action.{event.event_type.value}")) + " ",
                    style="bold")
        line.append_text(tiles_to_rich_text(meld.tiles))
        self._say(line)

    def _on_riichi(self, event: GameEvent):
        self._say(Text(t("msg.riichi_declare", player=self._name(event.data["player"])),
                       style="bold yellow"))

    def _on_rejected(self, event: GameEvent):
        self.console.print(f"  [red]{t('msg.rejected', message=event.data['message'])}[/red]")

    def _on_advice(self, event: GameEvent):
        d = event.data
        if d["ok"]:
            render_advice(self.console, Advice(suggestion=d["suggestion"], reason=d["reason"]))
            return
        if d["reason"] == AdviceFailure.MISSING_KEY:
            key = "msg.advice_no_key"
        elif d["reason"] == AdviceFailure.INVALID_KEY:
            key = "msg.advice_bad_key"
        else:
            key = "msg.advice_unavailable"
        self.console.print(f"  [dim]{t(key)}[/dim]")
        render_advice(self.console, tip=d["tip"])

    def pause(self, message: str = ""):
        """Pause and wait for user input."""
        self.console.input(f"\n  {message or t('prompt.press_enter')}")
