"""Practice game controller - owns the current GameState and drives the bots.

The controller is the only place that replaces the state. Bot moves and the
riichi auto-discard run from the Scheduler; each scheduled callback carries
the snapshot it was made for and is dropped if the game has moved on.
"""

import random
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Sequence, Tuple

import structlog

from mahjong_tutor.coach.advice import Advice, AdviceClient, AdviceFailure, fallback_tip
from mahjong_tutor.engine.action import ActionType
from mahjong_tutor.engine.event import EventBus, EventType, GameEvent
from mahjong_tutor.engine.exceptions import GameRuleError
from mahjong_tutor.engine.round import (
    DEFAULT_BOT_NAMES, human_call, human_discard, human_riichi, human_self_kan,
    human_skip, human_tsumo, new_game, run_bot_call_discard, run_bot_turn,
)
from mahjong_tutor.engine.scheduler import ScheduledTask, Scheduler
from mahjong_tutor.engine.state import STARTING_SCORE, GameState, TurnPhase
from mahjong_tutor.player.base import Difficulty, GameView, build_game_view
from mahjong_tutor.player.bot import CALL_DISCARD_DELAY, BotPolicy

logger = structlog.get_logger(__name__)

RIICHI_DISCARD_DELAY = 1.0


class GameConfig:
    """Game configuration."""

    def __init__(
        self,
        difficulty=Difficulty.NORMAL,
        starting_score: int = STARTING_SCORE,
        human_name: str = "You",
        bot_names: Sequence[str] = DEFAULT_BOT_NAMES,
        seed: Optional[int] = None,
        call_discard_delay: float = CALL_DISCARD_DELAY,
        riichi_discard_delay: float = RIICHI_DISCARD_DELAY,
    ):
        self.difficulty = Difficulty.parse(difficulty)
        self.starting_score = starting_score
        self.human_name = human_name
        self.bot_names = tuple(bot_names)
        self.seed = seed
        self.call_discard_delay = call_discard_delay
        self.riichi_discard_delay = riichi_discard_delay

    @property
    def player_names(self) -> list:
        return [self.human_name] + list(self.bot_names)


class PracticeGame:
    """One human against three bots, stepped by a Scheduler."""

    def __init__(self, config: Optional[GameConfig] = None,
                 scheduler: Optional[Scheduler] = None,
                 event_bus: Optional[EventBus] = None,
                 advice_client: Optional[AdviceClient] = None,
                 credential: Optional[str] = None,
                 language: str = "en",
                 executor=None):
        self.config = config or GameConfig()
        self.scheduler = scheduler or Scheduler()
        self.event_bus = event_bus or EventBus()
        self.advice_client = advice_client or AdviceClient(language=language)
        self.credential = credential
        self.language = language
        self.policy = BotPolicy.for_difficulty(self.config.difficulty)
        self.rng = random.Random(self.config.seed)

        self.state: Optional[GameState] = None
        self.advice: Optional[Advice] = None
        self.coach_tip: Optional[str] = None
        self._task: Optional[ScheduledTask] = None
        self._advice_requested_for: Optional[GameState] = None
        self._executor = executor
        self._next_game_id = 1

    # --- Lifecycle ---

    def set_difficulty(self, difficulty):
        self.config.difficulty = Difficulty.parse(difficulty)
        self.policy = BotPolicy.for_difficulty(self.config.difficulty)

    def start(self) -> GameState:
        """Start a new game, abandoning any game in progress."""
        self._cancel_pending()
        game_id = self._next_game_id
        self._next_game_id += 1
        state = new_game(
            self.rng,
            game_id=game_id,
            human_name=self.config.human_name,
            bot_names=self.config.bot_names,
            starting_score=self.config.starting_score,
        )
        logger.info("new game", game_id=game_id,
                    difficulty=self.config.difficulty, seed=self.config.seed)
        self._commit(state)
        return state

    def shutdown(self):
        self._cancel_pending()
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None

    @property
    def is_over(self) -> bool:
        return self.state is None or self.state.is_over

    @property
    def waiting_for_human(self) -> bool:
        state = self.state
        if state is None or self._riichi_auto_discard_due(state):
            return False
        return state.phase in (TurnPhase.HUMAN_TURN, TurnPhase.INTERRUPT)

    @property
    def auto_discard_pending(self) -> bool:
        """Riichi hand drew a non-winning tile; it will be discarded automatically."""
        return self.state is not None and self._riichi_auto_discard_due(self.state)

    def view(self) -> GameView:
        return build_game_view(self.state)

    # --- Human commands ---

    def discard(self, tile: int) -> bool:
        return self._apply("discard", lambda s: human_discard(s, tile, self.policy, self.rng))

    def declare_riichi(self, tile: int) -> bool:
        return self._apply("riichi", lambda s: human_riichi(s, tile, self.policy, self.rng))

    def tsumo(self) -> bool:
        return self._apply("tsumo", human_tsumo)

    def kan(self, tile: Optional[int] = None) -> bool:
        """Closed kan on the human's turn, or open kan in a call window."""
        if self.state is not None and self.state.phase == TurnPhase.INTERRUPT:
            return self.call(ActionType.KAN)
        return self._apply("kan", lambda s: human_self_kan(s, tile))

    def call(self, action_type: ActionType,
             chi_option: Optional[Tuple[int, int]] = None) -> bool:
        return self._apply(action_type.value,
                           lambda s: human_call(s, action_type, chi_option))

    def skip(self) -> bool:
        return self._apply("skip", human_skip)

    # --- Advice ---

    def request_advice(self) -> bool:
        """Ask the coach about the current decision; at most once per decision.

        Returns False when advice is not applicable right now.
        """
        state = self.state
        if state is None or state.phase != TurnPhase.HUMAN_TURN or state.drawn_tile is None:
            return False
        if self._advice_requested_for is state:
            return False
        self._advice_requested_for = state

        future = self._get_executor().submit(
            self.advice_client.request_advice,
            self.credential, state.human.hand.closed, state.drawn_tile,
        )
        future.add_done_callback(
            lambda f: self.scheduler.call_soon_threadsafe(
                lambda: self._on_advice_done(state, f)))
        return True

    def _on_advice_done(self, snapshot: GameState, future: Future):
        if snapshot is not self.state:
            logger.debug("stale advice dropped", game_id=snapshot.game_id)
            return
        try:
            advice = future.result()
        except AdviceFailure as e:
            logger.warning("advice failed", reason=e.reason, detail=e.detail)
            self.advice = None
            self.coach_tip = fallback_tip(self.language)
            self.event_bus.emit(GameEvent(EventType.ADVICE, {
                "ok": False, "reason": e.reason, "tip": self.coach_tip,
            }))
            return

        self.advice = advice
        self.event_bus.emit(GameEvent(EventType.ADVICE, {
            "ok": True, "suggestion": advice.suggestion, "reason": advice.reason,
        }))

    def _get_executor(self):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="advice")
        return self._executor

    # --- Internals ---

    def _apply(self, action: str, transition: Callable[[GameState], GameState]) -> bool:
        if self.state is None:
            self._reject(action, "no game in progress")
            return False
        try:
            new_state = transition(self.state)
        except GameRuleError as e:
            self._reject(action, str(e))
            return False
        self._commit(new_state)
        return True

    def _reject(self, action: str, message: str):
        self.event_bus.emit(GameEvent(EventType.ACTION_REJECTED, {
            "action": action, "message": message,
        }))

    def _commit(self, state: GameState):
        self._cancel_pending()
        self.state = state
        self.advice = None
        self.coach_tip = None
        self.event_bus.emit_all(state.events)
        self._schedule_next()

    def _schedule_next(self):
        state = self.state
        if state.phase == TurnPhase.BOT_TURN:
            delay = self.policy.delay
            step = lambda s: run_bot_turn(s, self.policy, self.rng)
        elif state.phase == TurnPhase.BOT_CALL_DISCARD:
            delay = self.config.call_discard_delay
            step = lambda s: run_bot_call_discard(s, self.policy, self.rng)
        elif self._riichi_auto_discard_due(state):
            delay = self.config.riichi_discard_delay
            step = lambda s: human_discard(s, s.drawn_tile, self.policy, self.rng)
        else:
            return
        self._task = self.scheduler.call_later(
            delay, lambda: self._run_step(state, step), label=state.phase.value)

    @staticmethod
    def _riichi_auto_discard_due(state: GameState) -> bool:
        return (state.phase == TurnPhase.HUMAN_TURN and state.human.is_riichi and
                state.drawn_tile is not None and not state.available.can_tsumo)

    def _run_step(self, snapshot: GameState, step: Callable[[GameState], GameState]):
        if snapshot is not self.state:
            logger.debug("stale callback dropped", game_id=snapshot.game_id,
                         phase=snapshot.phase)
            return
        self._task = None
        self._commit(step(snapshot))

    def _cancel_pending(self):
        if self._task is not None:
            self._task.cancel()
            self._task = None
