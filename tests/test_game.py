"""Tests for game.py - the practice game controller"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from concurrent.futures import Future

import httpx

from mahjong_tutor.coach.advice import FALLBACK_TIPS, Advice, AdviceClient, AdviceFailure
from mahjong_tutor.core.hand import Hand
from mahjong_tutor.core.player_state import PlayerState
from mahjong_tutor.core.tile import TOTAL_TILES, make_tiles_from_string
from mahjong_tutor.engine.action import ActionType
from mahjong_tutor.engine.event import EventBus, EventType
from mahjong_tutor.engine.game import GameConfig, PracticeGame
from mahjong_tutor.engine.scheduler import ManualClock, Scheduler
from mahjong_tutor.engine.state import GameState, TurnPhase
from mahjong_tutor.player.base import Difficulty
from mahjong_tutor.player.bot import BotPolicy
from mahjong_tutor.rules.calls import get_draw_actions


class ImmediateExecutor:
    """Runs submitted work inline so advice tests need no threads."""

    def submit(self, fn, *args):
        future = Future()
        try:
            future.set_result(fn(*args))
        except Exception as e:
            future.set_exception(e)
        return future

    def shutdown(self, wait=True):
        pass


class FakeAdviceClient:
    def __init__(self, advice=None, failure=None):
        self.advice = advice
        self.failure = failure
        self.calls = []

    def request_advice(self, credential, hand, drawn=None):
        self.calls.append((credential, tuple(hand), drawn))
        if self.failure is not None:
            raise self.failure
        return self.advice


# Never pons, so a human discard always hands the turn to seat 1
NO_PON = BotPolicy(Difficulty.NORMAL, 1.0, 0.0, True)


def make_game(seed=1, client=None, credential="test-key", **config):
    bus = EventBus()
    events = []
    bus.subscribe_all(events.append)
    game = PracticeGame(
        GameConfig(seed=seed, **config),
        scheduler=Scheduler(ManualClock()),
        event_bus=bus,
        advice_client=client or FakeAdviceClient(Advice(suggestion="中", reason="Isolated honor")),
        credential=credential,
        executor=ImmediateExecutor(),
    )
    return game, events


def of_type(events, event_type):
    return [e for e in events if e.event_type == event_type]


def play_human(game):
    """One simple human decision."""
    available = game.state.available
    if available.can_tsumo:
        game.tsumo()
    elif available.can_ron:
        game.call(ActionType.RON)
    elif game.state.phase == TurnPhase.INTERRUPT:
        game.skip()
    else:
        game.discard(available.discard_tiles[0])


class TestStart:
    def test_new_game_waits_for_human(self):
        game, events = make_game()
        game.start()
        assert game.state.phase == TurnPhase.HUMAN_TURN
        assert game.waiting_for_human
        assert not game.auto_discard_pending
        assert of_type(events, EventType.GAME_START)
        assert game.scheduler.pending == 0

    def test_restart_gets_new_id(self):
        game, _ = make_game()
        first = game.start()
        second = game.start()
        assert second.game_id == first.game_id + 1

    def test_seed_reproducible(self):
        a, _ = make_game(seed=9)
        b, _ = make_game(seed=9)
        assert a.start().seats == b.start().seats

    def test_view_hides_bot_hands(self):
        game, _ = make_game()
        game.start()
        view = game.view()
        assert view.my_hand == game.state.human.hand
        assert view.drawn_tile == game.state.drawn_tile
        assert all(o.num_closed_tiles == 13 for o in view.opponents)
        assert not hasattr(view.opponents[0], "hand")


class TestBotScheduling:
    def test_bot_waits_for_delay(self):
        game, _ = make_game()
        game.start()
        game.policy = NO_PON
        assert game.discard(game.state.available.discard_tiles[0])
        assert game.state.phase == TurnPhase.BOT_TURN
        assert not game.waiting_for_human

        assert game.scheduler.run_due() == 0
        game.scheduler.clock.advance(NO_PON.delay)
        assert game.scheduler.run_due() == 1
        # Bot 1 either won on its draw or left a discard
        assert game.state.is_over or len(game.state.seats[1].hand.discards) == 1

    def test_full_game(self):
        game, events = make_game(seed=4)
        game.start()
        for _ in range(500):
            if game.is_over:
                break
            assert game.state.tile_count() == TOTAL_TILES
            if game.waiting_for_human:
                play_human(game)
            else:
                game.scheduler.run_until_idle()
        assert game.is_over
        assert game.scheduler.pending == 0
        assert of_type(events, EventType.GAME_END)

    def test_restart_drops_pending_bot_turn(self):
        game, events = make_game()
        game.start()
        game.policy = NO_PON
        game.discard(game.state.available.discard_tiles[0])
        task = game._task
        assert task is not None

        game.start()
        assert task.cancelled
        # Even if the old callback fires, it belongs to an older snapshot
        task.callback()
        assert game.state.game_id == 2
        assert game.state.phase == TurnPhase.HUMAN_TURN
        assert game.scheduler.run_until_idle() == 0

    def test_shutdown_cancels(self):
        game, _ = make_game()
        game.start()
        game.policy = NO_PON
        game.discard(game.state.available.discard_tiles[0])
        game.shutdown()
        assert game.scheduler.pending == 0

    def test_set_difficulty(self):
        game, _ = make_game(difficulty="easy")
        assert game.policy.difficulty == Difficulty.EASY
        game.set_difficulty(Difficulty.HARD)
        assert game.policy == BotPolicy.for_difficulty(Difficulty.HARD)


class TestRejections:
    def test_illegal_call(self):
        game, events = make_game()
        state = game.start()
        assert not game.call(ActionType.PON)
        assert game.state is state
        rejected = of_type(events, EventType.ACTION_REJECTED)
        assert rejected[-1].data["action"] == "pon"

    def test_illegal_discard(self):
        game, events = make_game()
        state = game.start()
        missing = next(t for t in range(34) if t not in state.available.discard_tiles)
        assert not game.discard(missing)
        assert game.state is state
        assert of_type(events, EventType.ACTION_REJECTED)

    def test_no_game(self):
        game, events = make_game()
        assert not game.discard(0)
        assert game.is_over
        assert events[-1].data["message"] == "no game in progress"


class TestAdvice:
    def test_advice_arrives_via_scheduler(self):
        game, events = make_game()
        game.start()
        assert game.request_advice()
        # Handed over, not yet applied
        assert game.advice is None
        game.scheduler.run_due()
        assert game.advice.suggestion == "中"
        advice_events = of_type(events, EventType.ADVICE)
        assert advice_events[-1].data["ok"]

    def test_once_per_decision(self):
        client = FakeAdviceClient(Advice(suggestion="1m", reason="Edge tile"))
        game, _ = make_game(client=client)
        game.start()
        assert game.request_advice()
        assert not game.request_advice()
        assert len(client.calls) == 1
        assert client.calls[0][0] == "test-key"
        assert client.calls[0][2] == game.state.drawn_tile

    def test_failure_gives_tip(self):
        client = FakeAdviceClient(failure=AdviceFailure(AdviceFailure.MISSING_KEY))
        game, events = make_game(client=client)
        game.start()
        game.request_advice()
        game.scheduler.run_due()
        assert game.advice is None
        assert game.coach_tip in FALLBACK_TIPS["en"]
        data = of_type(events, EventType.ADVICE)[-1].data
        assert not data["ok"]
        assert data["reason"] == AdviceFailure.MISSING_KEY

    def test_unusable_key_gives_tip(self):
        def handler(request):
            raise AssertionError("no request expected")

        client = AdviceClient(transport=httpx.MockTransport(handler))
        game, events = make_game(client=client, credential="키abc")
        game.start()
        assert game.request_advice()
        game.scheduler.run_due()
        assert game.advice is None
        assert game.coach_tip in FALLBACK_TIPS["en"]
        data = of_type(events, EventType.ADVICE)[-1].data
        assert not data["ok"]
        assert data["reason"] == AdviceFailure.INVALID_KEY

    def test_stale_advice_dropped(self):
        game, events = make_game()
        game.start()
        game.policy = NO_PON
        game.request_advice()
        game.discard(game.state.available.discard_tiles[0])
        game.scheduler.run_due()
        assert game.advice is None
        assert not of_type(events, EventType.ADVICE)

    def test_not_on_bot_turn(self):
        game, _ = make_game()
        assert not game.request_advice()
        game.start()
        game.policy = NO_PON
        game.discard(game.state.available.discard_tiles[0])
        assert not game.request_advice()


def riichi_state():
    human_hand = Hand(closed=tuple(make_tiles_from_string("123m456p789s東東東5s")))
    filler = Hand(closed=tuple(make_tiles_from_string("159m159p159s東南西北")))
    seats = (PlayerState(0, "You", human_hand, score=24000, is_riichi=True),) + tuple(
        PlayerState(i, f"Bot {i}", filler) for i in range(1, 4))
    drawn = 0  # 1m does not complete the hand
    return GameState(
        game_id=7, seats=seats, wall=tuple(make_tiles_from_string("2m3m4m")),
        phase=TurnPhase.HUMAN_TURN, drawn_tile=drawn,
        available=get_draw_actions(human_hand.closed, drawn, is_menzen=True,
                                   score=24000, is_riichi=True),
    )


class TestRiichiAutoDiscard:
    def test_drawn_tile_thrown_after_delay(self):
        game, events = make_game(riichi_discard_delay=0.5)
        game.policy = NO_PON
        game._commit(riichi_state())
        assert game.auto_discard_pending
        assert not game.waiting_for_human

        game.scheduler.clock.advance(0.5)
        game.scheduler.run_due()
        assert game.state.human.hand.discards == (0,)
        assert game.state.phase == TurnPhase.BOT_TURN
        assert of_type(events, EventType.DISCARD)[-1].data["is_tsumogiri"]

    def test_tsumo_not_auto_discarded(self):
        game, _ = make_game()
        state = riichi_state()
        drawn = 22  # 5s completes the hand
        state = state.update(drawn_tile=drawn, available=get_draw_actions(
            state.human.hand.closed, drawn, score=24000, is_riichi=True))
        game._commit(state)
        assert not game.auto_discard_pending
        assert game.waiting_for_human
        assert game.scheduler.pending == 0
