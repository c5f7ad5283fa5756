"""Turn and call flow - the core game loop as pure transitions.

Every public function takes a GameState and returns a new one; the input is
never modified. Rule violations raise before any new state is built.
"""

import random
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from mahjong_tutor.core.hand import Hand
from mahjong_tutor.core.meld import Meld, MeldType
from mahjong_tutor.core.player_state import HUMAN_SEAT, PlayerState
from mahjong_tutor.core.tile import sort_hand, tile_name
from mahjong_tutor.core.wall import NUM_SEATS, deal_hands, draw_from_tail, generate_wall
from mahjong_tutor.engine.action import CALL_TYPES, NO_ACTIONS, ActionType
from mahjong_tutor.engine.event import EventType, GameEvent
from mahjong_tutor.engine.exceptions import IllegalActionError, IllegalCallError
from mahjong_tutor.engine.state import (
    RIICHI_COST, RON_REWARD, STARTING_SCORE, TSUMO_REWARD,
    DiscardRecord, GameResult, GameState, Outcome, PendingInterrupt, TurnPhase,
)
from mahjong_tutor.player.base import Player
from mahjong_tutor.rules.agari import is_winning_hand
from mahjong_tutor.rules.calls import (
    get_discard_only_actions, get_draw_actions, get_response_actions,
)

DEFAULT_BOT_NAMES = ("Bot 1", "Bot 2", "Bot 3")


def new_game(rng: Optional[random.Random] = None, game_id: int = 0,
             human_name: str = "You",
             bot_names: Sequence[str] = DEFAULT_BOT_NAMES,
             starting_score: int = STARTING_SCORE) -> GameState:
    """Shuffle, deal 13 tiles to each seat and draw the human's first tile."""
    rng = rng or random.Random()
    hands, wall = deal_hands(generate_wall(rng))

    seats = []
    for seat, tiles in enumerate(hands):
        name = human_name if seat == HUMAN_SEAT else bot_names[seat - 1]
        seats.append(PlayerState(
            seat=seat,
            name=name,
            hand=Hand(closed=tuple(sort_hand(tiles))),
            score=starting_score,
        ))

    state = GameState(game_id=game_id, seats=tuple(seats), wall=wall)
    events = [
        GameEvent(EventType.GAME_START, {"game_id": game_id}),
        GameEvent(EventType.DEAL, {
            "hands": {p.seat: p.hand.closed for p in seats},
            "wall_remaining": len(wall),
        }),
    ]
    state = _draw_for_human(state, events)
    return _done(state, events)


# --- Bot transitions ---

def run_bot_turn(state: GameState, policy: Player, rng: random.Random) -> GameState:
    """Current bot draws, checks tsumo, discards; then the discard is resolved."""
    _require_phase(state, TurnPhase.BOT_TURN)
    events = []
    seat = state.current_seat

    tile, wall = draw_from_tail(state.wall)
    if tile is None:
        return _done(_exhaustive_draw(state, events), events)

    state = state.update(wall=wall, drawn_tile=tile)
    events.append(GameEvent(EventType.DRAW, {"player": seat, "tile": tile}))

    hand = state.seats[seat].hand.closed
    if is_winning_hand(hand + (tile,)):
        events.append(GameEvent(EventType.TSUMO, {"player": seat, "tile": tile}))
        result = GameResult(Outcome.TSUMO, winner=seat, winning_tile=tile)
        return _done(_finish(state, result, events), events)

    discard = policy.choose_discard(hand, tile, rng)
    state = _discard(state, seat, discard, events)
    state = _resolve_discard(state, events, policy, rng)
    return _done(state, events)


def run_bot_call_discard(state: GameState, policy: Player,
                         rng: random.Random) -> GameState:
    """A bot that just claimed pon throws a random hand tile."""
    _require_phase(state, TurnPhase.BOT_CALL_DISCARD)
    events = []
    seat = state.current_seat
    tile = policy.choose_discard_after_call(state.seats[seat].hand.closed, rng)
    state = _discard(state, seat, tile, events)
    state = _resolve_discard(state, events, policy, rng)
    return _done(state, events)


# --- Human transitions ---

def human_discard(state: GameState, tile: int, policy: Player,
                  rng: random.Random) -> GameState:
    _require_phase(state, TurnPhase.HUMAN_TURN)
    if tile not in state.available.discard_tiles:
        raise IllegalActionError(f"cannot discard {tile_name(tile)}")

    events = []
    state = _discard(state, HUMAN_SEAT, tile, events)
    state = _resolve_discard(state, events, policy, rng)
    return _done(state, events)


def human_riichi(state: GameState, tile: int, policy: Player,
                 rng: random.Random) -> GameState:
    """Declare riichi and discard tile in one step."""
    _require_phase(state, TurnPhase.HUMAN_TURN)
    available = state.available
    if not available.can_riichi:
        raise IllegalActionError("riichi is not available")
    if tile not in available.riichi_candidates:
        raise IllegalActionError(
            f"discarding {tile_name(tile)} does not leave a tenpai hand")

    human = state.human
    human = replace(human, score=human.score - RIICHI_COST, is_riichi=True)
    events = [GameEvent(EventType.RIICHI_DECLARE, {
        "player": HUMAN_SEAT, "tile": tile, "score": human.score,
    })]
    state = state.with_seat(human)
    state = _discard(state, HUMAN_SEAT, tile, events)
    state = _resolve_discard(state, events, policy, rng)
    return _done(state, events)


def human_tsumo(state: GameState) -> GameState:
    _require_phase(state, TurnPhase.HUMAN_TURN)
    if not state.available.can_tsumo:
        raise IllegalActionError("tsumo is not available")

    human = state.human
    events = [GameEvent(EventType.TSUMO, {
        "player": HUMAN_SEAT, "tile": state.drawn_tile,
    })]
    state = state.with_seat(replace(human, score=human.score + TSUMO_REWARD))
    result = GameResult(Outcome.TSUMO, winner=HUMAN_SEAT, score_change=TSUMO_REWARD,
                        winning_tile=state.drawn_tile)
    return _done(_finish(state, result, events), events)


def human_self_kan(state: GameState, tile: Optional[int] = None) -> GameState:
    """Declare a closed kan from hand + drawn tile, then draw a replacement.

    The drawn tile joins the hand first, so it is kept even when the kan
    uses four hand tiles.
    """
    _require_phase(state, TurnPhase.HUMAN_TURN)
    available = state.available
    if not available.can_kan or not state.can_kan_more:
        raise IllegalActionError("kan is not available")
    if tile is None:
        tile = available.kan_tiles[0]
    if tile not in available.kan_tiles:
        raise IllegalActionError(f"no four of {tile_name(tile)} to kan")

    human = state.human
    hand = human.hand
    if state.drawn_tile is not None:
        hand = hand.add(state.drawn_tile)
    meld = Meld(MeldType.ANKAN, (tile,) * 4)
    hand = hand.remove(tile, tile, tile, tile).add_meld(meld).sorted()

    events = [GameEvent(EventType.KAN, {
        "player": HUMAN_SEAT, "tile": tile, "meld": meld,
    })]
    state = state.with_seat(human.with_hand(hand)).update(
        drawn_tile=None, kan_count=state.kan_count + 1)
    state = _draw_for_human(state, events, replacement=True)
    return _done(state, events)


def human_call(state: GameState, action_type: ActionType,
               chi_option: Optional[Tuple[int, int]] = None) -> GameState:
    """Claim the pending discard with chi, pon, kan or ron."""
    _require_phase(state, TurnPhase.INTERRUPT, IllegalCallError)
    pending = state.pending_interrupt
    available = state.available
    tile, from_seat = pending.tile, pending.from_seat

    if action_type not in CALL_TYPES:
        raise IllegalCallError(f"{action_type.value} is not a call")
    if not available.allows(action_type):
        raise IllegalCallError(
            f"{action_type.value} is not available on {tile_name(tile)}")

    human = state.human
    events = []

    if action_type == ActionType.RON:
        events.append(GameEvent(EventType.RON, {
            "player": HUMAN_SEAT, "from_player": from_seat, "tile": tile,
        }))
        state = state.with_seat(replace(human, score=human.score + RON_REWARD))
        result = GameResult(Outcome.RON, winner=HUMAN_SEAT, loser=from_seat,
                            score_change=RON_REWARD, winning_tile=tile)
        return _done(_finish(state, result, events), events)

    if action_type == ActionType.CHI:
        option = tuple(chi_option) if chi_option is not None else available.chi_options[0]
        if option not in available.chi_options:
            raise IllegalCallError(f"no chi with {option} on {tile_name(tile)}")
        used = option
        meld = Meld(MeldType.CHI, tuple(sort_hand(option + (tile,))), tile, from_seat)
        event_type = EventType.CHI
    elif action_type == ActionType.PON:
        used = (tile, tile)
        meld = Meld(MeldType.PON, (tile,) * 3, tile, from_seat)
        event_type = EventType.PON
    else:
        if not state.can_kan_more:
            raise IllegalCallError("no more kans allowed this game")
        used = (tile, tile, tile)
        meld = Meld(MeldType.MINKAN, (tile,) * 4, tile, from_seat)
        event_type = EventType.KAN

    # Check-then-act: every tile must be in hand before anything changes
    for t in set(used):
        if human.hand.count(t) < used.count(t):
            raise IllegalCallError(
                f"{action_type.value} needs {used.count(t)} x {tile_name(t)}")

    hand = human.hand.remove(*used).add_meld(meld)
    state = _take_discard(state, from_seat)
    state = state.with_seat(human.with_hand(hand)).update(
        current_seat=HUMAN_SEAT, last_discard=None, pending_interrupt=None)
    events.append(GameEvent(event_type, {
        "player": HUMAN_SEAT, "tile": tile, "from_player": from_seat, "meld": meld,
    }))

    if action_type == ActionType.KAN:
        state = state.update(kan_count=state.kan_count + 1)
        state = _draw_for_human(state, events, replacement=True)
        return _done(state, events)

    # After chi/pon the only choice is which tile to throw
    events.append(GameEvent(EventType.TURN_START, {"player": HUMAN_SEAT}))
    state = state.update(
        phase=TurnPhase.HUMAN_TURN,
        drawn_tile=None,
        available=get_discard_only_actions(hand.closed),
    )
    return _done(state, events)


def human_skip(state: GameState) -> GameState:
    """Decline the pending call; play moves to the seat after the discarder."""
    _require_phase(state, TurnPhase.INTERRUPT, IllegalCallError)
    events = []
    from_seat = state.pending_interrupt.from_seat
    state = state.update(pending_interrupt=None, available=NO_ACTIONS)
    state = _advance(state, (from_seat + 1) % NUM_SEATS, events)
    return _done(state, events)


# --- Internal steps ---

def _require_phase(state: GameState, phase: TurnPhase, error=IllegalActionError):
    if state.phase != phase:
        raise error(f"not allowed during {state.phase.value}")


def _done(state: GameState, events: List[GameEvent]) -> GameState:
    return state.update(events=tuple(events))


def _seats_after(seat: int) -> List[int]:
    return [(seat + i) % NUM_SEATS for i in range(1, NUM_SEATS)]


def _draw_for_human(state: GameState, events: List[GameEvent],
                    replacement: bool = False) -> GameState:
    """DRAW + SELF_CHECK for seat 0. An empty wall ends the game."""
    tile, wall = draw_from_tail(state.wall)
    if tile is None:
        return _exhaustive_draw(state.update(current_seat=HUMAN_SEAT), events)

    human = state.human
    events.append(GameEvent(EventType.DRAW, {
        "player": HUMAN_SEAT, "tile": tile, "replacement": replacement,
    }))
    available = get_draw_actions(
        human.hand.closed, tile,
        is_menzen=human.hand.is_menzen,
        score=human.score,
        is_riichi=human.is_riichi,
        allow_kan=state.can_kan_more,
    )
    events.append(GameEvent(EventType.TURN_START, {"player": HUMAN_SEAT}))
    return state.update(
        wall=wall,
        current_seat=HUMAN_SEAT,
        phase=TurnPhase.HUMAN_TURN,
        drawn_tile=tile,
        pending_interrupt=None,
        available=available,
    )


def _advance(state: GameState, next_seat: int, events: List[GameEvent]) -> GameState:
    if next_seat == HUMAN_SEAT:
        return _draw_for_human(state, events)
    events.append(GameEvent(EventType.TURN_START, {"player": next_seat}))
    return state.update(
        current_seat=next_seat,
        phase=TurnPhase.BOT_TURN,
        drawn_tile=None,
        pending_interrupt=None,
        available=NO_ACTIONS,
    )


def _discard(state: GameState, seat: int, tile: int,
             events: List[GameEvent]) -> GameState:
    player = state.seats[seat]
    hand = player.hand
    drawn = state.drawn_tile if state.current_seat == seat else None
    if drawn is not None:
        hand = hand.add(drawn)
    hand = hand.remove(tile).add_discard(tile)
    if seat == HUMAN_SEAT:
        hand = hand.sorted()

    events.append(GameEvent(EventType.DISCARD, {
        "player": seat, "tile": tile, "is_tsumogiri": tile == drawn,
    }))
    return state.with_seat(player.with_hand(hand)).update(
        drawn_tile=None,
        last_discard=DiscardRecord(tile, seat),
        available=NO_ACTIONS,
        turn_count=state.turn_count + 1,
    )


def _resolve_discard(state: GameState, events: List[GameEvent],
                     policy: Player, rng: random.Random) -> GameState:
    """INTERRUPT_WINDOW: bot ron, then bot pon, then the human's calls."""
    tile, discarder = state.last_discard.tile, state.last_discard.seat
    bots = [s for s in _seats_after(discarder) if s != HUMAN_SEAT]

    for seat in bots:
        if is_winning_hand(state.seats[seat].hand.closed + (tile,)):
            events.append(GameEvent(EventType.RON, {
                "player": seat, "from_player": discarder, "tile": tile,
            }))
            result = GameResult(Outcome.RON, winner=seat, loser=discarder, winning_tile=tile)
            return _finish(state, result, events)

    for seat in bots:
        if policy.wants_pon(state.seats[seat].hand.closed, tile, rng):
            return _bot_pon(state, seat, events)

    if discarder != HUMAN_SEAT:
        human = state.human
        actions = get_response_actions(
            human.hand.closed, tile, discarder,
            is_riichi=human.is_riichi,
            allow_kan=state.can_kan_more,
        )
        if actions.has_action:
            events.append(GameEvent(EventType.INTERRUPT, {
                "player": HUMAN_SEAT, "tile": tile, "from_player": discarder,
            }))
            return state.update(
                phase=TurnPhase.INTERRUPT,
                pending_interrupt=PendingInterrupt(tile, discarder),
                available=actions,
            )

    return _advance(state, (discarder + 1) % NUM_SEATS, events)


def _bot_pon(state: GameState, seat: int, events: List[GameEvent]) -> GameState:
    tile, discarder = state.last_discard.tile, state.last_discard.seat
    bot = state.seats[seat]
    meld = Meld(MeldType.PON, (tile,) * 3, tile, discarder)
    hand = bot.hand.remove(tile, tile).add_meld(meld)

    events.append(GameEvent(EventType.PON, {
        "player": seat, "tile": tile, "from_player": discarder, "meld": meld,
    }))
    state = _take_discard(state, discarder)
    return state.with_seat(bot.with_hand(hand)).update(
        current_seat=seat,
        phase=TurnPhase.BOT_CALL_DISCARD,
        drawn_tile=None,
        last_discard=None,
        pending_interrupt=None,
        available=NO_ACTIONS,
    )


def _take_discard(state: GameState, seat: int) -> GameState:
    """Remove the claimed tile from the discarder's pile."""
    player: PlayerState = state.seats[seat]
    return state.with_seat(player.with_hand(player.hand.pop_discard()))


def _exhaustive_draw(state: GameState, events: List[GameEvent]) -> GameState:
    events.append(GameEvent(EventType.EXHAUSTIVE_DRAW, {
        "turn_count": state.turn_count,
    }))
    return _finish(state, GameResult(Outcome.EXHAUSTIVE_DRAW), events)


def _finish(state: GameState, result: GameResult,
            events: List[GameEvent]) -> GameState:
    events.append(GameEvent(EventType.GAME_END, {
        "outcome": result.outcome.value,
        "winner": result.winner,
        "loser": result.loser,
        "score_change": result.score_change,
        "final_score": state.human.score,
    }))
    return state.update(
        phase=TurnPhase.GAME_OVER,
        result=result,
        pending_interrupt=None,
        available=NO_ACTIONS,
    )
