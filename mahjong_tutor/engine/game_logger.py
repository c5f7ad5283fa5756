"""Game logger - records every engine event for debugging and the end-of-game summary."""

from typing import List, Optional

import structlog

from mahjong_tutor.core.tile import tile_name
from mahjong_tutor.engine.event import EventBus, EventType, GameEvent

logger = structlog.get_logger(__name__)


def _tiles_str(tiles) -> List[str]:
    return [tile_name(t) for t in tiles]


class GameLogger:
    """Logs engine events through structlog and keeps the current game's actions in memory."""

    def __init__(self, player_names: List[str]):
        self.player_names = list(player_names)
        self.game_id: Optional[int] = None
        self.initial_hands: dict = {}
        self.actions: List[dict] = []
        self.result: Optional[dict] = None

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to engine events for automatic logging."""
        event_bus.subscribe(EventType.GAME_START, self._on_game_start)
        event_bus.subscribe(EventType.DEAL, self._on_deal)
        event_bus.subscribe(EventType.DRAW, self._on_draw)
        event_bus.subscribe(EventType.DISCARD, self._on_discard)
        event_bus.subscribe(EventType.CHI, self._on_call)
        event_bus.subscribe(EventType.PON, self._on_call)
        event_bus.subscribe(EventType.KAN, self._on_call)
        event_bus.subscribe(EventType.RIICHI_DECLARE, self._on_riichi)
        event_bus.subscribe(EventType.TSUMO, self._on_win)
        event_bus.subscribe(EventType.RON, self._on_win)
        event_bus.subscribe(EventType.EXHAUSTIVE_DRAW, self._on_exhaustive_draw)
        event_bus.subscribe(EventType.ACTION_REJECTED, self._on_rejected)
        event_bus.subscribe(EventType.GAME_END, self._on_game_end)

    def _name(self, seat) -> Optional[str]:
        if seat is None:
            return None
        return self.player_names[seat] if 0 <= seat < len(self.player_names) else "?"

    def summary(self) -> dict:
        """Everything recorded for the current game."""
        return {
            "game_id": self.game_id,
            "players": self.player_names,
            "initial_hands": self.initial_hands,
            "actions": list(self.actions),
            "result": self.result,
        }

    # --- Event handlers ---

    def _on_game_start(self, event: GameEvent):
        self.game_id = event.data["game_id"]
        self.initial_hands = {}
        self.actions = []
        self.result = None
        logger.info("game started", game_id=self.game_id)

    def _on_deal(self, event: GameEvent):
        """Called after the initial deal; records every starting hand."""
        self.initial_hands = {
            self._name(seat): _tiles_str(tiles)
            for seat, tiles in event.data["hands"].items()
        }
        logger.debug("dealt", hands=self.initial_hands,
                     wall_remaining=event.data["wall_remaining"])

    def _log_action(self, action_type: str, player: int, **kwargs):
        entry = {"action": action_type, "player": self._name(player), "seat": player}
        entry.update(kwargs)
        self.actions.append(entry)
        logger.debug(action_type, **entry)

    def _on_draw(self, event: GameEvent):
        d = event.data
        extra = {}
        if d.get("replacement"):
            extra["replacement"] = True
        self._log_action("draw", d["player"], tile=tile_name(d["tile"]), **extra)

    def _on_discard(self, event: GameEvent):
        d = event.data
        self._log_action("discard", d["player"], tile=tile_name(d["tile"]),
                         tsumogiri=d.get("is_tsumogiri", False))

    def _on_call(self, event: GameEvent):
        d = event.data
        meld = d["meld"]
        self._log_action(meld.meld_type.value, d["player"],
                         tiles=_tiles_str(meld.tiles),
                         from_player=self._name(meld.from_player))

    def _on_riichi(self, event: GameEvent):
        d = event.data
        self._log_action("riichi", d["player"], tile=tile_name(d["tile"]))

    def _on_win(self, event: GameEvent):
        d = event.data
        kind = event.event_type.value
        extra = {}
        if "from_player" in d:
            extra["from_player"] = self._name(d["from_player"])
        self._log_action(kind, d["player"], tile=tile_name(d.get("tile")), **extra)

    def _on_exhaustive_draw(self, event: GameEvent):
        logger.info("wall exhausted", turn_count=event.data.get("turn_count"))

    def _on_rejected(self, event: GameEvent):
        logger.warning("action rejected", **event.data)

    def _on_game_end(self, event: GameEvent):
        d = event.data
        self.result = {
            "outcome": d["outcome"],
            "winner": self._name(d["winner"]),
            "loser": self._name(d["loser"]),
            "score_change": d["score_change"],
            "final_score": d["final_score"],
        }
        logger.info("game ended", game_id=self.game_id, **self.result)
