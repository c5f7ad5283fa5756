"""Event system for decoupling engine from UI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    GAME_START = "game_start"
    GAME_END = "game_end"
    DEAL = "deal"
    DRAW = "draw"
    DISCARD = "discard"
    CHI = "chi"
    PON = "pon"
    KAN = "kan"
    RIICHI_DECLARE = "riichi_declare"
    TSUMO = "tsumo"
    RON = "ron"
    EXHAUSTIVE_DRAW = "exhaustive_draw"
    TURN_START = "turn_start"
    INTERRUPT = "interrupt"
    ACTION_REJECTED = "action_rejected"
    ADVICE = "advice"


@dataclass
class GameEvent:
    """An event emitted by the game engine."""
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


class EventBus:
    """Simple publish/subscribe event bus."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}
        self._any: List[Callable] = []

    def subscribe(self, event_type: EventType, callback: Callable):
        """Register a callback for an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(callback)

    def subscribe_all(self, callback: Callable):
        """Register a callback for every event."""
        self._any.append(callback)

    def emit(self, event: GameEvent):
        """Emit an event to all registered listeners."""
        listeners = self._listeners.get(event.event_type, [])
        for callback in listeners + self._any:
            callback(event)

    def emit_all(self, events):
        for event in events:
            self.emit(event)

    def clear(self):
        """Remove all listeners."""
        self._listeners.clear()
        self._any.clear()
