# core/events.py
"""Per-character event bus.

Handlers run synchronously inside `publish`, on the simulation step that
produced the event. A handler that raises is logged and the remaining
handlers still run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Base class for all events."""

    pass


@dataclass
class JumpEvent(GameEvent):
    """A jump impulse was applied."""

    time: float
    speed: float
    buffered: bool = False


@dataclass
class LandedEvent(GameEvent):
    time: float


@dataclass
class LeftGroundEvent(GameEvent):
    time: float


class EventBus:
    """Simple publish/subscribe keyed by event type."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: GameEvent) -> None:
        event_type = type(event)
        # copy so handlers may unsubscribe themselves
        for handler in list(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error handling event {event_type.__name__}")
