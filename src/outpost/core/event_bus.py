"""In-memory gameplay event log with named observers."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger


@dataclass
class Event:
    name: str
    payload: dict[str, Any]


Handler = Callable[[Event], None]


class EventBus:
    """Keeps every emitted event until drained and notifies subscribers.

    Observers such as an outcome overlay subscribe by event name; they
    must only read game state.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, name: str, handler: Handler) -> None:
        self._handlers[name].append(handler)

    def emit(self, name: str, **payload: Any) -> None:
        event = Event(name=name, payload=payload)
        self._events.append(event)
        logger.trace(f"{name}: {payload}")
        for handler in self._handlers.get(name, ()):
            handler(event)

    @property
    def events(self) -> list[Event]:
        return self._events

    def named(self, name: str) -> list[Event]:
        return [event for event in self._events if event.name == name]

    def drain(self) -> list[Event]:
        events = self._events[:]
        self._events.clear()
        return events
