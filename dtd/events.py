"""Dispatch of window events to named listeners."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import pygame

logger = logging.getLogger(__name__)

EventSource = Callable[[], Iterable[Any]]


@dataclass
class EventListener:
    """A named callback for one kind of event."""

    name: str = "undefined"
    callback: Callable[[Any], None] = lambda event: None


class EventHandler:
    """Polls events and hands each one to the listeners of its type."""

    def __init__(self, event_source: EventSource | None = None) -> None:
        self._source = event_source if event_source is not None else pygame.event.get
        self._listeners: dict[int, list[EventListener]] = {}

    def register_listener(self, event_type: int, listener: EventListener) -> None:
        """Add a listener; one with a name already used for this type is rejected."""
        listeners = self._listeners.setdefault(event_type, [])
        if any(existing.name == listener.name for existing in listeners):
            logger.warning(
                "Tried to register listener with same name twice! Rejected %s", listener.name
            )
            return
        logger.info("Registered listener: %s", listener.name)
        listeners.append(listener)

    def update(self) -> None:
        """Dispatch every pending event."""
        for event in self._source():
            for listener in self._listeners.get(event.type, ()):
                listener.callback(event)