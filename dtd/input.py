"""Translation of mouse events into calls on a mouse listener."""

from __future__ import annotations

import abc
import logging

import pygame

from .events import EventHandler, EventListener

logger = logging.getLogger(__name__)

MOUSE_CLICK_LISTENER = "Input_mclick"


class MouseListener(abc.ABC):
    """Receives mouse clicks in screen coordinates."""

    @abc.abstractmethod
    def mouse_left_clicked(self, x: int, y: int) -> None:
        """Called for every left click."""


class InputHandler:
    """Forwards left mouse clicks to the one registered mouse listener."""

    def __init__(self, event_handler: EventHandler) -> None:
        self._event_handler = event_handler
        self._mouse_listener: MouseListener | None = None
        event_handler.register_listener(
            pygame.MOUSEBUTTONDOWN, EventListener(MOUSE_CLICK_LISTENER, self._on_mouse_click)
        )

    def _on_mouse_click(self, event) -> None:
        if self._mouse_listener is None:
            return
        if event.button == pygame.BUTTON_LEFT:
            x, y = event.pos
            self._mouse_listener.mouse_left_clicked(x, y)

    def register_mouse_listener(self, listener: MouseListener) -> None:
        """Make listener the receiver of clicks, replacing any earlier one."""
        if self._mouse_listener is not None:
            logger.info("Input handler: Mouse listener replaced")
        self._mouse_listener = listener

    def reset_listeners(self) -> None:
        """Forget the registered mouse listener."""
        self._mouse_listener = None