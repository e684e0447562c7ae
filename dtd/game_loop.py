"""The main loop: events, game update and rendering, frame after frame."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import pygame

from .events import EventListener

logger = logging.getLogger(__name__)

FAST_FORWARD_FACTOR = 6.0
CLOSE_LISTENER = "game_loop_close"
SPEED_LISTENER = "double_speed_button"


class GameLoop:
    """Runs the game until the window is closed or stop is called.

    Holding space runs the game at fast-forward speed.
    """

    def __init__(
        self,
        game,
        renderer,
        event_handler,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._game = game
        self._renderer = renderer
        self._event_handler = event_handler
        self._clock = clock
        self._running = False
        self._fast_forward = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def fast_forward(self) -> bool:
        return self._fast_forward

    def _on_close(self, event) -> None:
        logger.info("Window closed, shutdown game loop")
        self._renderer.close_window()
        self.stop()

    def _on_speed_button(self, event) -> None:
        if event.key != pygame.K_SPACE:
            return
        if event.type == pygame.KEYDOWN:
            self._fast_forward = True
        elif event.type == pygame.KEYUP:
            self._fast_forward = False

    def start(self) -> None:
        """Register the loop's listeners and run until stopped; no-op if running."""
        if self._running:
            return
        self._running = True
        close_listener = EventListener(CLOSE_LISTENER, self._on_close)
        speed_listener = EventListener(SPEED_LISTENER, self._on_speed_button)
        self._event_handler.register_listener(pygame.QUIT, close_listener)
        self._event_handler.register_listener(pygame.KEYDOWN, speed_listener)
        self._event_handler.register_listener(pygame.KEYUP, speed_listener)
        logger.info("Starting game loop..")
        self._run()

    def stop(self) -> None:
        """Make the loop end after the current frame."""
        self._running = False

    def _run(self) -> None:
        last = self._clock()
        while self._running:
            now = self._clock()
            dt = now - last
            last = now
            self._event_handler.update()
            factor = FAST_FORWARD_FACTOR if self._fast_forward else 1.0
            self._game.update(dt * factor)
            self._renderer.render()
            self._renderer.clear()
        self._running = False