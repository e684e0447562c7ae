"""Composition of the drawing layers into the game window."""

from __future__ import annotations

import pygame

from .geometry import Vector
from .hud_renderer import HudRenderer
from .level_renderer import LevelRenderer
from .shape_renderer import ShapeRenderer
from .sprite_cache import SpriteCache
from .sprite_renderer import SpriteRenderer
from .subrenderer import WINDOW_SIZE, Subrenderer

BACKGROUND_COLOR = (145, 178, 199)
WINDOW_TITLE = "Dtd!"


class Renderer:
    """Owns the window and the level, sprite, HUD and shape layers.

    Without a window surface a display window is opened; a given surface
    is drawn into instead.
    """

    def __init__(self, assets, window: pygame.Surface | None = None) -> None:
        self._assets = assets
        self._owns_display = window is None
        if window is None:
            pygame.display.init()
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
        self.window = window
        self.window_open = True
        self.sprite_cache = SpriteCache(assets)
        self.sprite_renderer = SpriteRenderer(self.sprite_cache)
        self.hud_renderer = HudRenderer(self.sprite_cache)
        self.level_renderer = LevelRenderer(assets)
        self.shape_renderer = ShapeRenderer()

    @property
    def window_size(self) -> Vector:
        width, height = self.window.get_size()
        return Vector(width, height)

    def _layers(self) -> tuple[Subrenderer, ...]:
        """Layers in drawing order, bottom first."""
        return (
            self.level_renderer,
            self.sprite_renderer,
            self.hud_renderer,
            self.shape_renderer,
        )

    def render(self) -> None:
        """Draw every layer onto the window and show it."""
        if not self.window_open:
            return
        for layer in self._layers():
            self.window.blit(layer.surface, (0, 0))
        if self._owns_display:
            pygame.display.flip()

    def clear(self) -> None:
        """Erase all layers and fill the window with the background colour."""
        if not self.window_open:
            return
        for layer in self._layers():
            layer.clear()
        self.window.fill(BACKGROUND_COLOR)

    def close_window(self) -> None:
        """Close the window; later render and clear calls do nothing."""
        if not self.window_open:
            return
        self.window_open = False
        if self._owns_display:
            pygame.display.quit()