"""Drawing of the heads-up display."""

from __future__ import annotations

import logging

import pygame

from .geometry import Vector
from .ids import SpriteId
from .sprite_cache import SpriteCache
from .subrenderer import Subrenderer

logger = logging.getLogger(__name__)

BUY_MENU_POSITION = Vector(800.0, 200.0)
BUY_MENU_SCALE = (5, 10)


class HudRenderer(Subrenderer):
    """Draws HUD elements such as the buy menu."""

    def __init__(self, sprite_cache: SpriteCache) -> None:
        super().__init__(sprite_cache)

    def render_buy_menu(self) -> None:
        """Draw the buy menu background as a stretched black rectangle."""
        image = self.sprite_cache.get(SpriteId.RECTANGLE_BLACK)
        if image is None:
            logger.warning("Could not find sprite for Rectangle_black")
            return
        width, height = image.get_size()
        scaled = pygame.transform.scale(
            image, (width * BUY_MENU_SCALE[0], height * BUY_MENU_SCALE[1])
        )
        self._blit_centered(scaled, BUY_MENU_POSITION)