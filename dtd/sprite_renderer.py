"""Drawing of sprites at screen positions."""

from __future__ import annotations

import logging

from .geometry import ScreenCoord
from .ids import SpriteId
from .sprite_cache import SpriteCache
from .subrenderer import Subrenderer

logger = logging.getLogger(__name__)


class SpriteRenderer(Subrenderer):
    """Draws cached sprites centred on screen coordinates."""

    def __init__(self, sprite_cache: SpriteCache) -> None:
        super().__init__(sprite_cache)

    def render_sprite(self, sprite_id: SpriteId, screen_coord: ScreenCoord) -> None:
        """Draw the sprite with its centre at screen_coord."""
        image = self.sprite_cache.get(sprite_id)
        if image is None:
            logger.warning("Could not find sprite for id %s", sprite_id)
            return
        self._blit_centered(image, screen_coord)