"""Off-screen drawing layer shared by the specialised renderers."""

from __future__ import annotations

import pygame

from .geometry import Vector

WINDOW_SIZE = (1600, 1024)
TILE_SIZE = (64, 64)
TRANSPARENT = (0, 0, 0, 0)


class Subrenderer:
    """A transparent window-sized surface that one renderer draws into."""

    def __init__(self, sprite_cache=None, size: tuple[int, int] = WINDOW_SIZE) -> None:
        self.sprite_cache = sprite_cache
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self.surface.fill(TRANSPARENT)

    def clear(self) -> None:
        """Erase everything drawn so far."""
        self.surface.fill(TRANSPARENT)

    def blit(self, image: pygame.Surface, position: Vector) -> None:
        """Draw an image with its top-left corner at position."""
        self.surface.blit(image, (int(position.x), int(position.y)))

    def _blit_centered(self, image: pygame.Surface, center: Vector) -> None:
        width, height = image.get_size()
        self.blit(image, Vector(int(center.x) - width // 2, int(center.y) - height // 2))