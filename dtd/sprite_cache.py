"""Sprites cut out of the loaded textures, looked up by sprite id."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from .ids import SpriteId

logger = logging.getLogger(__name__)

SPRITE_SIZE = (64, 64)
TILESHEET_ID = "td_tilesheet"


@dataclass(frozen=True)
class CachedSprite:
    """Where a sprite's image lies: a texture and a rectangle within it."""

    sprite_id: SpriteId
    texture: pygame.Surface | None
    rect: pygame.Rect


class SpriteCache:
    """Knows the texture region of every sprite id."""

    def __init__(self, assets) -> None:
        self._assets = assets
        self._sprites: list[CachedSprite] = []
        self._init_rectangles()
        self._init_towers()
        self._init_enemies()
        self._init_projectiles()

    @property
    def sprites(self) -> tuple[CachedSprite, ...]:
        return tuple(self._sprites)

    def get(self, sprite_id: SpriteId) -> pygame.Surface | None:
        """Image of the sprite, sized to its rectangle, or None if unavailable."""
        cached = next((s for s in self._sprites if s.sprite_id == sprite_id), None)
        if cached is None:
            logger.error("Could not find sprite %s", sprite_id)
            return None
        if cached.texture is None:
            logger.error("Sprite %s has no texture", sprite_id)
            return None
        return _cut(cached.texture, cached.rect)

    def _add(self, sprite_id: SpriteId, texture: pygame.Surface | None, x: int, y: int) -> None:
        self._sprites.append(CachedSprite(sprite_id, texture, pygame.Rect((x, y), SPRITE_SIZE)))

    def _init_rectangles(self) -> None:
        for sprite_id, asset_id in (
            (SpriteId.RECTANGLE_BLACK, "texture_black"),
            (SpriteId.RECTANGLE_RED, "texture_red"),
            (SpriteId.RECTANGLE_GREEN, "texture_green"),
        ):
            texture = self._assets.get_texture(asset_id)
            if texture is not None:
                self._add(sprite_id, texture, 0, 0)

    def _init_towers(self) -> None:
        self._add(SpriteId.BASIC_TOWER, self._assets.get_texture(TILESHEET_ID), 1216, 640)

    def _init_enemies(self) -> None:
        self._add(SpriteId.BASIC_ENEMY, self._assets.get_texture(TILESHEET_ID), 960, 640)

    def _init_projectiles(self) -> None:
        texture = self._assets.get_texture(TILESHEET_ID)
        self._add(SpriteId.BASIC_PROJECTILE, texture, 1216, 704)
        self._add(SpriteId.BASIC_PROJECTILE_HIT_1, texture, 1216, 768)
        self._add(SpriteId.BASIC_PROJECTILE_HIT_2, texture, 1280, 768)


def _cut(texture: pygame.Surface, rect: pygame.Rect) -> pygame.Surface:
    """Copy a region of the texture; a region past the edges is stretched to size."""
    clipped = rect.clip(texture.get_rect())
    if clipped.width == 0 or clipped.height == 0:
        image = pygame.Surface(rect.size, pygame.SRCALPHA)
        image.fill((0, 0, 0, 0))
        return image
    region = texture.subsurface(clipped)
    if clipped.size != rect.size:
        return pygame.transform.scale(region, rect.size)
    return region.copy()