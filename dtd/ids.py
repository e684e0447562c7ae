"""Identifier types and lookup tables for sprites, sounds and enemies."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)

AssetId = str
INVALID_ASSET_ID: AssetId = "undefined"

EntityId = int
INVALID_ENTITY_ID: EntityId = 0xFFFFFFFF


class ProjectileType(enum.Enum):
    BASIC = enum.auto()


class SpriteId(enum.Enum):
    RECTANGLE_BLACK = enum.auto()
    RECTANGLE_GREEN = enum.auto()
    RECTANGLE_RED = enum.auto()
    BASIC_ENEMY = enum.auto()
    BASIC_TOWER = enum.auto()
    BASIC_PROJECTILE = enum.auto()
    BASIC_PROJECTILE_HIT_1 = enum.auto()
    BASIC_PROJECTILE_HIT_2 = enum.auto()


class SoundId(enum.Enum):
    SILENT = enum.auto()
    BASIC_PROJECTILE_HIT_1 = enum.auto()


class EnemyType(enum.Enum):
    UNKNOWN = enum.auto()
    BASIC = enum.auto()


ENEMY_SPRITES: dict[str, SpriteId] = {"basic": SpriteId.BASIC_ENEMY}
PROJECTILE_SPRITES: dict[ProjectileType, SpriteId] = {
    ProjectileType.BASIC: SpriteId.BASIC_PROJECTILE
}
HIT_SOUNDS: dict[ProjectileType, SoundId] = {
    ProjectileType.BASIC: SoundId.BASIC_PROJECTILE_HIT_1
}
ENEMY_TYPES: dict[str, EnemyType] = {"basic": EnemyType.BASIC}


def get_enemy_sprite(enemy_type: str) -> SpriteId:
    """Sprite for an enemy type name, black rectangle when unmapped."""
    try:
        return ENEMY_SPRITES[enemy_type]
    except KeyError:
        logger.warning("Sprite with id %s does not exist / mapping missing!", enemy_type)
        return SpriteId.RECTANGLE_BLACK


def get_projectile_sprite(projectile_type: ProjectileType) -> SpriteId:
    """Sprite for a projectile type, black rectangle when unmapped."""
    try:
        return PROJECTILE_SPRITES[projectile_type]
    except KeyError:
        logger.warning("Sprite with id %s does not exist / mapping missing!", projectile_type)
        return SpriteId.RECTANGLE_BLACK


def get_hit_sound(projectile_type: ProjectileType) -> SoundId:
    """Hit sound for a projectile type, silence when unmapped."""
    try:
        return HIT_SOUNDS[projectile_type]
    except KeyError:
        logger.warning("Hit sound with id %s does not exist / mapping missing!", projectile_type)
        return SoundId.SILENT


def get_enemy_type(enemy_type: str) -> EnemyType:
    """Enemy type for a name, UNKNOWN when unmapped."""
    try:
        return ENEMY_TYPES[enemy_type]
    except KeyError:
        logger.warning("Enemy type %s does not exist / mapping missing!", enemy_type)
        return EnemyType.UNKNOWN