"""Factories that assemble game entities from components."""

from __future__ import annotations

import logging

from .components import (
    CircleRadius,
    Damage,
    Direction,
    Enemy,
    EnemyShooter,
    Health,
    MouseClick,
    Position,
    Projectile,
    Registry,
    Sound,
    Sprite,
    SpriteAnimation,
    Tower,
    TowerSelectCommand,
    Transform,
    Velocity,
    WaypointFollower,
)
from .geometry import Vector, direction
from .ids import (
    EnemyType,
    EntityId,
    ProjectileType,
    SpriteId,
    get_enemy_sprite,
    get_enemy_type,
    get_hit_sound,
    get_projectile_sprite,
)

logger = logging.getLogger(__name__)


def get_enemy_velocity(enemy_type: EnemyType) -> float:
    """Movement speed for an enemy type; 1.0 for unhandled types."""
    if enemy_type is EnemyType.BASIC:
        return 1.0
    logger.warning("Unhandled enemy type %s, cannot provide velocity. Using 1.0", enemy_type)
    return 1.0


def create_debug_entity(registry: Registry, x: float, y: float) -> int:
    """Create a basic tower at the given position."""
    entity = registry.create()
    registry.emplace(entity, Position(x, y))
    registry.emplace(entity, Sprite(SpriteId.BASIC_TOWER))
    registry.emplace(entity, EnemyShooter(0.5))
    registry.emplace(entity, Tower())
    registry.emplace(entity, Transform(40, 50, 1))
    registry.emplace(entity, CircleRadius(200.0))
    return entity


def create_enemy(
    registry: Registry,
    enemy_type: str,
    pos: Vector,
    spawn_index: int,
    hitpoints: float,
) -> int:
    """Create an enemy that follows the waypoints of the given spawn."""
    entity = registry.create()
    kind = get_enemy_type(enemy_type)
    registry.emplace(entity, Position(pos.x, pos.y))
    registry.emplace(entity, Sprite(get_enemy_sprite(enemy_type)))
    registry.emplace(entity, Direction(0.0, 0.0))
    registry.emplace(entity, Enemy())
    registry.emplace(entity, Transform(20, 32, 1))
    registry.emplace(entity, Health(hitpoints, hitpoints))
    registry.emplace(entity, WaypointFollower(spawn_index, 1))
    registry.emplace(entity, Velocity(get_enemy_velocity(kind)))
    return entity


def create_projectile(
    registry: Registry,
    projectile_type: ProjectileType,
    pos: Vector,
    target_pos: Vector,
    velocity: float,
    damage: float,
) -> int:
    """Create a projectile flying from pos towards target_pos."""
    entity = registry.create()
    registry.emplace(entity, Position(pos.x, pos.y))
    registry.emplace(entity, Sprite(get_projectile_sprite(projectile_type)))
    unit = direction(pos, target_pos).normalize()
    registry.emplace(entity, Direction(unit.x, unit.y))
    registry.emplace(
        entity, Projectile(damage, Vector(target_pos.x, target_pos.y), projectile_type)
    )
    registry.emplace(entity, Velocity(velocity))
    return entity


def create_mouse_click(registry: Registry, x: int, y: int) -> int:
    """Record a mouse click at screen position (x, y)."""
    entity = registry.create()
    registry.emplace(entity, Position(float(x), float(y)))
    registry.emplace(entity, MouseClick())
    return entity


def create_hit(
    registry: Registry,
    projectile_type: ProjectileType,
    pos: Vector,
    damage: float,
    radius: float,
) -> int:
    """Create a hit with area damage, a sound and an explosion animation."""
    entity = registry.create()
    registry.emplace(entity, Position(pos.x, pos.y))
    registry.emplace(entity, Sound(get_hit_sound(projectile_type)))
    registry.emplace(entity, Damage(damage, radius))
    registry.emplace(
        entity,
        SpriteAnimation(
            [SpriteId.BASIC_PROJECTILE_HIT_1, SpriteId.BASIC_PROJECTILE_HIT_2], 0.5
        ),
    )
    return entity


def create_tower_select_command(registry: Registry, entity_id: EntityId) -> int:
    """Create a command selecting the given tower."""
    entity = registry.create()
    registry.emplace(entity, TowerSelectCommand(entity_id))
    return entity