"""Firing of projectiles by towers at their targets."""

from __future__ import annotations

from .components import EnemyShooter, Position, Registry
from .entities import create_projectile
from .geometry import Vector
from .ids import INVALID_ENTITY_ID, ProjectileType

PROJECTILE_VELOCITY = 50.0
PROJECTILE_DAMAGE = 10.0


def shoot_enemies(registry: Registry, dt: float) -> None:
    """Fire at the target of every enabled shooter whose reload time has run out."""
    for entity in registry.view(EnemyShooter, Position):
        shooter = registry.get(entity, EnemyShooter)
        if not shooter.enabled or shooter.target_id == INVALID_ENTITY_ID:
            continue
        shooter.shooting_time -= dt
        if shooter.shooting_time > 0.0:
            continue
        shooter_pos = registry.get(entity, Position)
        enemy_pos = registry.get(shooter.target_id, Position)
        shooter.shooting_time = shooter.shooting_delay
        create_projectile(
            registry,
            ProjectileType.BASIC,
            Vector(shooter_pos.x, shooter_pos.y),
            Vector(enemy_pos.x, enemy_pos.y),
            PROJECTILE_VELOCITY,
            PROJECTILE_DAMAGE,
        )