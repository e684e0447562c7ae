"""Choosing and dropping shooting targets for towers."""

from __future__ import annotations

import math

from .components import CircleRadius, Enemy, EnemyShooter, Position, Registry
from .ids import INVALID_ENTITY_ID


def _distance(a: Position, b: Position) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def acquire_targets(registry: Registry) -> None:
    """Give every shooter without a target the nearest enemy inside its radius."""
    for shooter_entity in registry.view(CircleRadius, Position, EnemyShooter):
        shooter = registry.get(shooter_entity, EnemyShooter)
        if shooter.target_id != INVALID_ENTITY_ID:
            continue
        shooter_pos = registry.get(shooter_entity, Position)
        radius = registry.get(shooter_entity, CircleRadius).radius

        best_distance = math.inf
        target = None
        for enemy_entity in registry.view(Position, Enemy):
            distance = _distance(shooter_pos, registry.get(enemy_entity, Position))
            if distance < radius and distance < best_distance:
                best_distance = distance
                target = enemy_entity
        if target is not None:
            shooter.target_id = target


def release_targets(registry: Registry) -> None:
    """Drop targets that no longer exist or have left the shooter's radius."""
    for shooter_entity in registry.view(CircleRadius, Position, EnemyShooter):
        shooter = registry.get(shooter_entity, EnemyShooter)
        if shooter.target_id == INVALID_ENTITY_ID:
            continue
        if not registry.valid(shooter.target_id):
            shooter.target_id = INVALID_ENTITY_ID
            continue
        shooter_pos = registry.get(shooter_entity, Position)
        radius = registry.get(shooter_entity, CircleRadius).radius
        enemy_pos = registry.get(shooter.target_id, Position)
        if _distance(shooter_pos, enemy_pos) > radius:
            shooter.target_id = INVALID_ENTITY_ID