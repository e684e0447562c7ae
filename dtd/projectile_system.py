"""Detection of projectiles reaching their target point."""

from __future__ import annotations

from .components import Position, Projectile, Registry
from .entities import create_hit
from .geometry import Vector, direction, float_eq

HIT_DISTANCE = 1.0
HIT_RADIUS = 10.0


def destroy_projectiles(registry: Registry) -> None:
    """Turn projectiles that passed their target point into hits.

    A projectile has passed its target when the target lies on the segment
    between its previous and current position.
    """
    for entity in registry.view(Position, Projectile):
        pos = registry.get(entity, Position)
        current = Vector(pos.x, pos.y)
        projectile = registry.get(entity, Projectile)
        target = projectile.target_pos
        previous = projectile.prev_pos

        to_target = direction(current, target).length()
        previous_to_target = direction(previous, target).length()
        travelled = direction(current, previous).length()
        hit = float_eq(to_target + previous_to_target, travelled, HIT_DISTANCE)

        projectile.prev_pos = current
        if hit:
            create_hit(
                registry,
                projectile.projectile_type,
                target,
                projectile.damage,
                HIT_RADIUS,
            )
            registry.destroy(entity)