"""Movement of entities along their direction."""

from __future__ import annotations

from .components import Direction, Position, Registry, Velocity

# Scales a velocity of 1.0 to a sensible number of pixels per second.
SPEED_MULTIPLIER = 50.0


def move_entities(registry: Registry, dt: float) -> None:
    """Advance every moving entity by direction * velocity over dt seconds."""
    for entity in registry.view(Direction, Position, Velocity):
        direction = registry.get(entity, Direction)
        speed = registry.get(entity, Velocity).velocity * dt * SPEED_MULTIPLIER
        pos = registry.get(entity, Position)
        pos.x += direction.x * speed
        pos.y += direction.y * speed