"""Game components and the registry that stores them per entity."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .geometry import Vector
from .ids import INVALID_ENTITY_ID, EntityId, ProjectileType, SoundId, SpriteId

DEFAULT_FRAME_DURATION = 0.1

T = TypeVar("T")


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Direction:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity:
    velocity: float = 0.0


@dataclass
class Health:
    health: float = 0.0
    max_health: float = 0.0


@dataclass
class Enemy:
    """Tag for enemy entities."""


@dataclass
class Tower:
    """Tag for tower entities."""


@dataclass
class Transform:
    width: int = 0
    height: int = 0
    scale: int = 1


@dataclass
class CircleRadius:
    radius: float = 0.0


@dataclass
class Damage:
    damage: float = 0.0
    radius: float = 0.0


@dataclass
class EnemyShooter:
    shooting_delay: float = 1.0
    target_id: EntityId = INVALID_ENTITY_ID
    enabled: bool = True
    shooting_time: float = 0.0


class MouseButton(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MIDDLE = enum.auto()


@dataclass
class MouseClick:
    """Tag for a pending mouse click."""


@dataclass
class Projectile:
    damage: float = 0.0
    target_pos: Vector = field(default_factory=Vector)
    projectile_type: ProjectileType = ProjectileType.BASIC
    prev_pos: Vector = field(default_factory=lambda: Vector(-9999999.0, -9999999.0))


@dataclass
class Sound:
    sound: SoundId = SoundId.SILENT


@dataclass
class Sprite:
    sprite: SpriteId = SpriteId.RECTANGLE_BLACK


@dataclass
class SpriteAnimation:
    frames: list[SpriteId] = field(default_factory=lambda: [SpriteId.RECTANGLE_BLACK])
    duration: float = 1.0
    frame_duration: float = DEFAULT_FRAME_DURATION
    cur_frame: int = 0


@dataclass
class WaypointFollower:
    spawn_index: int = -1
    waypoint_index: int = -1


@dataclass
class TowerSelectCommand:
    selected_tower: EntityId = INVALID_ENTITY_ID


class Registry:
    """Stores entities and at most one component of each type per entity."""

    def __init__(self) -> None:
        self._next_id = 0
        self._entities: set[int] = set()
        self._pools: dict[type, dict[int, Any]] = {}

    def create(self) -> int:
        """Create a new entity and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._entities.add(entity)
        return entity

    def valid(self, entity: int) -> bool:
        """True if the entity exists and has not been destroyed."""
        return entity in self._entities

    def _require_valid(self, entity: int) -> None:
        if entity not in self._entities:
            raise KeyError(f"entity {entity} does not exist")

    def emplace(self, entity: int, component: T) -> T:
        """Attach a component to an entity and return it."""
        self._require_valid(entity)
        pool = self._pools.setdefault(type(component), {})
        if entity in pool:
            raise ValueError(
                f"entity {entity} already has a {type(component).__name__} component"
            )
        pool[entity] = component
        return component

    def get(self, entity: int, component_type: type[T]) -> T:
        """Component of the given type on the entity; KeyError if absent."""
        try:
            return self._pools[component_type][entity]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def has(self, entity: int, component_type: type) -> bool:
        return entity in self._pools.get(component_type, {})

    def remove(self, entity: int, component_type: type) -> None:
        """Detach a component type from an entity; no effect if it is absent."""
        self._pools.get(component_type, {}).pop(entity, None)

    def destroy(self, entity: int) -> None:
        """Remove an entity together with all its components."""
        self._require_valid(entity)
        for pool in self._pools.values():
            pool.pop(entity, None)
        self._entities.discard(entity)

    def view(self, *args: type) -> Iterator[int]:
        """Entities holding every given component type.

        Entities destroyed or stripped during iteration are skipped.
        """
        if not args:
            raise TypeError("view() needs at least one component type")
        pools = [self._pools.get(component_type, {}) for component_type in args]
        smallest = min(pools, key=len)
        for entity in list(smallest):
            if all(entity in pool for pool in pools):
                yield entity