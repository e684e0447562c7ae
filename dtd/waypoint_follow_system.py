"""Steering of enemies along their waypoint paths."""

from __future__ import annotations

import math

from .components import Direction, Position, Registry, WaypointFollower
from .geometry import Vector
from .level import Level, Waypoint

WAYPOINT_SWITCH_DISTANCE = 1.0


class WaypointFollowSystem:
    """Moves followers on to their next waypoint and points them at it."""

    def __init__(self) -> None:
        self._level: Level | None = None

    def set_level(self, level: Level | None) -> None:
        """Use the given level's paths; None disables the system."""
        self._level = level

    def _target(self, follower: WaypointFollower) -> Waypoint | None:
        paths = self._level.waypoints
        if not 0 <= follower.spawn_index < len(paths):
            return None
        waypoints = paths[follower.spawn_index].waypoints
        if not 0 <= follower.waypoint_index < len(waypoints):
            return None
        return waypoints[follower.waypoint_index]

    def update_entity_waypoints(self, registry: Registry) -> None:
        """Switch to the next waypoint once a follower has reached its current one."""
        if self._level is None:
            return
        for entity in registry.view(Position, WaypointFollower):
            follower = registry.get(entity, WaypointFollower)
            target = self._target(follower)
            if target is None:
                continue
            pos = registry.get(entity, Position)
            distance = math.hypot(target.point.x - pos.x, target.point.y - pos.y)
            if distance < WAYPOINT_SWITCH_DISTANCE:
                follower.waypoint_index += 1

    def update_entity_directions(self, registry: Registry) -> None:
        """Point every follower towards its current waypoint."""
        if self._level is None:
            return
        for entity in registry.view(Direction, Position, WaypointFollower):
            target = self._target(registry.get(entity, WaypointFollower))
            if target is None:
                continue
            pos = registry.get(entity, Position)
            unit = Vector(target.point.x - pos.x, target.point.y - pos.y).normalize()
            direction = registry.get(entity, Direction)
            direction.x, direction.y = unit.x, unit.y