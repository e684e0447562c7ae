"""Conversion between world positions and tile coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vector


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


@dataclass
class Camera:
    tile_size: int
    position: Vector = field(default_factory=Vector)
    viewport_size: Vector = field(default_factory=Vector)

    def get_tile_coordinate(self, world_position: Vector) -> Vector:
        """Tile holding the world position, offset horizontally by the camera."""
        return Vector(
            self.position.x + _trunc_div(int(world_position.x), self.tile_size),
            _trunc_div(int(world_position.y), self.tile_size),
        )