"""Debug overlays: the tile grid and tower shooting ranges."""

from __future__ import annotations

from .components import CircleRadius, Position, Registry
from .geometry import ScreenCoord

TILE_SIZE = 64


def render_grid(renderer) -> None:
    """Draw a grid of tile-sized cells."""
    renderer.draw_grid(TILE_SIZE)


def render_shoot_radiuses(renderer, registry: Registry) -> None:
    """Draw the range circle of every entity that has one."""
    for entity in registry.view(CircleRadius, Position):
        pos = registry.get(entity, Position)
        renderer.draw_circle(
            ScreenCoord(int(pos.x), int(pos.y)), registry.get(entity, CircleRadius).radius
        )