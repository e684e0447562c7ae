"""Handling of pending mouse clicks."""

from __future__ import annotations

import logging

from .camera import Camera
from .components import MouseClick, Position, Registry, Tower, Transform
from .entities import create_tower_select_command
from .geometry import Rect, Vector

logger = logging.getLogger(__name__)


def _handle_mouse_click_tower(registry: Registry, x: int, y: int) -> bool:
    point = Vector(float(x), float(y))
    for entity in registry.view(Tower, Position, Transform):
        pos = registry.get(entity, Position)
        transform = registry.get(entity, Transform)
        width = float(transform.width) * transform.scale
        height = float(transform.height) * transform.scale
        if Rect(pos.x - width / 2, pos.y - height / 2, width, height).contains(point):
            logger.info("Tower %s selected", entity)
            create_tower_select_command(registry, entity)
            return True
    return False


def process_mouse_click(registry: Registry, camera: Camera) -> None:
    """Select the tower under each pending click, then discard the click."""
    for entity in registry.view(MouseClick, Position):
        pos = registry.get(entity, Position)
        _handle_mouse_click_tower(registry, int(pos.x), int(pos.y))
        registry.destroy(entity)