"""Removal of defeated enemies."""

from __future__ import annotations

from .components import Enemy, Health, Registry


def dispose_enemies_by_health(registry: Registry) -> None:
    """Destroy every enemy whose health has dropped to zero or below."""
    for entity in registry.view(Enemy, Health):
        if registry.get(entity, Health).health <= 0.0:
            registry.destroy(entity)