"""Application of area damage to enemies."""

from __future__ import annotations

from .components import Damage, Enemy, Health, Position, Registry
from .geometry import float_eq


def deal_damage(registry: Registry) -> None:
    """Damage every enemy whose centre lies within a damage entity's square radius.

    Each damage component is consumed after it has been applied once.
    """
    for damage_entity in registry.view(Damage, Position):
        damage = registry.get(damage_entity, Damage)
        damage_pos = registry.get(damage_entity, Position)
        hits = [
            enemy
            for enemy in registry.view(Enemy, Position, Health)
            if float_eq(damage_pos.x, registry.get(enemy, Position).x, damage.radius)
            and float_eq(damage_pos.y, registry.get(enemy, Position).y, damage.radius)
        ]
        for enemy in hits:
            registry.get(enemy, Health).health -= damage.damage
        registry.remove(damage_entity, Damage)