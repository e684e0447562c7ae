"""Playing of sounds queued by game entities."""

from __future__ import annotations

from .components import Registry, Sound


def play_hit_sounds(sound_player, registry: Registry) -> None:
    """Play every queued sound once and drop its component."""
    for entity in registry.view(Sound):
        sound_player.play_sound(registry.get(entity, Sound).sound)
        registry.remove(entity, Sound)