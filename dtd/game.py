"""The game: an entity registry driven by the current scene."""

from __future__ import annotations

from .components import Registry
from .debug_render_system import TILE_SIZE
from .scene_manager import SceneManager

__all__ = ["Game", "TILE_SIZE"]


class Game:
    """Starts a battle on the assets' loaded level and advances it each frame."""

    def __init__(self, renderer, assets, sound_player, input_handler) -> None:
        self.renderer = renderer
        self.assets = assets
        self.sound_player = sound_player
        self.input_handler = input_handler
        self.registry = Registry()
        self.scene_manager = SceneManager(TILE_SIZE)
        self.scene_manager.init(self.registry, renderer, sound_player, input_handler)
        self.scene_manager.set_battle_scene(assets.loaded_level)

    def update(self, delta_time: float) -> None:
        """Advance the current scene by delta_time seconds."""
        self.scene_manager.current_scene.update(delta_time)