"""Ownership of the scenes and switching between them."""

from __future__ import annotations

import logging

from .camera import Camera
from .components import Registry
from .debug_render_system import TILE_SIZE
from .level import Level
from .scenes import BattleScene, MenuScene, Scene, SceneId

logger = logging.getLogger(__name__)


class SceneManager:
    """Holds one scene of each kind and knows which one is current."""

    def __init__(self, tile_size: int = TILE_SIZE) -> None:
        self.camera = Camera(tile_size)
        self._scenes: dict[SceneId, Scene] = {}
        self._current = SceneId.UNINITIALIZED

    @property
    def current_scene_id(self) -> SceneId:
        return self._current

    @property
    def current_scene(self) -> Scene:
        try:
            return self._scenes[self._current]
        except KeyError:
            raise RuntimeError("scene manager has not been initialised") from None

    def init(self, registry: Registry, renderer, sound_player, input_handler) -> None:
        """Create the scenes, all sharing the registry, camera and services."""
        self.camera.viewport_size = renderer.window_size
        args = (registry, self.camera, renderer, sound_player, input_handler)
        self._scenes[SceneId.UNINITIALIZED] = Scene(*args)
        self._scenes[SceneId.BATTLE] = BattleScene(*args)
        self._scenes[SceneId.MENU] = MenuScene(*args)

    def set_battle_scene(self, level: Level) -> None:
        """Make the battle scene current and start it on level."""
        battle = self._scenes.get(SceneId.BATTLE)
        if not isinstance(battle, BattleScene):
            raise RuntimeError("scene manager has not been initialised")
        if self._current is SceneId.BATTLE and battle.level_id == level.id:
            logger.warning("Tried to initialize same level (%s) twice!", level.id)
            return
        self.current_scene.dispose()
        self._current = SceneId.BATTLE
        battle.init(level)