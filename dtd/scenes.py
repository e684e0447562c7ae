"""Game scenes and the routing of mouse input to the active one."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from . import debug_render_system, render_system
from .camera import Camera
from .components import Registry
from .damage_system import deal_damage
from .enemy_dispose_system import dispose_enemies_by_health
from .enemy_spawn_system import EnemySpawnSystem
from .entities import create_debug_entity, create_mouse_click
from .input import MouseListener
from .level import UNDEFINED_LEVEL_ID, Level
from .mouse_click_system import process_mouse_click
from .movement_system import move_entities
from .projectile_system import destroy_projectiles
from .shooting_system import shoot_enemies
from .sound_system import play_hit_sounds
from .targeting_system import acquire_targets, release_targets
from .waypoint_follow_system import WaypointFollowSystem

logger = logging.getLogger(__name__)

MouseLeftHandler = Callable[[int, int], None]

DEBUG_TOWER_POSITIONS = ((608.0, 352.0), (864.0, 544.0))


class SceneId(enum.Enum):
    MENU = enum.auto()
    BATTLE = enum.auto()
    UNINITIALIZED = enum.auto()


class SceneInputHandler(MouseListener):
    """Mouse listener of one scene, forwarding left clicks to a callback."""

    def __init__(self, input_handler) -> None:
        self._input_handler = input_handler
        self._mouse_left_callback: MouseLeftHandler | None = None

    def enable(self) -> None:
        """Start receiving clicks from the input handler."""
        self._input_handler.register_mouse_listener(self)

    def disable(self) -> None:
        """Stop receiving clicks."""
        self._input_handler.reset_listeners()

    def handle_mouse_left_click(self, callback: MouseLeftHandler) -> None:
        """Call callback with the coordinates of every left click."""
        self._mouse_left_callback = callback

    def mouse_left_clicked(self, x: int, y: int) -> None:
        if self._mouse_left_callback is not None:
            self._mouse_left_callback(x, y)


class Scene:
    """A scene that does nothing; the base of all scenes."""

    def __init__(
        self,
        registry: Registry,
        camera: Camera,
        renderer,
        sound_player,
        input_handler,
    ) -> None:
        self.registry = registry
        self.camera = camera
        self.renderer = renderer
        self.sound_player = sound_player
        self.input_handler = SceneInputHandler(input_handler)

    def dispose(self) -> None:
        """Release what the scene holds when it stops being current."""

    def update(self, delta_time: float) -> None:
        """Advance the scene by delta_time seconds."""


class MenuScene(Scene):
    """The main menu."""


class BattleState(enum.Enum):
    BUY = enum.auto()
    SPAWN = enum.auto()


class BattleScene(Scene):
    """A battle on a level: enemies walk the paths and towers shoot them."""

    def __init__(
        self,
        registry: Registry,
        camera: Camera,
        renderer,
        sound_player,
        input_handler,
        debug: bool = False,
    ) -> None:
        super().__init__(registry, camera, renderer, sound_player, input_handler)
        self.debug = debug
        self.display_hud = False
        self.state = BattleState.BUY
        self._level: Level | None = None
        self._enemy_spawner = EnemySpawnSystem()
        self._waypoint_system = WaypointFollowSystem()
        self._setup_input_handler()
        for x, y in DEBUG_TOWER_POSITIONS:
            create_debug_entity(registry, x, y)

    def _setup_input_handler(self) -> None:
        registry = self.registry
        self.input_handler.handle_mouse_left_click(
            lambda x, y: create_mouse_click(registry, x, y)
        )
        self.input_handler.enable()

    @property
    def level_id(self) -> str:
        return self._level.id if self._level is not None else UNDEFINED_LEVEL_ID

    def init(self, level: Level) -> None:
        """Start a battle on level."""
        self._level = level
        self._enemy_spawner.set_level(level)
        self._waypoint_system.set_level(level)

    def dispose(self) -> None:
        self.input_handler.disable()
        self._enemy_spawner.set_level(None)

    def update(self, delta_time: float) -> None:
        registry = self.registry
        process_mouse_click(registry, self.camera)
        self.state = BattleState.SPAWN
        if self.state is BattleState.SPAWN:
            self._enemy_spawner.spawn_enemies(registry, delta_time)
        self._waypoint_system.update_entity_waypoints(registry)
        self._waypoint_system.update_entity_directions(registry)
        move_entities(registry, delta_time)
        release_targets(registry)
        acquire_targets(registry)
        shoot_enemies(registry, delta_time)
        deal_damage(registry)
        destroy_projectiles(registry)
        dispose_enemies_by_health(registry)
        play_hit_sounds(self.sound_player, registry)
        self._execute_renderers(delta_time)

    def _execute_renderers(self, delta_time: float) -> None:
        renderer = self.renderer
        if self.debug:
            debug_render_system.render_grid(renderer.shape_renderer)
            debug_render_system.render_shoot_radiuses(renderer.shape_renderer, self.registry)
        render_system.render_level(renderer.level_renderer)
        render_system.render_sprites(self.registry, renderer.sprite_renderer)
        render_system.render_sprite_animations(
            self.registry, renderer.sprite_renderer, delta_time
        )
        render_system.render_hitpoints(self.registry, renderer.shape_renderer)
        if self.display_hud:
            render_system.render_hud(renderer.hud_renderer)