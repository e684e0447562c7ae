# dtd

A small tower defence game built around an entity–component registry.
Enemies spawn in waves from a Tiled level and walk along its waypoint paths.
Towers pick the nearest enemy in range and fire projectiles at it.
Rendering uses pygame.

## What is inside

- `dtd.geometry`: `Vector`, `Rect`, `float_eq` and `direction`.
- `dtd.ids`: the enums `SpriteId`, `SoundId`, `ProjectileType` and
  `EnemyType`, and the lookups `get_enemy_sprite`, `get_projectile_sprite`,
  `get_hit_sound` and `get_enemy_type`.
- `dtd.components`: the plain data components (`Position`, `Health`,
  `EnemyShooter`, `Projectile`, `SpriteAnimation`, …) and the `Registry`
  that stores them.
- `dtd.entities`: factories such as `create_enemy`, `create_projectile`,
  `create_hit` and `create_debug_entity`, which creates a tower.
- `dtd.level` and `dtd.level_parser`: the level data (`Layer`, `Tileset`,
  `EnemyWave`, `Waypoints`, `Level`) and `load_level`, which reads `.tmx`
  maps together with a JSON wave file.
- `dtd.assets`: `Assets`, which loads textures, sounds and the current
  level and raises `AssetError` on failure.
- `dtd.camera`: `Camera`, which turns world positions into tile coordinates.
- The renderers: `SpriteCache`, `SpriteRenderer`, `HudRenderer`,
  `ShapeRenderer`, `LevelRenderer` and `Renderer`, which combines their
  layers in the window.
- `dtd.events` and `dtd.input`: `EventHandler` sends pygame events to named
  `EventListener`s. `InputHandler` forwards left clicks to a `MouseListener`.
- The systems:
  - `targeting_system`
  - `damage_system`
  - `enemy_spawn_system`
  - `waypoint_follow_system`
  - `movement_system`
  - `projectile_system`
  - `shooting_system`
  - `enemy_dispose_system`
  - `sound_system`
  - `mouse_click_system`
  - `render_system`
  - `debug_render_system`
- `dtd.scenes`, `dtd.scene_manager`, `dtd.game` and `dtd.game_loop`: the
  battle scene, scene switching, the `Game` object and the `GameLoop`.

## Using the registry and systems

```python
from dtd.components import Health, Registry
from dtd.entities import create_debug_entity, create_enemy
from dtd.geometry import Vector
from dtd.movement_system import move_entities
from dtd.targeting_system import acquire_targets

registry = Registry()
create_debug_entity(registry, 608.0, 352.0)          # a tower
create_enemy(registry, "basic", Vector(600.0, 350.0), 0, 100.0)

acquire_targets(registry)
move_entities(registry, 1 / 60)

for entity in registry.view(Health):
    print(entity, registry.get(entity, Health).health)
```

`Registry.view` yields the ids of entities that hold every given component
type. `Registry.get` returns a component and raises `KeyError` if it is
missing.

Most systems are plain functions. `EnemySpawnSystem` and
`WaypointFollowSystem` are small classes that need the current level through
`set_level`. Each system works on the registry once per frame. The battle
scene calls them in order from its `update`.

## Levels

A level is a Tiled `.tmx` map, read by `dtd.level_parser.load_level`. Paths
are relative to an asset root, `assets` by default.

- Tile layers and tilesets are drawn by the level renderer. Tilesets may be
  embedded in the map or kept in external `.tsx` files.
- Object layers whose names match waypoints give the enemy paths.
- A `metadata_file` map property names a JSON file under `levels/` that
  lists the enemy waves:

```json
{
  "waves": [
    {"enemies": [{"type": "basic", "count": 10, "spawn_time": 1.0, "hitpoints": 50}]}
  ]
}
```

A map or metadata file that cannot be read raises `LevelLoadError`.

## Running a game

The pieces are wired together in code:

```python
from dtd.assets import Assets
from dtd.events import EventHandler
from dtd.game import Game
from dtd.game_loop import GameLoop
from dtd.input import InputHandler
from dtd.renderer import Renderer


class SilentPlayer:
    def play_sound(self, sound_id):
        pass


assets = Assets("assets")
assets.load_texture("td_tilesheet.png", "td_tilesheet")
assets.load_level("levels/level_1.tmx")

renderer = Renderer(assets)          # opens a 1600x1024 window
event_handler = EventHandler()
input_handler = InputHandler(event_handler)
game = Game(renderer, assets, SilentPlayer(), input_handler)
GameLoop(game, renderer, event_handler).start()
```

The loop runs until the window is closed or `GameLoop.stop` is called.
While the space bar is held, the game runs six times faster.

## What the package does not do

- There is no command that starts the game. A program has to build the
  objects as shown above.
- There is no sound output. `Assets.load_sound` stores the raw bytes of a
  sound file. The game expects a sound player object that has a
  `play_sound(sound_id)` method, and you must supply it.
- `Camera` converts world positions to tile coordinates. It does not scroll
  the view.