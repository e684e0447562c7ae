"""Level content: enemy waves, waypoint paths, tile layers and tilesets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vector
from .ids import AssetId

LEVEL_1 = "level_1.tmx"

UNDEFINED_LEVEL_ID = "undefined"


@dataclass
class EnemyGroup:
    """A number of enemies of one type spawned at a fixed interval."""

    enemy_type: str = "unknown"
    count: int = 0
    spawn_time: float = 0.0
    hitpoints: float = 0.0


@dataclass
class EnemyWave:
    enemies: list[EnemyGroup] = field(default_factory=list)


@dataclass
class Waypoint:
    point: Vector = field(default_factory=Vector)


@dataclass
class Waypoints:
    """One path of waypoints, starting at a spawn point."""

    waypoints: list[Waypoint] = field(default_factory=list)


@dataclass
class Layer:
    """A tile layer: global tile ids in row-major order, 0 meaning empty."""

    tiles: list[int] = field(default_factory=list)
    width: int = 0


@dataclass
class TilesetTile:
    """A tile of a tileset with the texture coordinates of its two triangles."""

    id: int
    vertices: list[Vector] = field(default_factory=list)


@dataclass
class Tileset:
    texture_id: AssetId = "unknown"
    first_gid: int = 0
    last_gid: int = 0
    tile_size: Vector = field(default_factory=Vector)
    tiles: list[TilesetTile] = field(default_factory=list)


@dataclass(eq=False)
class Level:
    """A loaded level. Two levels are equal when their ids are equal."""

    id: str = UNDEFINED_LEVEL_ID
    layers: list[Layer] = field(default_factory=list)
    tilesets: list[Tileset] = field(default_factory=list)
    waves: list[EnemyWave] = field(default_factory=list)
    waypoints: list[Waypoints] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.id == other.id

    def add_layer(self, layer: Layer) -> None:
        self.layers.append(layer)

    def add_tileset(self, tileset: Tileset) -> None:
        self.tilesets.append(tileset)

    def add_wave(self, wave: EnemyWave) -> None:
        self.waves.append(wave)

    def add_waypoints(self, waypoints: Waypoints) -> None:
        self.waypoints.append(waypoints)