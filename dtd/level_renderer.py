"""Drawing of the loaded level's tile layers."""

from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Iterator, Sequence
from operator import attrgetter

import pygame

from .geometry import Vector
from .level import Layer, Tileset, TilesetTile
from .subrenderer import Subrenderer

logger = logging.getLogger(__name__)


def find_tileset(tilesets: Sequence[Tileset], tiles: Sequence[int]) -> Tileset | None:
    """Tileset holding the first non-empty tile of a layer, or None."""
    tile_id = next((tile for tile in tiles if tile != 0), None)
    if tile_id is None:
        return None
    return next(
        (ts for ts in tilesets if ts.first_gid <= tile_id <= ts.last_gid), None
    )


def tile_placements(layer: Layer, tileset: Tileset) -> Iterator[tuple[Vector, TilesetTile]]:
    """Pixel positions of the layer's tiles, paired with their tileset tiles.

    Empty tiles and tiles missing from the tileset take no place in the grid.
    """
    x = y = 0
    tile_width, tile_height = tileset.tile_size.x, tileset.tile_size.y
    for tile_id in layer.tiles:
        if tile_id == 0:
            continue
        index = bisect_left(tileset.tiles, tile_id, key=attrgetter("id"))
        if index == len(tileset.tiles) or tileset.tiles[index].id != tile_id:
            logger.error("Tileset does not contain tile %d", tile_id)
            continue
        yield Vector(x * tile_width, y * tile_height), tileset.tiles[index]
        x += 1
        if x >= layer.width:
            x = 0
            y += 1


def _source_rect(tile: TilesetTile) -> pygame.Rect:
    top_left, bottom_right = tile.vertices[0], tile.vertices[2]
    return pygame.Rect(
        int(top_left.x),
        int(top_left.y),
        int(bottom_right.x - top_left.x),
        int(bottom_right.y - top_left.y),
    )


class LevelRenderer(Subrenderer):
    """Draws every tile layer of the loaded level with its tileset texture."""

    def __init__(self, assets) -> None:
        super().__init__(None)
        self._assets = assets
        self._layer_plans: list[tuple[Tileset, list[tuple[Vector, TilesetTile]]] | None] | None = None

    def init_current_level(self) -> None:
        """Lay out the tiles of the currently loaded level."""
        level = self._assets.loaded_level
        plans = []
        for layer in level.layers:
            tileset = find_tileset(level.tilesets, layer.tiles) if layer.tiles else None
            if tileset is None:
                plans.append(None)
            else:
                plans.append((tileset, list(tile_placements(layer, tileset))))
        self._layer_plans = plans

    def render_current_level(self) -> None:
        """Draw the laid-out level, laying it out first if needed."""
        if self._layer_plans is None:
            self.init_current_level()
        for plan in self._layer_plans:
            if plan is None:
                continue
            tileset, placements = plan
            texture = self._assets.get_texture(tileset.texture_id)
            if texture is None:
                logger.error("Could not find texture for tileset!")
                continue
            bounds = texture.get_rect()
            for dest, tile in placements:
                source = _source_rect(tile).clip(bounds)
                if source.width and source.height:
                    self.surface.blit(texture, (int(dest.x), int(dest.y)), area=source)