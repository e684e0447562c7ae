"""Loading of levels from Tiled map files and their JSON metadata."""

from __future__ import annotations

import base64
import gzip
import json
import logging
import struct
import xml.etree.ElementTree as ET
import zlib
from collections.abc import Mapping
from pathlib import Path

from .geometry import Vector
from .ids import INVALID_ASSET_ID, AssetId
from .level import (
    EnemyGroup,
    EnemyWave,
    Layer,
    Level,
    Tileset,
    TilesetTile,
    Waypoint,
    Waypoints,
)

logger = logging.getLogger(__name__)

DEFAULT_ASSET_ROOT = "assets"
METADATA_PROPERTY = "metadata_file"

# Tile ids in map data carry flip flags in their top three bits.
_GID_MASK = 0x1FFFFFFF
# An object group holds waypoints if its name shares any character with this word.
_WAYPOINT_CHARS = frozenset("waypoints")


class LevelLoadError(Exception):
    """Raised when a level or its metadata cannot be read."""


def find_asset_id(asset_id_map: Mapping[str, AssetId], texture_name: str) -> AssetId:
    """Id of the first asset whose file path contains texture_name."""
    return next(
        (asset_id for path, asset_id in asset_id_map.items() if texture_name in path),
        INVALID_ASSET_ID,
    )


def get_file_name(file_path: str) -> str:
    """Last component of a path separated by slashes or backslashes."""
    cut = max(file_path.rfind("/"), file_path.rfind("\\"))
    return file_path[cut + 1 :]


def _int_attr(element: ET.Element, name: str, default: int | None = None) -> int:
    value = element.get(name)
    if value is None:
        if default is None:
            raise LevelLoadError(f"<{element.tag}> lacks attribute {name!r}")
        return default
    try:
        return int(value)
    except ValueError:
        raise LevelLoadError(f"<{element.tag}> {name}={value!r} is not an integer") from None


def _float_attr(element: ET.Element, name: str) -> float:
    value = element.get(name, "0")
    try:
        return float(value)
    except ValueError:
        raise LevelLoadError(f"<{element.tag}> {name}={value!r} is not a number") from None


def _decompress(raw: bytes, compression: str | None) -> bytes:
    if compression is None:
        return raw
    try:
        if compression == "zlib":
            return zlib.decompress(raw)
        if compression == "gzip":
            return gzip.decompress(raw)
    except (zlib.error, OSError, EOFError) as exc:
        raise LevelLoadError(f"corrupt {compression} tile data") from exc
    raise LevelLoadError(f"unsupported tile data compression {compression!r}")


def _decode_tile_data(data: ET.Element) -> list[int]:
    if data.find("chunk") is not None:
        raise LevelLoadError("infinite maps are not supported")
    encoding = data.get("encoding")
    text = (data.text or "").strip()
    if encoding == "csv":
        try:
            gids = [int(value) for value in text.replace("\n", "").split(",") if value.strip()]
        except ValueError as exc:
            raise LevelLoadError("malformed CSV tile data") from exc
    elif encoding == "base64":
        try:
            raw = base64.b64decode(text, validate=False)
        except ValueError as exc:
            raise LevelLoadError("malformed base64 tile data") from exc
        raw = _decompress(raw, data.get("compression"))
        if len(raw) % 4:
            raise LevelLoadError("tile data length is not a multiple of four")
        gids = list(struct.unpack(f"<{len(raw) // 4}I", raw))
    elif encoding is None:
        gids = [_int_attr(tile, "gid", 0) for tile in data.findall("tile")]
    else:
        raise LevelLoadError(f"unsupported tile data encoding {encoding!r}")
    return [gid & _GID_MASK for gid in gids]


def _parse_tile_layers(map_el: ET.Element, level_width: int, level: Level) -> None:
    for layer_el in map_el.findall("layer"):
        data = layer_el.find("data")
        tiles = _decode_tile_data(data) if data is not None else []
        level.add_layer(Layer(tiles=tiles, width=level_width))


def _parse_object_layers(map_el: ET.Element, level: Level) -> None:
    for group in map_el.findall("objectgroup"):
        if _WAYPOINT_CHARS.isdisjoint(group.get("name", "")):
            continue
        level.add_waypoints(
            Waypoints(
                [
                    Waypoint(Vector(_float_attr(obj, "x"), _float_attr(obj, "y")))
                    for obj in group.findall("object")
                ]
            )
        )


def _read_xml(path: Path) -> ET.Element:
    try:
        return ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise LevelLoadError(f"could not read {path}") from exc


def _parse_tileset(
    tileset_el: ET.Element, first_gid: int, asset_id_map: Mapping[str, AssetId]
) -> Tileset:
    tile_width = _int_attr(tileset_el, "tilewidth")
    tile_height = _int_attr(tileset_el, "tileheight")
    spacing = _int_attr(tileset_el, "spacing", 0)
    margin = _int_attr(tileset_el, "margin", 0)
    image = tileset_el.find("image")

    columns = tileset_el.get("columns")
    if columns is not None:
        column_count = _int_attr(tileset_el, "columns")
    elif image is not None and image.get("width"):
        column_count = (_int_attr(image, "width") - 2 * margin + spacing) // (tile_width + spacing)
    else:
        column_count = 0

    if tileset_el.get("tilecount") is not None:
        tile_count = _int_attr(tileset_el, "tilecount")
    elif image is not None and image.get("height"):
        rows = (_int_attr(image, "height") - 2 * margin + spacing) // (tile_height + spacing)
        tile_count = rows * column_count
    else:
        tile_count = 0

    tileset = Tileset(
        first_gid=first_gid,
        last_gid=first_gid + tile_count - 1,
        tile_size=Vector(tile_width, tile_height),
    )
    for gid in range(tileset.first_gid, tileset.last_gid):
        local = gid - first_gid
        if column_count:
            column, row = local % column_count, local // column_count
            left = float(margin + column * (tile_width + spacing))
            top = float(margin + row * (tile_height + spacing))
        else:
            left = top = 0.0
        right, bottom = left + tile_width, top + tile_height
        tileset.tiles.append(
            TilesetTile(
                gid,
                [
                    Vector(left, top),
                    Vector(right, top),
                    Vector(right, bottom),
                    Vector(right, bottom),
                    Vector(left, bottom),
                    Vector(left, top),
                ],
            )
        )
    image_path = image.get("source", "") if image is not None else ""
    tileset.texture_id = find_asset_id(asset_id_map, get_file_name(image_path))
    return tileset


def _parse_tilesets(
    map_el: ET.Element, map_dir: Path, asset_id_map: Mapping[str, AssetId], level: Level
) -> None:
    for tileset_el in map_el.findall("tileset"):
        first_gid = _int_attr(tileset_el, "firstgid")
        source = tileset_el.get("source")
        definition = _read_xml(map_dir / source) if source else tileset_el
        level.add_tileset(_parse_tileset(definition, first_gid, asset_id_map))


def _metadata_file(map_el: ET.Element) -> str | None:
    for prop in map_el.iterfind("properties/property"):
        if prop.get("name") == METADATA_PROPERTY:
            return prop.get("value", prop.text or "")
    return None


def _parse_properties(map_el: ET.Element, asset_root: Path, level: Level) -> None:
    metadata_file = _metadata_file(map_el)
    if metadata_file is None:
        logger.warning("Could not find metadata property for the level %s!", level.id)
        return
    json_path = asset_root / "levels" / metadata_file
    try:
        with json_path.open(encoding="utf-8") as stream:
            data = json.load(stream)
        for wave in data["waves"]:
            level.add_wave(
                EnemyWave(
                    [
                        EnemyGroup(
                            str(enemy["type"]),
                            int(enemy["count"]),
                            float(enemy["spawn_time"]),
                            float(enemy["hitpoints"]),
                        )
                        for enemy in wave["enemies"]
                    ]
                )
            )
    except OSError as exc:
        raise LevelLoadError(f"could not read level metadata {json_path}") from exc
    except (ValueError, KeyError, TypeError) as exc:
        raise LevelLoadError(f"malformed level metadata {json_path}") from exc


def load_level(
    file_path: str,
    asset_id_map: Mapping[str, AssetId],
    asset_root: str | Path = DEFAULT_ASSET_ROOT,
) -> Level:
    """Load a level from a map file relative to asset_root.

    Tileset textures are resolved through asset_id_map, which maps loaded
    file paths to asset ids.
    """
    root = Path(asset_root)
    full_path = root / file_path
    try:
        map_el = _read_xml(full_path)
    except LevelLoadError:
        logger.warning("Could not load level %s", full_path)
        raise
    if map_el.tag != "map":
        raise LevelLoadError(f"{full_path} is not a map file")

    level = Level(id=file_path)
    _parse_tile_layers(map_el, _int_attr(map_el, "width"), level)
    _parse_object_layers(map_el, level)
    _parse_tilesets(map_el, full_path.parent, asset_id_map, level)
    _parse_properties(map_el, root, level)
    logger.info("Level loaded from %s", full_path)
    return level