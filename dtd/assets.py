"""Loading and lookup of textures, sounds and the current level."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from . import level_parser
from .ids import AssetId
from .level import Level
from .level_parser import DEFAULT_ASSET_ROOT, LevelLoadError

logger = logging.getLogger(__name__)

COLOR_TEXTURES: dict[AssetId, tuple[int, int, int, int]] = {
    "texture_black": (0, 0, 0, 255),
    "texture_red": (255, 0, 0, 255),
    "texture_green": (0, 255, 0, 255),
}
COLOR_TEXTURE_SIZE = (32, 32)


class AssetError(Exception):
    """Raised when an asset cannot be loaded or registered."""


class AssetLoader:
    """Reads asset files below a root directory."""

    def __init__(self, asset_root: str | Path = DEFAULT_ASSET_ROOT) -> None:
        self.asset_root = Path(asset_root)

    def load_texture(self, file_path: str) -> pygame.Surface:
        """Load an image file as a surface."""
        full_path = self.asset_root / file_path
        try:
            return pygame.image.load(str(full_path))
        except (pygame.error, OSError) as exc:
            logger.warning("Could not load texture from %s", full_path)
            raise AssetError(f"could not load texture from {full_path}") from exc

    def load_sound(self, file_path: str) -> bytes:
        """Read the encoded contents of a sound file."""
        full_path = self.asset_root / file_path
        try:
            data = full_path.read_bytes()
        except OSError as exc:
            logger.warning("Could not load sound from %s", full_path)
            raise AssetError(f"could not load sound from {full_path}") from exc
        if not data:
            logger.warning("Could not load sound from %s", full_path)
            raise AssetError(f"sound file {full_path} is empty")
        return data


class Assets:
    """Registry of loaded textures and sounds by asset id, plus the loaded level."""

    def __init__(
        self,
        asset_root: str | Path = DEFAULT_ASSET_ROOT,
        loader: AssetLoader | None = None,
    ) -> None:
        self.asset_root = Path(asset_root)
        self._loader = loader if loader is not None else AssetLoader(self.asset_root)
        self._textures: dict[AssetId, pygame.Surface] = {}
        self._sounds: dict[AssetId, bytes] = {}
        self._asset_id_map: dict[str, AssetId] = {}
        self._loaded_level = Level()
        self._create_color_textures()

    @property
    def loaded_level(self) -> Level:
        return self._loaded_level

    def load_texture(self, file_path: str, asset_id: AssetId) -> None:
        """Load a texture and register it under asset_id."""
        if asset_id in self._textures:
            logger.warning("Asset loader: Texture with id %s already exists", asset_id)
            raise AssetError(f"texture with id {asset_id} already exists")
        try:
            texture = self._loader.load_texture(file_path)
        except AssetError:
            logger.warning("Could not load texture %s from %s", asset_id, file_path)
            raise
        logger.info("Loaded texture %s, mapped to id %s", file_path, asset_id)
        self._textures[asset_id] = texture
        self._asset_id_map.setdefault(file_path, asset_id)

    def load_sound(self, file_path: str, asset_id: AssetId) -> None:
        """Load a sound and register it under asset_id."""
        if asset_id in self._sounds:
            logger.warning("Asset loader: Sound with id %s already exists", asset_id)
            raise AssetError(f"sound with id {asset_id} already exists")
        try:
            sound = self._loader.load_sound(file_path)
        except AssetError:
            logger.warning("Could not load sound %s from %s", asset_id, file_path)
            raise
        logger.info("Loaded sound %s, mapped to id %s", file_path, asset_id)
        self._sounds[asset_id] = sound
        self._asset_id_map.setdefault(file_path, asset_id)

    def load_level(self, file_path: str) -> None:
        """Load a level, resolving tileset textures among the loaded assets."""
        try:
            level = level_parser.load_level(file_path, self._asset_id_map, self.asset_root)
        except LevelLoadError as exc:
            raise AssetError(f"could not load level {file_path}") from exc
        self._loaded_level = level

    def get_texture(self, asset_id: AssetId) -> pygame.Surface | None:
        """Texture registered under asset_id, or None."""
        texture = self._textures.get(asset_id)
        if texture is None:
            logger.warning("Texture %s does not exist!", asset_id)
        return texture

    def get_sound_buffer(self, asset_id: AssetId) -> bytes | None:
        """Encoded sound data registered under asset_id, or None."""
        sound = self._sounds.get(asset_id)
        if sound is None:
            logger.warning("Sound %s does not exist!", asset_id)
        return sound

    def _create_color_textures(self) -> None:
        for asset_id, color in COLOR_TEXTURES.items():
            surface = pygame.Surface(COLOR_TEXTURE_SIZE, pygame.SRCALPHA)
            surface.fill(color)
            self._textures[asset_id] = surface