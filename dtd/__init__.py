"""A tower defence game: entity registry, game systems, Tiled level loading and pygame rendering."""

__version__ = "0.1.0"