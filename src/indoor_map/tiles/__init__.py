"""Tile pyramid: coordinates, enumeration and per-tile scene selection."""

from indoor_map.tiles.iterator import TileIterator, iter_tile_coords, tile_count
from indoor_map.tiles.layer import Layer, generate_pyramid, tile_path, write_pyramid
from indoor_map.tiles.types import Tile, TileCoords

__all__ = [
    "Layer",
    "Tile",
    "TileCoords",
    "TileIterator",
    "generate_pyramid",
    "iter_tile_coords",
    "tile_count",
    "tile_path",
    "write_pyramid",
]
