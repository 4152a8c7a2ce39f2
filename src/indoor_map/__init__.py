"""Indoor maps from floor-plan SVGs: scene trees, room outlines and tile pyramids."""

from indoor_map.geometry import AffineTransform, BoundingBox, BoundingSquare, Point
from indoor_map.svg import SceneElement, from_svg_data, select
from indoor_map.tiles import Layer, Tile, TileCoords, TileIterator

__version__ = "0.1.0"
__all__ = [
    "AffineTransform",
    "BoundingBox",
    "BoundingSquare",
    "Layer",
    "Point",
    "SceneElement",
    "Tile",
    "TileCoords",
    "TileIterator",
    "from_svg_data",
    "select",
]
