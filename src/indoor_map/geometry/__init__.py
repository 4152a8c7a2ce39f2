"""Geometry primitives, affine transforms and polygon formulas."""

from indoor_map.geometry.polygon import centroid, signed_area
from indoor_map.geometry.transform import IDENTITY, AffineTransform, parse_transform
from indoor_map.geometry.types import ORIGIN, BoundingBox, BoundingSquare, Point

__all__ = [
    "AffineTransform",
    "BoundingBox",
    "BoundingSquare",
    "IDENTITY",
    "ORIGIN",
    "Point",
    "centroid",
    "parse_transform",
    "signed_area",
]
