"""Polygon area and centroid for room outlines.

Vertex lists are implicitly closed: the last vertex connects back to the
first.
"""

from collections.abc import Sequence

from indoor_map.errors import DegeneratePolygonError
from indoor_map.geometry.types import Point


def _edges(points: Sequence[Point]):
    return zip(points, [*points[1:], *points[:1]])


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area, positive for counter-clockwise vertex order.

    Fewer than three points give 0.0.
    """
    if len(points) < 3:
        return 0.0
    double_area = sum(this.x * nxt.y - nxt.x * this.y for this, nxt in _edges(points))
    return 0.5 * double_area


def centroid(points: Sequence[Point]) -> Point:
    """Centroid of a simple polygon.

    Raises:
        DegeneratePolygonError: If the polygon has zero signed area
            (fewer than three points, collinear or self-cancelling).
    """
    area = signed_area(points)
    if area == 0:
        raise DegeneratePolygonError(
            f"Cannot compute the centroid of a zero-area polygon with {len(points)} points"
        )

    center_x = 0.0
    center_y = 0.0
    for this, nxt in _edges(points):
        cross = this.x * nxt.y - nxt.x * this.y
        center_x += (this.x + nxt.x) * cross
        center_y += (this.y + nxt.y) * cross

    coefficient = 1.0 / (6.0 * area)
    return Point(coefficient * center_x, coefficient * center_y)
