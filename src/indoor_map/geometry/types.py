"""Geometry primitives: points, bounding boxes and bounding squares."""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point:
    """A 2D point or vector."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned bounding box given by its top-left corner and size.

    ``size.x`` is the width and ``size.y`` the height; both must be
    non-negative.
    """

    top_left: Point
    size: Point

    def __post_init__(self) -> None:
        if self.size.x < 0 or self.size.y < 0:
            raise ValueError(f"Bounding box size must be non-negative, got {self.size}")

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Smallest box containing every point. An empty input gives a zero box at the origin."""
        points = list(points)
        if not points:
            return cls(ORIGIN, ORIGIN)
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return cls(Point(min_x, min_y), Point(max_x - min_x, max_y - min_y))

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    @property
    def bottom_right(self) -> Point:
        return self.top_left + self.size

    def intersects(self, other: "BoundingBox") -> bool:
        """Whether the two boxes overlap. Boxes that only touch count as overlapping."""
        self_bottom_right = self.bottom_right
        other_bottom_right = other.bottom_right
        self_left_of_other = self_bottom_right.x < other.top_left.x
        other_left_of_self = other_bottom_right.x < self.top_left.x
        self_above_other = self_bottom_right.y < other.top_left.y
        other_above_self = other_bottom_right.y < self.top_left.y
        return not (
            self_left_of_other or other_left_of_self or self_above_other or other_above_self
        )

    def contains(self, other: "BoundingBox") -> bool:
        self_bottom_right = self.bottom_right
        other_bottom_right = other.bottom_right
        return (
            self.top_left.x <= other.top_left.x
            and self.top_left.y <= other.top_left.y
            and other_bottom_right.x <= self_bottom_right.x
            and other_bottom_right.y <= self_bottom_right.y
        )

    def as_view_box(self) -> str:
        """SVG ``viewBox`` value: ``"{x} {y} {width} {height}"``."""
        return f"{self.top_left.x} {self.top_left.y} {self.width} {self.height}"


@dataclass(frozen=True)
class BoundingSquare:
    """A bounding box with equal width and height, split into quadrants per zoom level."""

    top_left: Point
    edge_length: float

    def __post_init__(self) -> None:
        if self.edge_length < 0:
            raise ValueError(f"Edge length must be non-negative, got {self.edge_length}")

    @classmethod
    def contain_bounding_box(cls, bounding_box: BoundingBox) -> "BoundingSquare":
        """Square anchored at the box's top-left whose edge is the box's larger dimension."""
        return cls(bounding_box.top_left, max(bounding_box.width, bounding_box.height))

    def as_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.top_left, Point(self.edge_length, self.edge_length))
