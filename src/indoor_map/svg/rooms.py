"""Room shapes extracted from floor SVGs.

A room is a ``<rect>`` or ``<path>`` whose ``id`` is ``room<number>``.
Outlines are returned in map coordinates: the floor offset is subtracted
and the y axis flipped so that north is up.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from indoor_map.geometry.types import Point
from indoor_map.svg.events import MarkupEvent, OpenTag, SelfClosingTag, iter_markup_events
from indoor_map.svg.path import path_vertices

ROOM_ID_PREFIX = "room"


@dataclass(frozen=True)
class RectShape:
    x: float
    y: float
    width: float
    height: float

    def corners(self) -> list[Point]:
        return [
            Point(self.x, self.y),
            Point(self.x, self.y + self.height),
            Point(self.x + self.width, self.y + self.height),
            Point(self.x + self.width, self.y),
        ]


@dataclass(frozen=True)
class PathShape:
    data: str

    def corners(self) -> list[Point]:
        return path_vertices(self.data)


def to_map_coords(point: Point, offsets: tuple[float, float]) -> Point:
    """Shift by the floor offset and flip the y axis."""
    return Point(point.x - offsets[0], -point.y + offsets[1])


@dataclass(frozen=True)
class SvgRoom:
    number: str
    shape: RectShape | PathShape

    def outline(self, offsets: tuple[float, float]) -> list[Point]:
        return [to_map_coords(point, offsets) for point in self.shape.corners()]


def room_from_event(event: MarkupEvent) -> SvgRoom | None:
    """The room described by a tag event, or None if the tag is not a complete room."""
    if not isinstance(event, (OpenTag, SelfClosingTag)):
        return None

    element_id = event.attributes.get("id", "")
    if not element_id.startswith(ROOM_ID_PREFIX):
        return None
    number = element_id[len(ROOM_ID_PREFIX) :]

    if event.name == "rect":
        try:
            return SvgRoom(
                number,
                RectShape(
                    x=float(event.attributes["x"]),
                    y=float(event.attributes["y"]),
                    width=float(event.attributes["width"]),
                    height=float(event.attributes["height"]),
                ),
            )
        except (KeyError, ValueError):
            return None

    if event.name == "path":
        data = event.attributes.get("d")
        if data is None:
            return None
        return SvgRoom(number, PathShape(data))

    return None


def iter_svg_rooms(svg_data: str) -> Iterator[SvgRoom]:
    for event in iter_markup_events(svg_data):
        room = room_from_event(event)
        if room is not None:
            yield room
