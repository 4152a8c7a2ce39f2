"""Map data schemas - floors, vertices, edges and rooms.

The uncompiled form is written by hand; compilation adds each room's
outline, area and center from the floor SVGs.
"""

import json
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    field_serializer,
    model_serializer,
    model_validator,
)

from indoor_map.errors import (
    DegeneratePolygonError,
    MapDataDeserializeError,
    MapDataError,
    RepeatedFloorNumberError,
    UndefinedFloorNumberError,
    UndefinedVertexIdError,
)
from indoor_map.geometry.polygon import centroid, signed_area
from indoor_map.geometry.types import Point


class VertexTag(StrEnum):
    """Navigation hints attached to a vertex."""

    STAIRS = "stairs"
    ELEVATOR = "elevator"
    UP = "up"
    DOWN = "down"


class RoomTag(StrEnum):
    """Amenities and restrictions attached to a room."""

    CLOSED = "closed"
    WOMEN_BATHROOM = "women-bathroom"
    MEN_BATHROOM = "men-bathroom"
    STAFF_WOMEN_BATHROOM = "staff-women-bathroom"
    STAFF_MEN_BATHROOM = "staff-men-bathroom"
    UNKNOWN_BATHROOM = "unknown-bathroom"
    BSC = "bsc"
    EC = "ec"
    WF = "wf"
    HS = "hs"
    BLEED_CONTROL = "bleed-control"
    AED = "aed"
    AHU = "ahu"
    IDF = "idf"
    MDF = "mdf"
    ERU = "eru"
    CP = "cp"


class Floor(BaseModel):
    """A floor and the SVG drawing it is traced from."""

    number: StrictStr
    image: Path = Field(..., description="SVG path relative to the map JSON file")
    offsets: tuple[float, float] = Field(
        ..., description="SVG coordinates of the map origin for this floor"
    )


class Vertex(BaseModel):
    """A navigation graph vertex."""

    floor: StrictStr
    location: tuple[float, float]
    tags: set[VertexTag] = Field(default_factory=set)

    @field_serializer("tags")
    def _sorted_tags(self, tags: set[VertexTag]) -> list[str]:
        return sorted(tag.value for tag in tags)


class Edge(BaseModel):
    """A navigation graph edge, stored in JSON as ``[from, to]`` or ``[from, to, directed]``."""

    model_config = ConfigDict(frozen=True)

    from_: StrictStr
    to: StrictStr
    directed: StrictBool = False

    @model_validator(mode="before")
    @classmethod
    def _from_array(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) not in (2, 3):
                raise ValueError(f"Edge must be [from, to] or [from, to, directed], got {value!r}")
            data: dict[str, Any] = {"from_": value[0], "to": value[1]}
            if len(value) == 3:
                data["directed"] = value[2]
            return data
        return value

    @model_serializer
    def _to_array(self) -> list[Any]:
        if self.directed:
            return [self.from_, self.to, True]
        return [self.from_, self.to]


class UncompiledRoom(BaseModel):
    """A room as written by hand, before its outline is known."""

    vertices: set[str]
    names: list[str] = Field(default_factory=list)
    center: tuple[float, float] | None = None
    tags: set[RoomTag] = Field(default_factory=set)

    def compile(self, number: str, outline: list[Point]) -> "CompiledRoom":
        """Attach the outline, its area and (unless given) its centroid.

        Raises:
            MapDataError: If no center is given and the outline has zero area.
        """
        if self.center is not None:
            center = self.center
        else:
            try:
                center = centroid(outline).as_tuple()
            except DegeneratePolygonError as e:
                raise MapDataError(
                    f"Room `{number}` has a degenerate outline and no center"
                ) from e

        return CompiledRoom(
            vertices=self.vertices,
            names=self.names,
            center=center,
            outline=[point.as_tuple() for point in outline],
            area=abs(signed_area(outline)),
            tags=self.tags,
        )


class CompiledRoom(BaseModel):
    """A room with its outline in map coordinates."""

    vertices: set[str]
    names: list[str] = Field(default_factory=list)
    center: tuple[float, float]
    outline: list[tuple[float, float]]
    area: float
    tags: set[RoomTag] = Field(default_factory=set)

    @field_serializer("vertices")
    def _sorted_vertices(self, vertices: set[str]) -> list[str]:
        return sorted(vertices)

    @field_serializer("tags")
    def _sorted_tags(self, tags: set[RoomTag]) -> list[str]:
        return sorted(tag.value for tag in tags)


def _first_repeated(items: Iterable[str]) -> str | None:
    seen: set[str] = set()
    for item in items:
        if item in seen:
            return item
        seen.add(item)
    return None


def _first_undefined(items: Iterable[str], defined: set[str]) -> str | None:
    return next((item for item in items if item not in defined), None)


class UncompiledMapData(BaseModel):
    """Hand-written map data."""

    floors: list[Floor]
    vertices: dict[str, Vertex]
    edges: list[Edge]
    rooms: dict[str, UncompiledRoom]

    @classmethod
    def from_json(cls, json_data: str) -> "UncompiledMapData":
        """Parse and verify map JSON.

        Raises:
            MapDataDeserializeError: If the JSON is malformed or does not fit the schema.
            MapDataError: If floors or vertices are repeated or undefined.
        """
        try:
            map_data = cls.model_validate_json(json_data)
        except ValidationError as e:
            raise MapDataDeserializeError(f"Error while deserializing map data: {e}") from e
        return map_data.verify()

    def verify(self) -> "UncompiledMapData":
        repeated = _first_repeated(floor.number for floor in self.floors)
        if repeated is not None:
            raise RepeatedFloorNumberError(repeated)
        floor_numbers = {floor.number for floor in self.floors}

        undefined_floor = _first_undefined(
            (vertex.floor for vertex in self.vertices.values()), floor_numbers
        )
        if undefined_floor is not None:
            raise UndefinedFloorNumberError(undefined_floor)

        vertex_ids = set(self.vertices)
        room_vertex_ids = (
            vertex_id for room in self.rooms.values() for vertex_id in sorted(room.vertices)
        )
        undefined_vertex = _first_undefined(room_vertex_ids, vertex_ids)
        if undefined_vertex is not None:
            raise UndefinedVertexIdError(undefined_vertex)

        edge_vertex_ids = (vertex_id for edge in self.edges for vertex_id in (edge.from_, edge.to))
        undefined_vertex = _first_undefined(edge_vertex_ids, vertex_ids)
        if undefined_vertex is not None:
            raise UndefinedVertexIdError(undefined_vertex)

        return self


class CompiledMapData(BaseModel):
    """Map data with every room's outline, area and center resolved."""

    floors: list[Floor]
    vertices: dict[str, Vertex]
    edges: list[Edge]
    rooms: dict[str, CompiledRoom]

    @classmethod
    def from_json(cls, json_data: str) -> "CompiledMapData":
        try:
            return cls.model_validate_json(json_data)
        except ValidationError as e:
            raise MapDataDeserializeError(f"Error while deserializing compiled map data: {e}") from e

    def to_json(self) -> str:
        """JSON with empty names and tags left out."""
        data = self.model_dump(mode="json")
        for vertex in data["vertices"].values():
            if not vertex["tags"]:
                del vertex["tags"]
        for room in data["rooms"].values():
            for key in ("names", "tags"):
                if not room[key]:
                    del room[key]
        return json.dumps(data)

    def floor(self, number: str) -> Floor:
        for floor in self.floors:
            if floor.number == number:
                return floor
        raise UndefinedFloorNumberError(number)

    def room_floor(self, room: CompiledRoom) -> str | None:
        """Floor of the room's first vertex (by id)."""
        if not room.vertices:
            return None
        vertex = self.vertices.get(min(room.vertices))
        return vertex.floor if vertex is not None else None
