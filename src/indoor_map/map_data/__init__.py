"""Map data: schemas, compilation against floor SVGs and outline drawing."""

from indoor_map.map_data.compiler import compile_map_data
from indoor_map.map_data.drawing import draw_floor
from indoor_map.map_data.schemas import (
    CompiledMapData,
    CompiledRoom,
    Edge,
    Floor,
    RoomTag,
    UncompiledMapData,
    UncompiledRoom,
    Vertex,
    VertexTag,
)

__all__ = [
    "CompiledMapData",
    "CompiledRoom",
    "Edge",
    "Floor",
    "RoomTag",
    "UncompiledMapData",
    "UncompiledRoom",
    "Vertex",
    "VertexTag",
    "compile_map_data",
    "draw_floor",
]
