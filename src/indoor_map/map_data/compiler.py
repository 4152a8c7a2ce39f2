"""Compile hand-written map data against the floor SVGs."""

import logging
from pathlib import Path

from indoor_map.map_data.schemas import CompiledMapData, CompiledRoom, UncompiledMapData
from indoor_map.svg.rooms import iter_svg_rooms

logger = logging.getLogger(__name__)


def compile_map_data(map_data: UncompiledMapData, base_path: Path) -> CompiledMapData:
    """Resolve every room's outline, area and center.

    Floor images are read relative to ``base_path``. Rooms drawn in an SVG
    but missing from the map data are skipped, and rooms with no drawing
    are left out of the result; both are logged.

    Raises:
        OSError: If a floor image cannot be read.
        SvgParseError: If a floor image is malformed.
        MapDataError: If a room without a center has a zero-area outline.
    """
    remaining = dict(map_data.rooms)
    compiled_rooms: dict[str, CompiledRoom] = {}

    for floor in map_data.floors:
        image_path = base_path / floor.image
        logger.info("Reading rooms for floor %s from %s", floor.number, image_path)
        svg_data = image_path.read_text(encoding="utf-8")

        for svg_room in iter_svg_rooms(svg_data):
            room = remaining.pop(svg_room.number, None)
            if room is None:
                logger.warning("Room does not exist: %s", svg_room.number)
                continue
            compiled_rooms[svg_room.number] = room.compile(
                svg_room.number, svg_room.outline(floor.offsets)
            )

    for number in remaining:
        logger.warning("Room %s has no outline in any floor image, leaving it out", number)

    logger.info("Compiled %d rooms", len(compiled_rooms))
    return CompiledMapData(
        floors=map_data.floors,
        vertices=map_data.vertices,
        edges=map_data.edges,
        rooms=compiled_rooms,
    )
