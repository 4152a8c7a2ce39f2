"""Draw compiled room outlines over a floor's SVG."""

import xml.etree.ElementTree as ET
from pathlib import Path

from indoor_map.errors import SvgParseError
from indoor_map.map_data.schemas import CompiledMapData
from indoor_map.svg.events import SVG_NAMESPACE

OUTLINE_FILL = "rgb(125, 181, 52)"
OUTLINE_FILL_OPACITY = "0.2"


def outline_path_data(outline: list[tuple[float, float]]) -> str:
    first, *rest = outline
    commands = [f"M {first[0]},{first[1]}"]
    commands.extend(f"L {x},{y}" for x, y in rest)
    commands.append("Z")
    return " ".join(commands)


def draw_floor(compiled: CompiledMapData, floor_number: str, base_path: Path) -> str:
    """The floor's SVG with every room outline on that floor drawn on top.

    Outlines are in map coordinates, so they are grouped under a transform
    that undoes the floor offset and the y-axis flip.

    Raises:
        UndefinedFloorNumberError: If the floor does not exist.
        OSError: If the floor image cannot be read.
        SvgParseError: If the floor image is malformed.
    """
    floor = compiled.floor(floor_number)
    svg_data = (base_path / floor.image).read_text(encoding="utf-8")

    ET.register_namespace("", SVG_NAMESPACE)
    try:
        root = ET.fromstring(svg_data)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG markup: {e}") from e

    namespace = f"{{{SVG_NAMESPACE}}}" if root.tag.startswith(f"{{{SVG_NAMESPACE}}}") else ""
    offset_x, offset_y = floor.offsets
    group = ET.SubElement(
        root,
        f"{namespace}g",
        {"transform": f"matrix(1 0 0 -1 {offset_x} {offset_y})"},
    )

    for number in sorted(compiled.rooms):
        room = compiled.rooms[number]
        if not room.outline or compiled.room_floor(room) != floor_number:
            continue
        ET.SubElement(
            group,
            f"{namespace}path",
            {
                "fill": OUTLINE_FILL,
                "fill-opacity": OUTLINE_FILL_OPACITY,
                "d": outline_path_data(room.outline),
            },
        )

    return ET.tostring(root, encoding="unicode")
