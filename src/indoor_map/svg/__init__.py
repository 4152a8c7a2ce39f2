"""SVG parsing: path data, markup events, scene trees and rooms."""

from indoor_map.svg.events import (
    CloseTag,
    Ignorable,
    MarkupEvent,
    OpenTag,
    SelfClosingTag,
    iter_markup_events,
)
from indoor_map.svg.path import (
    CommandKind,
    PathCommand,
    Position,
    interpret,
    parse_path_data,
    path_bounding_box,
    path_vertices,
)
from indoor_map.svg.rooms import SvgRoom, iter_svg_rooms
from indoor_map.svg.scene import SceneElement, build, empty_root, from_svg_data, select, to_svg

__all__ = [
    "CloseTag",
    "CommandKind",
    "Ignorable",
    "MarkupEvent",
    "OpenTag",
    "PathCommand",
    "Position",
    "SceneElement",
    "SelfClosingTag",
    "SvgRoom",
    "build",
    "empty_root",
    "from_svg_data",
    "interpret",
    "iter_markup_events",
    "iter_svg_rooms",
    "parse_path_data",
    "path_bounding_box",
    "path_vertices",
    "select",
    "to_svg",
]
