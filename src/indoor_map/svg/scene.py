"""Scene tree: SVG elements with resolved global bounding boxes.

The builder walks the markup event stream once, composing each element's
``transform`` onto the transform inherited from its ancestors, and sizes
every container so it reaches at least as far right and down as each of
its children.
"""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from indoor_map.errors import SvgParseError
from indoor_map.geometry.transform import IDENTITY, AffineTransform, parse_transform
from indoor_map.geometry.types import BoundingBox, Point
from indoor_map.svg.events import (
    SVG_NAMESPACE,
    CloseTag,
    Ignorable,
    MarkupEvent,
    OpenTag,
    SelfClosingTag,
    iter_markup_events,
)
from indoor_map.svg.path import path_bounding_box

logger = logging.getLogger(__name__)

EMPTY_ROOT_TAG = "svg"

_LENGTH_RE = re.compile(
    r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:px|mm|cm|in|pt|pc|em|ex|%)?\s*$"
)


@dataclass(frozen=True)
class SceneElement:
    """An SVG element with its bounding box in the document's global frame."""

    tag: str
    attributes: dict[str, str]
    bounding_box: BoundingBox
    children: tuple["SceneElement", ...] = field(default=())

    @property
    def bottom_right(self) -> Point:
        return self.bounding_box.bottom_right

    def select_with(self, query: BoundingBox) -> "SceneElement | None":
        return select(self, query)

    def with_attributes(
        self,
        set_attributes: Mapping[str, str] | None = None,
        remove: Iterable[str] = (),
    ) -> "SceneElement":
        """Copy of this element with attributes added/replaced and others removed."""
        attributes = dict(self.attributes)
        for name in remove:
            attributes.pop(name, None)
        if set_attributes:
            attributes.update(set_attributes)
        return SceneElement(self.tag, attributes, self.bounding_box, self.children)

    def iter(self) -> Iterator["SceneElement"]:
        """This element and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter()

    def as_element(self) -> ET.Element:
        element = ET.Element(self.tag, dict(self.attributes))
        if self.tag == "svg" and "xmlns" not in element.attrib:
            element.set("xmlns", SVG_NAMESPACE)
        element.extend(child._as_child_element() for child in self.children)
        return element

    def _as_child_element(self) -> ET.Element:
        element = ET.Element(self.tag, dict(self.attributes))
        element.extend(child._as_child_element() for child in self.children)
        return element


def empty_root(bounding_box: BoundingBox) -> SceneElement:
    """Root placeholder with no content, used for tiles nothing overlaps."""
    return SceneElement(EMPTY_ROOT_TAG, {}, bounding_box)


def select(node: SceneElement, query: BoundingBox) -> SceneElement | None:
    """Subtree of ``node`` whose elements all overlap ``query``.

    Returns None when ``node`` itself does not overlap. An overlapping
    element is kept even when none of its children overlap.
    """
    if not node.bounding_box.intersects(query):
        return None
    children = tuple(
        selected
        for selected in (select(child, query) for child in node.children)
        if selected is not None
    )
    return SceneElement(node.tag, dict(node.attributes), node.bounding_box, children)


def to_svg(element: SceneElement) -> str:
    body = ET.tostring(element.as_element(), encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


def parse_length(attributes: Mapping[str, str], name: str) -> float:
    """Numeric attribute with an optional unit suffix; absent attributes are 0."""
    value = attributes.get(name)
    if value is None:
        return 0.0
    match = _LENGTH_RE.match(value)
    if match is None:
        raise SvgParseError(f"Invalid number for attribute {name!r}: {value!r}")
    return float(match.group(1))


def _intrinsic_geometry(name: str, attributes: Mapping[str, str]) -> tuple[Point, Point]:
    """Local top-left and size of an element, ignoring its children."""
    if name == "path":
        data = attributes.get("d")
        if data is None:
            raise SvgParseError("Missing path data")
        bounds = path_bounding_box(data)
        return bounds.top_left, bounds.size

    # Every non-path element, including groups and unknown tags, is read as a rectangle.
    width = parse_length(attributes, "width")
    height = parse_length(attributes, "height")
    if width < 0 or height < 0:
        raise SvgParseError(f"Negative size on <{name}>: width={width} height={height}")
    top_left = Point(parse_length(attributes, "x"), parse_length(attributes, "y"))
    return top_left, Point(width, height)


def _parse_element(
    event: MarkupEvent,
    cumulative: AffineTransform,
    events: Iterator[MarkupEvent],
) -> SceneElement:
    if isinstance(event, CloseTag):
        raise SvgParseError(f"Unexpected end tag: {event.name}")
    if not isinstance(event, (OpenTag, SelfClosingTag)):
        raise SvgParseError(f"Unexpected markup event: {event!r}")

    local_top_left, size = _intrinsic_geometry(event.name, event.attributes)

    transform_text = event.attributes.get("transform")
    effective = cumulative if transform_text is None else cumulative @ parse_transform(transform_text)

    top_left = effective.apply(local_top_left)

    if isinstance(event, SelfClosingTag):
        return SceneElement(event.name, dict(event.attributes), BoundingBox(top_left, size))

    children = _parse_children(event.name, effective, events)

    own_bottom_right = top_left + size
    right = max([own_bottom_right.x, *(child.bottom_right.x for child in children)])
    bottom = max([own_bottom_right.y, *(child.bottom_right.y for child in children)])
    bounding_box = BoundingBox(top_left, Point(right, bottom) - top_left)

    return SceneElement(event.name, dict(event.attributes), bounding_box, tuple(children))


def _parse_children(
    name: str,
    cumulative: AffineTransform,
    events: Iterator[MarkupEvent],
) -> list[SceneElement]:
    children: list[SceneElement] = []
    for event in events:
        if isinstance(event, Ignorable):
            continue
        if isinstance(event, CloseTag):
            if event.name != name:
                raise SvgParseError(f"Unexpected end tag: {event.name}, expected {name}")
            return children
        children.append(_parse_element(event, cumulative, events))
    raise SvgParseError(f"Unexpected end of SVG inside <{name}>")


def build(events: Iterable[MarkupEvent]) -> SceneElement:
    """Build the scene tree for the first element of a markup event stream.

    Raises:
        SvgParseError: On structural errors, bad attributes, malformed path
            data or transforms, or when the stream holds no element.
    """
    stream = iter(events)
    for event in stream:
        if isinstance(event, Ignorable):
            continue
        root = _parse_element(event, IDENTITY, stream)
        logger.debug(
            "Built scene tree <%s> with %d elements, bounds %s",
            root.tag,
            sum(1 for _ in root.iter()),
            root.bounding_box.as_view_box(),
        )
        return root
    raise SvgParseError("Expected SVG data but did not find any")


def from_svg_data(svg_data: str) -> SceneElement:
    return build(iter_markup_events(svg_data))
