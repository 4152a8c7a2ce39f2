"""Markup event stream consumed by the scene tree builder."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field

from indoor_map.errors import SvgParseError

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class OpenTag:
    """Start of an element that has a body closed by a later :class:`CloseTag`."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SelfClosingTag:
    """An element without a body."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CloseTag:
    name: str


@dataclass(frozen=True)
class Ignorable:
    """Comments, processing instructions and other content the builder skips."""

    kind: str


MarkupEvent = OpenTag | SelfClosingTag | CloseTag | Ignorable


def local_name(name: str) -> str:
    """Drop the SVG namespace from a Clark-notation name; other namespaces are kept."""
    prefix = f"{{{SVG_NAMESPACE}}}"
    if name.startswith(prefix):
        return name[len(prefix) :]
    return name


def _drain(parser: ET.XMLPullParser) -> Iterator[MarkupEvent]:
    for event, payload in parser.read_events():
        if event == "start":
            attributes = {local_name(key): value for key, value in payload.attrib.items()}
            yield OpenTag(local_name(payload.tag), attributes)
        elif event == "end":
            yield CloseTag(local_name(payload.tag))
        elif event == "start-ns":
            # Names arrive in Clark notation; prefixes are never registered globally.
            yield Ignorable("namespace")
        elif event == "comment":
            yield Ignorable("comment")
        elif event == "pi":
            yield Ignorable("instruction")


def iter_markup_events(svg_data: str) -> Iterator[MarkupEvent]:
    """Parse SVG text into open/close events.

    ElementTree reports ``<a/>`` and ``<a></a>`` alike, so every element
    arrives as an :class:`OpenTag`/:class:`CloseTag` pair; the builder
    gives both forms the same bounding box.

    Raises:
        SvgParseError: If the text is not well-formed XML.
    """
    parser = ET.XMLPullParser(events=("start", "end", "start-ns", "comment", "pi"))
    try:
        for offset in range(0, len(svg_data), _READ_CHUNK_SIZE):
            parser.feed(svg_data[offset : offset + _READ_CHUNK_SIZE])
            yield from _drain(parser)
        parser.close()
        yield from _drain(parser)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG markup: {e}") from e
