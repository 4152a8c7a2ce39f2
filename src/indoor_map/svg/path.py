"""SVG path data parsing and outline vertex extraction.

Only the destination of each drawing command matters for outlines and
bounding boxes: curve control points and arc radii are dropped.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from indoor_map.errors import PathDataError
from indoor_map.geometry.types import ORIGIN, BoundingBox, Point


class Position(Enum):
    """Whether command parameters are absolute or relative to the current point."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


class CommandKind(Enum):
    """Path commands, valued by their upper-case SVG letter."""

    MOVE = "M"
    LINE = "L"
    HORIZONTAL_LINE = "H"
    VERTICAL_LINE = "V"
    CUBIC_CURVE = "C"
    SMOOTH_CUBIC_CURVE = "S"
    QUADRATIC_CURVE = "Q"
    SMOOTH_QUADRATIC_CURVE = "T"
    ELLIPTICAL_ARC = "A"
    CLOSE = "Z"

    @property
    def arity(self) -> int:
        """Number of parameters consumed per emitted point."""
        return _ARITY[self]


_ARITY = {
    CommandKind.MOVE: 2,
    CommandKind.LINE: 2,
    CommandKind.HORIZONTAL_LINE: 1,
    CommandKind.VERTICAL_LINE: 1,
    CommandKind.CUBIC_CURVE: 6,
    CommandKind.SMOOTH_CUBIC_CURVE: 4,
    CommandKind.QUADRATIC_CURVE: 4,
    CommandKind.SMOOTH_QUADRATIC_CURVE: 2,
    CommandKind.ELLIPTICAL_ARC: 7,
    CommandKind.CLOSE: 0,
}


@dataclass(frozen=True)
class PathCommand:
    """One raw path command with all of its (possibly repeated) parameter groups."""

    kind: CommandKind
    position: Position
    parameters: tuple[float, ...] = ()

    @classmethod
    def from_code(cls, code: str, parameters: Iterable[float] = ()) -> "PathCommand":
        try:
            kind = CommandKind(code.upper())
        except ValueError:
            raise PathDataError(f"Unknown path command {code!r}") from None
        position = Position.ABSOLUTE if code.isupper() else Position.RELATIVE
        return cls(kind, position, tuple(parameters))


_SEPARATOR_RE = re.compile(r"[\s,]+")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_COMMAND_CODES = frozenset("MmLlHhVvCcSsQqTtAaZz")
# Arc parameters 4 and 5 are single-digit flags that may be written without separators.
_ARC_FLAG_SLOTS = (3, 4)


def parse_path_data(data: str) -> list[PathCommand]:
    """Tokenize an SVG ``d`` attribute into raw commands.

    Raises:
        PathDataError: On characters outside the path grammar or numbers
            before the first command.
    """
    commands: list[PathCommand] = []
    code: str | None = None
    parameters: list[float] = []
    pos = 0

    while pos < len(data):
        separator = _SEPARATOR_RE.match(data, pos)
        if separator:
            pos = separator.end()
            continue

        char = data[pos]
        if char in _COMMAND_CODES:
            if code is not None:
                commands.append(PathCommand.from_code(code, parameters))
            code, parameters = char, []
            pos += 1
            continue

        if code is None:
            raise PathDataError(f"Path data must start with a command: {data!r}")

        if code in "Aa" and len(parameters) % 7 in _ARC_FLAG_SLOTS and char in "01":
            parameters.append(float(char))
            pos += 1
            continue

        number = _NUMBER_RE.match(data, pos)
        if number is None:
            raise PathDataError(f"Unexpected character {char!r} at position {pos} in {data!r}")
        parameters.append(float(number.group()))
        pos = number.end()

    if code is not None:
        commands.append(PathCommand.from_code(code, parameters))
    return commands


def _parameter_groups(command: PathCommand) -> list[Sequence[float]]:
    arity = command.kind.arity
    count = len(command.parameters)
    if arity == 0:
        if count:
            raise PathDataError(f"{command.kind.name} takes no parameters, got {count}")
        return []
    if count == 0 or count % arity:
        raise PathDataError(
            f"{command.kind.name} expects parameters in groups of {arity}, got {count}"
        )
    return [command.parameters[i : i + arity] for i in range(0, count, arity)]


def _destinations(command: PathCommand, last: Point) -> list[Point]:
    """Destination offsets (relative) or coordinates (absolute) of a command."""
    groups = _parameter_groups(command)
    relative = command.position is Position.RELATIVE

    if command.kind is CommandKind.HORIZONTAL_LINE:
        return [Point(group[0], 0.0 if relative else last.y) for group in groups]
    if command.kind is CommandKind.VERTICAL_LINE:
        return [Point(0.0 if relative else last.x, group[0]) for group in groups]
    return [Point(group[-2], group[-1]) for group in groups]


def interpret(commands: Iterable[PathCommand], start: Point = ORIGIN) -> list[Point]:
    """Reduce raw commands to the absolute destination of every drawing step.

    ``CLOSE`` emits nothing. Relative destinations accumulate against the
    running point, which carries over from command to command.

    Raises:
        PathDataError: If a command's parameter count does not fit its arity.
    """
    points: list[Point] = []
    last = start
    for command in commands:
        if command.position is Position.RELATIVE:
            for offset in _destinations(command, last):
                last = last + offset
                points.append(last)
        else:
            for destination in _destinations(command, last):
                last = destination
                points.append(last)
    return points


def path_vertices(data: str) -> list[Point]:
    return interpret(parse_path_data(data))


def path_bounding_box(data: str) -> BoundingBox:
    """Bounding box of a path's vertices; a path without vertices gives a zero box at the origin."""
    return BoundingBox.from_points(path_vertices(data))
