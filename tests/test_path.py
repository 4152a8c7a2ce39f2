"""Tests for path data parsing and interpretation."""

import pytest

from indoor_map.errors import PathDataError
from indoor_map.geometry import BoundingBox, Point
from indoor_map.svg.path import (
    CommandKind,
    PathCommand,
    Position,
    interpret,
    parse_path_data,
    path_bounding_box,
    path_vertices,
)

ABS = Position.ABSOLUTE
REL = Position.RELATIVE


def command(kind: CommandKind, position: Position, *parameters: float) -> PathCommand:
    return PathCommand(kind, position, parameters)


class TestInterpret:
    def test_move_line_relative_line_close(self):
        points = interpret(
            [
                command(CommandKind.MOVE, ABS, 0, 0),
                command(CommandKind.LINE, ABS, 10, 0),
                command(CommandKind.LINE, REL, 0, 10),
                command(CommandKind.CLOSE, ABS),
            ]
        )
        assert points == [Point(0, 0), Point(10, 0), Point(10, 10)]

    def test_close_emits_nothing(self):
        assert interpret([command(CommandKind.CLOSE, REL)]) == []

    def test_absolute_horizontal_line_keeps_y(self):
        points = interpret(
            [command(CommandKind.MOVE, ABS, 5, 7), command(CommandKind.HORIZONTAL_LINE, ABS, 20)]
        )
        assert points == [Point(5, 7), Point(20, 7)]

    def test_absolute_vertical_line_keeps_x(self):
        points = interpret(
            [command(CommandKind.MOVE, ABS, 5, 7), command(CommandKind.VERTICAL_LINE, ABS, 1, 2)]
        )
        assert points == [Point(5, 7), Point(5, 1), Point(5, 2)]

    def test_relative_horizontal_and_vertical_lines(self):
        points = interpret(
            [
                command(CommandKind.MOVE, REL, 1, 1),
                command(CommandKind.HORIZONTAL_LINE, REL, 4),
                command(CommandKind.VERTICAL_LINE, REL, 3),
            ]
        )
        assert points == [Point(1, 1), Point(5, 1), Point(5, 4)]

    def test_relative_points_accumulate_within_a_command(self):
        points = interpret([command(CommandKind.LINE, REL, 1, 0, 1, 0, 0, 2)])
        assert points == [Point(1, 0), Point(2, 0), Point(2, 2)]

    def test_relative_points_start_from_given_point(self):
        points = interpret([command(CommandKind.LINE, REL, 1, 1)], start=Point(10, 10))
        assert points == [Point(11, 11)]

    def test_curves_keep_only_endpoints(self):
        points = interpret(
            [
                command(CommandKind.MOVE, ABS, 0, 0),
                command(CommandKind.CUBIC_CURVE, ABS, 1, 1, 2, 2, 3, 3),
                command(CommandKind.SMOOTH_CUBIC_CURVE, ABS, 9, 9, 4, 4),
                command(CommandKind.QUADRATIC_CURVE, ABS, 9, 9, 5, 5),
                command(CommandKind.SMOOTH_QUADRATIC_CURVE, ABS, 6, 6),
                command(CommandKind.ELLIPTICAL_ARC, ABS, 1, 1, 0, 0, 1, 7, 7),
            ]
        )
        assert points == [Point(i, i) for i in range(8)]

    def test_relative_curves_offset_from_running_point(self):
        points = interpret(
            [
                command(CommandKind.MOVE, ABS, 10, 10),
                command(CommandKind.CUBIC_CURVE, REL, 0, 5, 5, 5, 5, 0),
                command(CommandKind.ELLIPTICAL_ARC, REL, 2, 2, 0, 0, 1, 0, 4),
            ]
        )
        assert points == [Point(10, 10), Point(15, 10), Point(15, 14)]

    @pytest.mark.parametrize(
        "bad",
        [
            command(CommandKind.LINE, ABS, 1, 2, 3),
            command(CommandKind.LINE, ABS),
            command(CommandKind.CUBIC_CURVE, ABS, 1, 2, 3, 4),
            command(CommandKind.ELLIPTICAL_ARC, REL, 1, 2, 3, 4, 5, 6),
            command(CommandKind.CLOSE, ABS, 1),
        ],
    )
    def test_wrong_arity_fails_fast(self, bad):
        with pytest.raises(PathDataError):
            interpret([command(CommandKind.MOVE, ABS, 0, 0), bad])


class TestParsePathData:
    def test_commands_and_positions(self):
        commands = parse_path_data("M0,0 L10,0 l0,10 z")
        assert commands == [
            command(CommandKind.MOVE, ABS, 0, 0),
            command(CommandKind.LINE, ABS, 10, 0),
            command(CommandKind.LINE, REL, 0, 10),
            command(CommandKind.CLOSE, REL),
        ]

    def test_compact_numbers(self):
        assert parse_path_data("M10-5L.5.5") == [
            command(CommandKind.MOVE, ABS, 10, -5),
            command(CommandKind.LINE, ABS, 0.5, 0.5),
        ]

    def test_exponents(self):
        assert parse_path_data("M1e2 -2.5E-1") == [command(CommandKind.MOVE, ABS, 100, -0.25)]

    def test_implicit_repetition_collects_all_parameters(self):
        assert parse_path_data("M 0 0 10 10 20 0") == [
            command(CommandKind.MOVE, ABS, 0, 0, 10, 10, 20, 0)
        ]

    def test_compact_arc_flags(self):
        commands = parse_path_data("M0 0 a5 5 0 0110 10")
        assert commands[1] == command(CommandKind.ELLIPTICAL_ARC, REL, 5, 5, 0, 0, 1, 10, 10)

    def test_empty_path(self):
        assert parse_path_data("") == []
        assert parse_path_data("   ") == []

    def test_numbers_before_command(self):
        with pytest.raises(PathDataError):
            parse_path_data("10 10 L 5 5")

    def test_unknown_characters(self):
        with pytest.raises(PathDataError):
            parse_path_data("M 0 0 X 1 1")

    def test_from_code_rejects_unknown_letter(self):
        with pytest.raises(PathDataError):
            PathCommand.from_code("B")


class TestPathVertices:
    def test_rectangle_path(self):
        assert path_vertices("M 30 0 h 20 v 20 h -20 Z") == [
            Point(30, 0),
            Point(50, 0),
            Point(50, 20),
            Point(30, 20),
        ]

    def test_bounding_box(self):
        assert path_bounding_box("M 30 0 h 20 v 20 h -20 Z") == BoundingBox(
            Point(30, 0), Point(20, 20)
        )

    def test_empty_path_bounding_box(self):
        assert path_bounding_box("") == BoundingBox(Point(0, 0), Point(0, 0))
