"""Tests for map data schemas, compilation and outline drawing."""

import json
import logging
import xml.etree.ElementTree as ET

import pytest

from indoor_map.errors import (
    MapDataDeserializeError,
    MapDataError,
    RepeatedFloorNumberError,
    UndefinedFloorNumberError,
    UndefinedVertexIdError,
)
from indoor_map.map_data import (
    CompiledMapData,
    Edge,
    RoomTag,
    UncompiledMapData,
    VertexTag,
    compile_map_data,
    draw_floor,
)
from indoor_map.map_data.drawing import OUTLINE_FILL, outline_path_data

SVG_NS = "{http://www.w3.org/2000/svg}"


def load(data: dict) -> UncompiledMapData:
    return UncompiledMapData.from_json(json.dumps(data))


@pytest.fixture
def compiled(map_dir, map_data) -> CompiledMapData:
    return compile_map_data(load(map_data), map_dir)


class TestUncompiledMapData:
    def test_parses_sample(self, map_data):
        parsed = load(map_data)
        assert [floor.number for floor in parsed.floors] == ["1"]
        assert parsed.vertices["a"].tags == {VertexTag.STAIRS}
        assert parsed.edges == [Edge(from_="c", to="b"), Edge(from_="a", to="b", directed=True)]
        assert parsed.rooms["102"].tags == {RoomTag.AED}
        assert parsed.rooms["102"].center == (1.5, 2.5)
        assert parsed.rooms["101"].center is None

    def test_repeated_floor(self, map_data):
        map_data["floors"].append(dict(map_data["floors"][0]))
        with pytest.raises(RepeatedFloorNumberError) as exc_info:
            load(map_data)
        assert exc_info.value.floor_number == "1"

    def test_undefined_floor(self, map_data):
        map_data["vertices"]["b"]["floor"] = "2"
        with pytest.raises(UndefinedFloorNumberError, match="`2`"):
            load(map_data)

    def test_undefined_room_vertex(self, map_data):
        map_data["rooms"]["101"]["vertices"] = ["zz", "a"]
        with pytest.raises(UndefinedVertexIdError) as exc_info:
            load(map_data)
        assert exc_info.value.vertex_id == "zz"

    def test_undefined_edge_vertex(self, map_data):
        map_data["edges"].append(["a", "q"])
        with pytest.raises(UndefinedVertexIdError, match="`q`"):
            load(map_data)

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda data: data["floors"][0].update(number=1),
            lambda data: data["vertices"]["a"].update(tags=["teleporter"]),
            lambda data: data["rooms"]["101"].update(tags=["sauna"]),
            lambda data: data["edges"].append(["a", "b", True, "extra"]),
            lambda data: data["edges"].append(["a", "b", "yes"]),
            lambda data: data.pop("rooms"),
        ],
    )
    def test_schema_violations(self, map_data, mutate):
        mutate(map_data)
        with pytest.raises(MapDataDeserializeError):
            load(map_data)

    def test_malformed_json(self):
        with pytest.raises(MapDataDeserializeError):
            UncompiledMapData.from_json("{not json")

    def test_deserialize_error_is_map_data_error(self):
        with pytest.raises(MapDataError):
            UncompiledMapData.from_json("[]")


class TestCompile:
    def test_rooms_without_outline_are_dropped(self, compiled):
        assert set(compiled.rooms) == {"101", "102"}

    def test_rect_room(self, compiled):
        room = compiled.rooms["101"]
        assert room.outline == [(0, 0), (0, -10), (20, -10), (20, 0)]
        assert room.area == 200
        assert room.center == pytest.approx((10, -5))
        assert room.names == ["guidance", "counseling office"]

    def test_path_room_keeps_given_center(self, compiled):
        room = compiled.rooms["102"]
        assert room.outline == [(30, 0), (50, 0), (50, -20), (30, -20)]
        assert room.area == 400
        assert room.center == (1.5, 2.5)
        assert room.tags == {RoomTag.AED}

    def test_graph_is_carried_over(self, compiled, map_data):
        assert set(compiled.vertices) == set(map_data["vertices"])
        assert len(compiled.edges) == 2

    def test_unknown_svg_room_is_logged(self, map_dir, map_data, caplog):
        svg = (map_dir / "floor1.svg").read_text()
        svg = svg.replace("</svg>", '<rect id="room555" x="0" y="0" width="1" height="1"/></svg>')
        (map_dir / "floor1.svg").write_text(svg)

        with caplog.at_level(logging.WARNING):
            compiled = compile_map_data(load(map_data), map_dir)

        assert "555" not in compiled.rooms
        assert "Room does not exist: 555" in caplog.text

    def test_degenerate_room_without_center(self, map_dir, map_data):
        svg = '<svg><rect id="room101" x="0" y="0" width="0" height="10"/></svg>'
        (map_dir / "floor1.svg").write_text(svg)
        with pytest.raises(MapDataError, match="degenerate"):
            compile_map_data(load(map_data), map_dir)

    def test_missing_floor_image(self, tmp_path, map_data):
        with pytest.raises(OSError):
            compile_map_data(load(map_data), tmp_path)

    def test_floor_offsets_shift_outline(self, map_dir, map_data):
        map_data["floors"][0]["offsets"] = [10, 5]
        compiled = compile_map_data(load(map_data), map_dir)
        assert compiled.rooms["101"].outline[0] == (-10, 5)


class TestCompiledJson:
    def test_empty_fields_are_left_out(self, compiled):
        data = json.loads(compiled.to_json())
        assert "tags" not in data["vertices"]["b"]
        assert data["vertices"]["a"]["tags"] == ["stairs"]
        assert "tags" not in data["rooms"]["101"]
        assert "names" not in data["rooms"]["102"]
        assert data["rooms"]["102"]["tags"] == ["aed"]

    def test_edges_are_arrays(self, compiled):
        data = json.loads(compiled.to_json())
        assert data["edges"] == [["c", "b"], ["a", "b", True]]

    def test_reload(self, compiled):
        assert CompiledMapData.from_json(compiled.to_json()) == compiled

    def test_malformed_compiled_json(self):
        with pytest.raises(MapDataDeserializeError):
            CompiledMapData.from_json('{"floors": []}')

    def test_floor_lookup(self, compiled):
        assert compiled.floor("1").number == "1"
        with pytest.raises(UndefinedFloorNumberError):
            compiled.floor("9")

    def test_room_floor(self, compiled):
        assert compiled.room_floor(compiled.rooms["101"]) == "1"


class TestDrawFloor:
    def test_outline_path_data(self):
        assert outline_path_data([(0, 0), (1, 0), (1, 1)]) == "M 0,0 L 1,0 L 1,1 Z"

    def test_outlines_are_overlaid(self, compiled, map_dir):
        document = ET.fromstring(draw_floor(compiled, "1", map_dir))
        overlay = document.findall(f"{SVG_NS}g")[-1]
        assert overlay.get("transform") == "matrix(1 0 0 -1 0.0 0.0)"

        paths = overlay.findall(f"{SVG_NS}path")
        assert len(paths) == 2
        assert all(path.get("fill") == OUTLINE_FILL for path in paths)
        assert all(path.get("fill-opacity") == "0.2" for path in paths)
        assert paths[0].get("d") == "M 0.0,0.0 L 0.0,-10.0 L 20.0,-10.0 L 20.0,0.0 Z"

    def test_original_drawing_is_kept(self, compiled, map_dir):
        document = ET.fromstring(draw_floor(compiled, "1", map_dir))
        ids = [element.get("id") for element in document.iter() if element.get("id")]
        assert ids[:4] == ["rooms", "room101", "room102", "closet"]

    def test_undefined_floor(self, compiled, map_dir):
        with pytest.raises(UndefinedFloorNumberError):
            draw_floor(compiled, "9", map_dir)
