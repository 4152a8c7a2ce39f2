"""Pytest configuration and fixtures for indoor map tests."""

import json

import pytest
from indoor_map.svg.scene import from_svg_data
from indoor_map.tiles.layer import Layer

# Group at (10, 10) holding a 20x10 rect room and a 20x20 path room, plus a
# lone 10x10 rect in the bottom-right corner of a 100x100 drawing.
SAMPLE_SVG = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <!-- first floor -->
  <g id="rooms" transform="translate(10, 10)">
    <rect id="room101" x="0" y="0" width="20" height="10"/>
    <path id="room102" d="M 30 0 h 20 v 20 h -20 Z"/>
  </g>
  <rect id="closet" x="80" y="80" width="10" height="10"/>
</svg>
"""

SAMPLE_MAP_DATA = {
    "floors": [{"number": "1", "image": "floor1.svg", "offsets": [0, 0]}],
    "vertices": {
        "a": {"floor": "1", "location": [434.875, 288.0], "tags": ["stairs"]},
        "b": {"floor": "1", "location": [0.0, 0.0]},
        "c": {"floor": "1", "location": [0.0, 1.0]},
    },
    "edges": [["c", "b"], ["a", "b", True]],
    "rooms": {
        "101": {"vertices": ["a"], "names": ["guidance", "counseling office"]},
        "102": {"vertices": ["b", "c"], "center": [1.5, 2.5], "tags": ["aed"]},
        "999": {"vertices": ["a"]},
    },
}


@pytest.fixture
def sample_svg() -> str:
    return SAMPLE_SVG


@pytest.fixture
def scene(sample_svg):
    """Scene tree of the sample drawing."""
    return from_svg_data(sample_svg)


@pytest.fixture
def layer(sample_svg) -> Layer:
    """Layer whose zoom level 0 tile is the whole 100x100 drawing."""
    return Layer.from_svg_data(sample_svg)


@pytest.fixture
def map_data() -> dict:
    return json.loads(json.dumps(SAMPLE_MAP_DATA))


@pytest.fixture
def map_dir(tmp_path, sample_svg, map_data):
    """Directory holding map.json and the floor SVG it references."""
    (tmp_path / "floor1.svg").write_text(sample_svg)
    (tmp_path / "map.json").write_text(json.dumps(map_data))
    return tmp_path
