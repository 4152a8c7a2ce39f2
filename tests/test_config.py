"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from indoor_map.config import Settings
from indoor_map.geometry import BoundingBox, BoundingSquare, Point


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "INDOOR_MAP_LAYER_EDGE_LENGTH",
        "INDOOR_MAP_MIN_ZOOM",
        "INDOOR_MAP_MAX_ZOOM",
        "INDOOR_MAP_SVG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.max_workers == 4
        assert settings.min_zoom == 0
        assert settings.max_zoom == 3
        assert settings.tile_output_dir == Path("out")
        assert settings.layer_edge_length is None
        assert settings.svg_path is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("INDOOR_MAP_LAYER_EDGE_LENGTH", "64")
        monkeypatch.setenv("INDOOR_MAP_SVG_PATH", "/maps/floor1.svg")
        settings = Settings(_env_file=None)
        assert settings.layer_edge_length == 64
        assert settings.svg_path == Path("/maps/floor1.svg")

    @pytest.mark.parametrize(
        "overrides",
        [{"min_zoom": -1}, {"max_workers": 0}, {"layer_edge_length": 0}, {"tile_cache_size": -5}],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)


class TestLayerBounds:
    def test_defaults_to_containing_square(self):
        settings = Settings(_env_file=None)
        root_box = BoundingBox(Point(5, 5), Point(30, 60))
        assert settings.layer_bounds(root_box) == BoundingSquare(Point(5, 5), 60)

    def test_explicit_square(self):
        settings = Settings(
            _env_file=None, layer_edge_length=128, layer_top_left_x=-4, layer_top_left_y=2
        )
        root_box = BoundingBox(Point(0, 0), Point(10, 10))
        assert settings.layer_bounds(root_box) == BoundingSquare(Point(-4, 2), 128)
