"""Indoor map configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from indoor_map.geometry.types import BoundingBox, BoundingSquare, Point


class Settings(BaseSettings):
    """Settings loaded from ``INDOOR_MAP_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INDOOR_MAP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "info"

    # Tile pyramid generation
    max_workers: int = Field(default=4, ge=1)
    min_zoom: int = Field(default=0, ge=0)
    max_zoom: int = Field(default=3, ge=0)
    tile_output_dir: Path = Path("out")

    # Pyramid root square; the edge defaults to the drawing's larger dimension
    layer_edge_length: float | None = Field(default=None, gt=0)
    layer_top_left_x: float = 0.0
    layer_top_left_y: float = 0.0

    # Tile server
    svg_path: Path | None = None
    tile_cache_size: int = Field(default=256, ge=0)

    def layer_bounds(self, root_box: BoundingBox) -> BoundingSquare:
        """Pyramid root square for a drawing whose root box is ``root_box``."""
        if self.layer_edge_length is None:
            return BoundingSquare.contain_bounding_box(root_box)
        return BoundingSquare(
            Point(self.layer_top_left_x, self.layer_top_left_y),
            self.layer_edge_length,
        )


settings = Settings()
