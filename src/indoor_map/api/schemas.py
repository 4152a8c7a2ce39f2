"""Tile server schemas."""

from pydantic import BaseModel, Field


class LayerBounds(BaseModel):
    """The square region covered by zoom level 0."""

    top_left_x: float
    top_left_y: float
    edge_length: float = Field(..., ge=0)


class LayerInfo(BaseModel):
    """Metadata clients need to request tiles."""

    bounds: LayerBounds
    view_box: str = Field(..., description="viewBox of the zoom level 0 tile")
    min_zoom: int = Field(..., ge=0)
    max_zoom: int = Field(..., ge=0)
    tile_url_template: str = "/tiles/{zoom}/{column}/{row}.svg"
    cached_tiles: int = Field(default=0, ge=0)
