"""Tile endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from indoor_map.api.cache import TileCache
from indoor_map.api.dependencies import get_tile_cache
from indoor_map.api.schemas import LayerBounds, LayerInfo
from indoor_map.config import settings
from indoor_map.tiles.types import TileCoords

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tiles"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/tiles", response_model=LayerInfo)
async def get_layer_info(cache: TileCache = Depends(get_tile_cache)) -> LayerInfo:
    """Describe the pyramid served by this instance."""
    bounds = cache.layer.bounds
    return LayerInfo(
        bounds=LayerBounds(
            top_left_x=bounds.top_left.x,
            top_left_y=bounds.top_left.y,
            edge_length=bounds.edge_length,
        ),
        view_box=bounds.as_bounding_box().as_view_box(),
        min_zoom=settings.min_zoom,
        max_zoom=settings.max_zoom,
        cached_tiles=len(cache),
    )


@router.get("/tiles/{zoom}/{column}/{row}.svg")
def get_tile(
    zoom: int,
    column: int,
    row: int,
    cache: TileCache = Depends(get_tile_cache),
) -> Response:
    """Render one tile as an SVG document."""
    if not settings.min_zoom <= zoom <= settings.max_zoom:
        logger.warning("Tile request outside zoom range: zoom=%s", zoom)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Zoom level {zoom} is outside {settings.min_zoom}..{settings.max_zoom}",
        )
    try:
        coords = TileCoords(zoom, column, row)
    except ValueError as e:
        logger.warning("Invalid tile request: zoom=%s column=%s row=%s", zoom, column, row)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e

    return Response(content=cache.get(coords), media_type=SVG_MEDIA_TYPE)
