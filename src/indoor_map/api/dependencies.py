"""Shared dependencies for API routes."""

from fastapi import HTTPException, Request, status

from indoor_map.api.cache import TileCache


def get_tile_cache(request: Request) -> TileCache:
    """The loaded layer's tile cache, or 503 while no layer is loaded."""
    cache: TileCache | None = getattr(request.app.state, "tile_cache", None)
    if cache is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No map layer is loaded",
        )
    return cache
