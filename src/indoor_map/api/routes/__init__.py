"""API routes."""

from indoor_map.api.routes.tiles import router as tiles_router

__all__ = ["tiles_router"]
