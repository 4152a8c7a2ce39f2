"""FastAPI tile server entry point.

Run with ``uvicorn indoor_map.api.main:app``; the drawing is read from
``INDOOR_MAP_SVG_PATH`` at startup.
"""

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from indoor_map.api.cache import TileCache
from indoor_map.api.routes import tiles_router
from indoor_map.config import settings
from indoor_map.errors import IndoorMapError
from indoor_map.svg.scene import from_svg_data
from indoor_map.tiles.layer import Layer

logger = logging.getLogger(__name__)


def load_layer() -> Layer | None:
    """Layer for ``settings.svg_path``, or None when no drawing is configured."""
    if settings.svg_path is None:
        logger.warning("INDOOR_MAP_SVG_PATH is not set; tile requests will fail with 503")
        return None
    logger.info("Loading map layer from %s", settings.svg_path)
    root = from_svg_data(settings.svg_path.read_text(encoding="utf-8"))
    return Layer(root, settings.layer_bounds(root.bounding_box))


def create_app(layer: Layer | None = None) -> FastAPI:
    """Build the tile server. Without a layer, one is loaded from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.tile_cache is None:
            loaded = load_layer()
            if loaded is not None:
                app.state.tile_cache = TileCache(loaded, settings.tile_cache_size)
        yield

    app = FastAPI(
        title="Indoor Map Tile Server",
        description="SVG tiles cut from floor-plan drawings",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.tile_cache = (
        TileCache(layer, settings.tile_cache_size) if layer is not None else None
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.include_router(tiles_router)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "indoor-map-tiles"}

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        loaded = request.app.state.tile_cache is not None
        return {"status": "healthy", "layer_loaded": loaded}

    @app.exception_handler(IndoorMapError)
    async def indoor_map_error_handler(request: Request, exc: IndoorMapError):
        """Map processing errors become 500s with the error type attached."""
        logger.error(
            f"Map error on {request.method} {request.url}: {exc}\n"
            f"{traceback.format_exc()}"
        )
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc), "error_type": type(exc).__name__},
        )

    return app


app = create_app()
