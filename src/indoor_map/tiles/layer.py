"""Tile pyramid generation for one SVG layer."""

import logging
import math
import time
from collections import deque
from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from indoor_map.geometry.types import BoundingSquare, Point
from indoor_map.svg.scene import SceneElement, empty_root, from_svg_data, select
from indoor_map.tiles.iterator import TileIterator, tile_count
from indoor_map.tiles.types import Tile, TileCoords

logger = logging.getLogger(__name__)

PREFETCH_PER_WORKER = 2


class Layer:
    """A parsed SVG drawing and the square region its tile pyramid covers.

    The scene tree is never modified, so tiles can be cut from one layer
    concurrently.
    """

    def __init__(self, root: SceneElement, bounds: BoundingSquare) -> None:
        self.root = root
        self.bounds = bounds

    @classmethod
    def from_svg_data(cls, svg_data: str, bounds: BoundingSquare | None = None) -> "Layer":
        """Parse a drawing; without explicit bounds the pyramid covers the root's bounding box."""
        root = from_svg_data(svg_data)
        if bounds is None:
            bounds = BoundingSquare.contain_bounding_box(root.bounding_box)
        return cls(root, bounds)

    def bounds_for_tile_coords(self, coords: TileCoords) -> BoundingSquare:
        # Exact for any zoom: 2**zoom as a float overflows past zoom 1023.
        length = self.bounds.edge_length
        tiles_per_side = TileCoords.tiles_per_side(coords.zoom)
        edge_length = math.ldexp(length, -coords.zoom)
        offset = Point(coords.column / tiles_per_side * length, coords.row / tiles_per_side * length)
        top_left = self.bounds.top_left + offset
        return BoundingSquare(top_left, edge_length)

    def tile(self, coords: TileCoords) -> Tile:
        """Cut one tile. Tiles nothing overlaps get an empty root so the pyramid has no gaps."""
        bounds = self.bounds_for_tile_coords(coords).as_bounding_box()
        selected = select(self.root, bounds)
        if selected is None:
            logger.debug("Tile %s is empty", coords)
            selected = empty_root(bounds)
        element = selected.with_attributes(
            {"viewBox": bounds.as_view_box()},
            remove=("width", "height"),
        )
        return Tile(coords, element)


def generate_pyramid(
    layer: Layer,
    min_zoom: int,
    max_zoom: int,
    max_workers: int = 4,
) -> Iterator[Tile]:
    """Cut every tile from ``min_zoom`` to ``max_zoom`` on a thread pool.

    Tiles are yielded in :class:`TileIterator` order. At most
    ``max_workers * PREFETCH_PER_WORKER`` tiles are in flight or waiting
    to be consumed at any time.
    """
    total = tile_count(min_zoom, max_zoom)
    logger.info(
        "Generating %d tiles for zoom levels %d-%d with %d workers",
        total, min_zoom, max_zoom, max_workers,
    )
    t_start = time.perf_counter()
    window = max_workers * PREFETCH_PER_WORKER
    pending: deque[Future[Tile]] = deque()
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        for coords in TileIterator(min_zoom, max_zoom):
            pending.append(executor.submit(layer.tile, coords))
            if len(pending) >= window:
                yield pending.popleft().result()
        while pending:
            yield pending.popleft().result()
    total_ms = (time.perf_counter() - t_start) * 1000
    logger.info("[Tiles] pyramid complete in %.1fms (%d tiles)", total_ms, total)


def tile_path(output_dir: Path, coords: TileCoords) -> Path:
    return output_dir / str(coords.zoom) / str(coords.column) / f"{coords.row}.svg"


def write_pyramid(tiles: Iterable[Tile], output_dir: Path) -> int:
    """Write each tile to ``{zoom}/{column}/{row}.svg`` under ``output_dir``."""
    written = 0
    for tile in tiles:
        path = tile_path(output_dir, tile.coords)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(tile.to_svg(), encoding="utf-8")
        written += 1
    logger.info("Wrote %d tiles to %s", written, output_dir)
    return written
