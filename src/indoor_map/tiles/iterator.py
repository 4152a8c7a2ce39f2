"""Enumeration of tile coordinates across zoom levels."""

from collections.abc import Iterator

from indoor_map.tiles.types import TileCoords


class TileIterator:
    """Every tile from ``min_zoom`` to ``max_zoom`` inclusive.

    Columns advance fastest, then rows, then zoom levels. Iterators are
    single-use; create a new one to start over.
    """

    def __init__(self, min_zoom: int, max_zoom: int) -> None:
        if min_zoom < 0:
            raise ValueError(f"Zoom level must be non-negative, got {min_zoom}")
        if min_zoom > max_zoom:
            raise ValueError(f"min_zoom ({min_zoom}) is greater than max_zoom ({max_zoom})")
        self._max_zoom = max_zoom
        self._next: TileCoords | None = TileCoords(min_zoom, 0, 0)

    @classmethod
    def single(cls, zoom: int) -> "TileIterator":
        """Tiles of a single zoom level."""
        return cls(zoom, zoom)

    def __iter__(self) -> "TileIterator":
        return self

    def __next__(self) -> TileCoords:
        current = self._next
        if current is None:
            raise StopIteration
        self._next = self._successor(current)
        return current

    def _successor(self, coords: TileCoords) -> TileCoords | None:
        max_coord = TileCoords.tiles_per_side(coords.zoom) - 1
        if coords.column < max_coord:
            return TileCoords(coords.zoom, coords.column + 1, coords.row)
        if coords.row < max_coord:
            return TileCoords(coords.zoom, 0, coords.row + 1)
        if coords.zoom < self._max_zoom:
            return TileCoords(coords.zoom + 1, 0, 0)
        return None


def iter_tile_coords(min_zoom: int, max_zoom: int | None = None) -> Iterator[TileCoords]:
    """Generator form of :class:`TileIterator`; ``max_zoom`` defaults to ``min_zoom``."""
    if max_zoom is None:
        max_zoom = min_zoom
    yield from TileIterator(min_zoom, max_zoom)


def tile_count(min_zoom: int, max_zoom: int) -> int:
    """Number of tiles the iterator yields for a zoom range."""
    return sum(4**zoom for zoom in range(min_zoom, max_zoom + 1))
