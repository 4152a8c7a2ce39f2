"""In-memory cache of rendered tiles."""

import threading
from collections import OrderedDict

from indoor_map.tiles.layer import Layer
from indoor_map.tiles.types import TileCoords


class TileCache:
    """Least-recently-used cache of tile SVG documents for one layer."""

    def __init__(self, layer: Layer, max_size: int = 256) -> None:
        self.layer = layer
        self.max_size = max_size
        self._tiles: OrderedDict[TileCoords, str] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._tiles)

    def get(self, coords: TileCoords) -> str:
        with self._lock:
            svg = self._tiles.get(coords)
            if svg is not None:
                self._tiles.move_to_end(coords)
                self.hits += 1
                return svg
            self.misses += 1

        svg = self.layer.tile(coords).to_svg()

        if self.max_size > 0:
            with self._lock:
                self._tiles[coords] = svg
                self._tiles.move_to_end(coords)
                while len(self._tiles) > self.max_size:
                    self._tiles.popitem(last=False)
        return svg
