"""Type definitions for the tile pyramid."""

from dataclasses import dataclass
from functools import total_ordering

from indoor_map.svg.scene import SceneElement, to_svg


@total_ordering
@dataclass(frozen=True)
class TileCoords:
    """Tile position in the pyramid.

    At zoom level ``z`` the layer is split into ``2**z`` columns and rows.
    Coordinates sort in enumeration order: zoom, then row, then column.
    """

    zoom: int
    column: int
    row: int

    def __post_init__(self) -> None:
        if self.zoom < 0:
            raise ValueError(f"Zoom level must be non-negative, got {self.zoom}")
        tiles_per_side = self.tiles_per_side(self.zoom)
        if not (0 <= self.column < tiles_per_side and 0 <= self.row < tiles_per_side):
            raise ValueError(
                f"Tile ({self.column}, {self.row}) is outside zoom level {self.zoom} "
                f"(0..{tiles_per_side - 1})"
            )

    @staticmethod
    def tiles_per_side(zoom: int) -> int:
        return 2**zoom

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.zoom, self.row, self.column)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TileCoords):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True)
class Tile:
    """Rendered content for one tile: the overlapping subtree or an empty placeholder."""

    coords: TileCoords
    element: SceneElement

    @property
    def view_box(self) -> str:
        return self.element.attributes["viewBox"]

    def to_svg(self) -> str:
        return to_svg(self.element)
