"""Exception hierarchy for indoor map processing."""


class IndoorMapError(Exception):
    """Base class for all indoor map errors."""


class SvgParseError(IndoorMapError):
    """Raised when SVG markup cannot be turned into a scene tree."""


class TransformError(SvgParseError):
    """Raised for an unsupported or malformed ``transform`` attribute."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(f"{message}: {text!r}")
        self.text = text


class PathDataError(SvgParseError):
    """Raised for malformed path data (bad tokens or parameter counts)."""


class DegeneratePolygonError(IndoorMapError):
    """Raised when a centroid is requested for a polygon with zero area."""


class MapDataError(IndoorMapError):
    """Raised when map data violates the schema's integrity rules."""


class RepeatedFloorNumberError(MapDataError):
    def __init__(self, floor_number: str) -> None:
        super().__init__(f"The floor number `{floor_number}` was repeated")
        self.floor_number = floor_number


class UndefinedFloorNumberError(MapDataError):
    def __init__(self, floor_number: str) -> None:
        super().__init__(f"The floor number `{floor_number}` is undefined")
        self.floor_number = floor_number


class UndefinedVertexIdError(MapDataError):
    def __init__(self, vertex_id: str) -> None:
        super().__init__(f"The vertex ID `{vertex_id}` is undefined")
        self.vertex_id = vertex_id


class MapDataDeserializeError(MapDataError):
    """Raised when map JSON is malformed or fails schema validation."""
