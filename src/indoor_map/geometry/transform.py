"""Affine transforms and the SVG ``transform`` attribute parser."""

import math
import re

import numpy as np
from numpy.typing import NDArray

from indoor_map.errors import TransformError
from indoor_map.geometry.types import Point

_FUNCTION_RE = re.compile(r"^\s*([A-Za-z]+)\s*\(([^()]*)\)\s*$")
_ARG_SEPARATOR_RE = re.compile(r"[\s,]+")


class AffineTransform:
    """An immutable 3x3 homogeneous transform matrix.

    Transforms compose with ``@``: ``parent @ local`` applies ``local``
    first, then ``parent``.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: NDArray[np.float64]) -> None:
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape != (3, 3):
            raise ValueError(f"Affine transform must be 3x3, got shape {matrix.shape}")
        matrix.setflags(write=False)
        self._matrix = matrix

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls(np.identity(3))

    @classmethod
    def from_values(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> "AffineTransform":
        """Build from the six SVG ``matrix(a b c d e f)`` values."""
        return cls(np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]]))

    @classmethod
    def translate(cls, tx: float, ty: float = 0.0) -> "AffineTransform":
        return cls(np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]]))

    @classmethod
    def rotate(cls, degrees: float, center: Point | None = None) -> "AffineTransform":
        """Rotation about the origin, or about ``center`` when given."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        rotation = cls(np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]]))
        if center is None:
            return rotation
        return cls.translate(center.x, center.y) @ rotation @ cls.translate(-center.x, -center.y)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "AffineTransform":
        if sy is None:
            sy = sx
        return cls(np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]]))

    @property
    def matrix(self) -> NDArray[np.float64]:
        return self._matrix

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return AffineTransform(self._matrix @ other._matrix)

    def apply(self, point: Point) -> Point:
        x, y, _ = self._matrix @ np.array([point.x, point.y, 1.0])
        return Point(float(x), float(y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def __repr__(self) -> str:
        return f"AffineTransform({self._matrix.tolist()!r})"


IDENTITY = AffineTransform.identity()


def _parse_args(args: str, text: str) -> list[float]:
    args = args.strip()
    if not args:
        return []
    try:
        return [float(arg) for arg in _ARG_SEPARATOR_RE.split(args)]
    except ValueError:
        raise TransformError("Non-numeric argument in transform", text) from None


def parse_transform(text: str) -> AffineTransform:
    """Parse a single ``matrix``, ``translate``, ``rotate`` or ``scale`` function.

    Raises:
        TransformError: For any other function, malformed arguments or an
            argument count the function does not accept.
    """
    match = _FUNCTION_RE.match(text)
    if match is None:
        raise TransformError("Unsupported transform", text)
    name, raw_args = match.groups()
    args = _parse_args(raw_args, text)

    if name == "matrix":
        if len(args) != 6:
            raise TransformError("Wrong number of arguments to matrix transform", text)
        return AffineTransform.from_values(*args)

    if name == "translate":
        if len(args) not in (1, 2):
            raise TransformError("Wrong number of arguments to translate transform", text)
        return AffineTransform.translate(*args)

    if name == "rotate":
        if len(args) == 1:
            return AffineTransform.rotate(args[0])
        if len(args) == 3:
            return AffineTransform.rotate(args[0], Point(args[1], args[2]))
        if len(args) == 2:
            raise TransformError("Expected a y-coordinate to rotate about", text)
        raise TransformError("Wrong number of arguments to rotate transform", text)

    if name == "scale":
        if len(args) not in (1, 2):
            raise TransformError("Wrong number of arguments to scale transform", text)
        return AffineTransform.scale(*args)

    raise TransformError("Unsupported transform", text)
