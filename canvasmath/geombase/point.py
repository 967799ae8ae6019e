"""Point - immutable 2D coordinate."""

from __future__ import annotations

import math
from typing import Iterator, TYPE_CHECKING

import numpy

if TYPE_CHECKING:
    from .matrix2d import Matrix2D


class Point:
    """A 2D point. Every operation returns a new Point."""

    __slots__ = ('_x', '_y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @staticmethod
    def from_array(arr) -> 'Point':
        arr = numpy.asarray(arr, dtype=float).reshape(-1)
        if arr.shape != (2,):
            raise ValueError("point must be a 2D vector")
        return Point(arr[0], arr[1])

    def to_array(self) -> numpy.ndarray:
        return numpy.array([self._x, self._y])

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Point(x={self._x}, y={self._y})"

    # --- Point/point arithmetic ---

    def add(self, other: 'Point') -> 'Point':
        other = _as_point(other)
        return Point(self._x + other.x, self._y + other.y)

    def subtract(self, other: 'Point') -> 'Point':
        other = _as_point(other)
        return Point(self._x - other.x, self._y - other.y)

    def multiply(self, other: 'Point') -> 'Point':
        """Component-wise product."""
        other = _as_point(other)
        return Point(self._x * other.x, self._y * other.y)

    def divide(self, other: 'Point') -> 'Point':
        """Component-wise quotient."""
        other = _as_point(other)
        return Point(self._x / other.x, self._y / other.y)

    __add__ = add
    __sub__ = subtract

    def __neg__(self) -> 'Point':
        return Point(-self._x, -self._y)

    # --- Point/scalar arithmetic ---

    def scalar_add(self, scalar: float) -> 'Point':
        return Point(self._x + scalar, self._y + scalar)

    def scalar_subtract(self, scalar: float) -> 'Point':
        return Point(self._x - scalar, self._y - scalar)

    def scalar_multiply(self, scalar: float) -> 'Point':
        return Point(self._x * scalar, self._y * scalar)

    def scalar_divide(self, scalar: float) -> 'Point':
        return Point(self._x / scalar, self._y / scalar)

    def __mul__(self, scalar: float) -> 'Point':
        if isinstance(scalar, Point):
            return self.multiply(scalar)
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Point':
        if isinstance(scalar, Point):
            return self.divide(scalar)
        return self.scalar_divide(scalar)

    # --- Comparisons ---

    def lt(self, other: 'Point') -> bool:
        return self._x < other.x and self._y < other.y

    def lte(self, other: 'Point') -> bool:
        return self._x <= other.x and self._y <= other.y

    def gt(self, other: 'Point') -> bool:
        return self._x > other.x and self._y > other.y

    def gte(self, other: 'Point') -> bool:
        return self._x >= other.x and self._y >= other.y

    def min(self, other: 'Point') -> 'Point':
        return Point(min(self._x, other.x), min(self._y, other.y))

    def max(self, other: 'Point') -> 'Point':
        return Point(max(self._x, other.x), max(self._y, other.y))

    # --- Geometry ---

    def lerp(self, other: 'Point', t: float = 0.5) -> 'Point':
        """Linear interpolation, t clamped to [0, 1]."""
        t = max(min(1.0, t), 0.0)
        return Point(self._x + (other.x - self._x) * t, self._y + (other.y - self._y) * t)

    def distance_from(self, other: 'Point') -> float:
        return math.hypot(self._x - other.x, self._y - other.y)

    def mid_point_from(self, other: 'Point') -> 'Point':
        return self.lerp(other)

    def rotate(self, radians: float, origin: 'Point' = None) -> 'Point':
        """Rotate around origin (default: the coordinate origin)."""
        from .matrix2d import cos, sin

        if origin is None:
            origin = Point()
        s = sin(radians)
        c = cos(radians)
        px = self._x - origin.x
        py = self._y - origin.y
        return Point(px * c - py * s + origin.x, px * s + py * c + origin.y)

    def transform(self, matrix: 'Matrix2D', ignore_offset: bool = False) -> 'Point':
        from .matrix2d import transform_point
        return transform_point(self, matrix, ignore_offset)


def _as_point(value) -> Point:
    if isinstance(value, Point):
        return value
    raise TypeError(f"expected Point, got {type(value).__name__}")
