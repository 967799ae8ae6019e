"""Matrix2D - 2D affine transform as six coefficients [a, b, c, d, e, f].

The coefficients map a point (x, y) to:

    x' = a*x + c*y + e
    y' = b*x + d*y + f

which is the 3x3 matrix

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

Composition follows matrix order: (A * B) applies B first, then A.
Angles of the helpers below are in degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Iterator, Sequence, Union

import numpy

from canvasmath import log
from canvasmath.constants import HALF_PI, IDENTITY_MATRIX, PI_BY_180
from .point import Point


class Matrix2D:
    """Immutable 2D affine transform."""

    __slots__ = ('_m',)

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        e: float = 0.0,
        f: float = 0.0,
    ):
        self._m = (float(a), float(b), float(c), float(d), float(e), float(f))

    @staticmethod
    def from_sequence(values: Sequence[float]) -> 'Matrix2D':
        """Build from six coefficients or from a 3x3 / 2x3 array."""
        arr = numpy.asarray(values, dtype=float)
        if arr.shape in ((3, 3), (2, 3)):
            return Matrix2D(arr[0, 0], arr[1, 0], arr[0, 1], arr[1, 1], arr[0, 2], arr[1, 2])
        if arr.shape != (6,):
            raise ValueError("matrix must have 6 coefficients")
        return Matrix2D(*arr)

    @staticmethod
    def identity() -> 'Matrix2D':
        return Matrix2D(*IDENTITY_MATRIX)

    def as_tuple(self) -> tuple:
        return self._m

    def as_matrix(self) -> numpy.ndarray:
        """Get the 3x3 homogeneous matrix."""
        a, b, c, d, e, f = self._m
        return numpy.array([
            [a, c, e],
            [b, d, f],
            [0.0, 0.0, 1.0],
        ])

    def __getitem__(self, index):
        return self._m[index]

    def __len__(self) -> int:
        return 6

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __eq__(self, other) -> bool:
        if isinstance(other, Matrix2D):
            return self._m == other._m
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._m)

    def __repr__(self):
        return "Matrix2D(a={}, b={}, c={}, d={}, e={}, f={})".format(*self._m)

    def almost_equal(self, other: 'MatrixLike', eps: float = 1e-9) -> bool:
        return all(abs(x - y) <= eps for x, y in zip(self._m, _as_matrix(other)))

    def __mul__(self, other: 'Matrix2D') -> 'Matrix2D':
        """Compose: (self * other) applies other first."""
        if not isinstance(other, Matrix2D):
            raise TypeError("Can only multiply Matrix2D with Matrix2D")
        return multiply_transform_matrices(self, other)

    def __matmul__(self, other: 'Matrix2D') -> 'Matrix2D':
        return self * other

    def inverse(self) -> 'Matrix2D':
        return invert_transform(self)

    def decompose(self) -> 'DecomposedTransform':
        return qr_decompose(self)

    def transform_point(self, point: Point, ignore_offset: bool = False) -> Point:
        return transform_point(point, self, ignore_offset)

    def transform_points(self, points) -> numpy.ndarray:
        """Transform an (N, 2) array of points at once."""
        pts = numpy.asarray(points, dtype=float).reshape(-1, 2)
        homogeneous = numpy.hstack([pts, numpy.ones((len(pts), 1))])
        return (self.as_matrix() @ homogeneous.T).T[:, :2]

    def is_identity(self) -> bool:
        return is_identity_matrix(self)

    # --- Factory methods ---

    @staticmethod
    def translation(x: float, y: float) -> 'Matrix2D':
        return Matrix2D(e=x, f=y)

    @staticmethod
    def rotation(angle: float) -> 'Matrix2D':
        """Rotation by angle in degrees."""
        return calc_rotate_matrix(angle)

    @staticmethod
    def scaling(sx: float, sy: float = None) -> 'Matrix2D':
        if sy is None:
            sy = sx
        return Matrix2D(a=sx, d=sy)

    @staticmethod
    def skewing(skew_x: float = 0.0, skew_y: float = 0.0) -> 'Matrix2D':
        """Skew by angles in degrees."""
        return calc_dimensions_matrix(skew_x=skew_x, skew_y=skew_y)


MatrixLike = Union[Matrix2D, Sequence[float]]


@dataclass
class DecomposedTransform:
    """Independent components of an affine transform. Angles in degrees."""

    translate_x: float = 0.0
    translate_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    skew_x: float = 0.0
    skew_y: float = 0.0
    angle: float = 0.0
    flip_x: bool = False
    flip_y: bool = False

    def as_dict(self) -> dict:
        return asdict(self)

    def compose(self) -> Matrix2D:
        return compose_matrix(**self.as_dict())


def _as_matrix(value: MatrixLike) -> Matrix2D:
    if isinstance(value, Matrix2D):
        return value
    return Matrix2D.from_sequence(value)


# ============================================================================
# Angles
# ============================================================================


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI_BY_180


def radians_to_degrees(radians: float) -> float:
    return radians / PI_BY_180


def cos(angle: float) -> float:
    """Cosine that is exact at multiples of a right angle."""
    if angle == 0:
        return 1.0
    quarter = abs(angle) / HALF_PI
    if quarter == 1 or quarter == 3:
        return 0.0
    if quarter == 2:
        return -1.0
    return math.cos(angle)


def sin(angle: float) -> float:
    """Sine that is exact at multiples of a right angle."""
    if angle == 0:
        return 0.0
    quarter = abs(angle) / HALF_PI
    sign = math.copysign(1.0, angle)
    if quarter == 1:
        return sign
    if quarter == 2:
        return 0.0
    if quarter == 3:
        return -sign
    return math.sin(angle)


# ============================================================================
# Matrix operations
# ============================================================================


def transform_point(point: Point, matrix: MatrixLike, ignore_offset: bool = False) -> Point:
    """Apply matrix to point. With ignore_offset the translation is skipped."""
    a, b, c, d, e, f = _as_matrix(matrix)
    x, y = point
    if ignore_offset:
        return Point(a * x + c * y, b * x + d * y)
    return Point(a * x + c * y + e, b * x + d * y + f)


def multiply_transform_matrices(a: MatrixLike, b: MatrixLike, is_2x2: bool = False) -> Matrix2D:
    """Product a * b. With is_2x2 the translation of the result is zeroed."""
    product = _as_matrix(a).as_matrix() @ _as_matrix(b).as_matrix()
    result = Matrix2D.from_sequence(product)
    if is_2x2:
        return Matrix2D(result[0], result[1], result[2], result[3], 0.0, 0.0)
    return result


def invert_transform(matrix: MatrixLike) -> Matrix2D:
    """Inverse of an affine transform.

    Raises:
        ValueError: the matrix is singular.
    """
    t = _as_matrix(matrix)
    det = t[0] * t[3] - t[1] * t[2]
    if det == 0:
        log.warn(f"Cannot invert singular matrix {t!r}")
        raise ValueError("matrix is not invertible")
    k = 1 / det
    linear = Matrix2D(k * t[3], -k * t[1], -k * t[2], k * t[0])
    offset = transform_point(Point(t[4], t[5]), linear, True)
    return Matrix2D(linear[0], linear[1], linear[2], linear[3], -offset.x, -offset.y)


def is_identity_matrix(matrix: MatrixLike) -> bool:
    return tuple(_as_matrix(matrix)) == IDENTITY_MATRIX


def qr_decompose(matrix: MatrixLike) -> DecomposedTransform:
    """Decompose into rotation, scale, horizontal skew and translation.

    The decomposition never reports a skew on y nor a flip: mirroring ends up
    as a negative scale_y and a rotation.
    """
    a = _as_matrix(matrix)
    angle = math.atan2(a[1], a[0])
    denom = a[0] ** 2 + a[1] ** 2
    scale_x = math.sqrt(denom)
    scale_y = (a[0] * a[3] - a[2] * a[1]) / scale_x
    skew_x = math.atan2(a[0] * a[2] + a[1] * a[3], denom)
    return DecomposedTransform(
        angle=radians_to_degrees(angle),
        scale_x=scale_x,
        scale_y=scale_y,
        skew_x=radians_to_degrees(skew_x),
        skew_y=0.0,
        translate_x=a[4],
        translate_y=a[5],
    )


def calc_rotate_matrix(angle: float = 0.0) -> Matrix2D:
    """Rotation matrix for angle in degrees."""
    if not angle:
        return Matrix2D.identity()
    theta = degrees_to_radians(angle)
    c = cos(theta)
    s = sin(theta)
    return Matrix2D(c, s, -s, c, 0.0, 0.0)


def calc_dimensions_matrix(
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    flip_x: bool = False,
    flip_y: bool = False,
    skew_x: float = 0.0,
    skew_y: float = 0.0,
) -> Matrix2D:
    """Scale/flip/skew matrix without rotation nor translation."""
    matrix = Matrix2D(
        -scale_x if flip_x else scale_x,
        0.0,
        0.0,
        -scale_y if flip_y else scale_y,
    )
    if skew_x:
        matrix = multiply_transform_matrices(
            matrix, Matrix2D(1.0, 0.0, math.tan(degrees_to_radians(skew_x)), 1.0), True)
    if skew_y:
        matrix = multiply_transform_matrices(
            matrix, Matrix2D(1.0, math.tan(degrees_to_radians(skew_y)), 0.0, 1.0), True)
    return matrix


def compose_matrix(
    translate_x: float = 0.0,
    translate_y: float = 0.0,
    angle: float = 0.0,
    **dimensions,
) -> Matrix2D:
    """Translation * rotation * (scale, flip, skew).

    dimensions accepts the keyword arguments of calc_dimensions_matrix.
    """
    matrix = Matrix2D.translation(translate_x, translate_y)
    if angle:
        matrix = multiply_transform_matrices(matrix, calc_rotate_matrix(angle))
    scale_matrix = calc_dimensions_matrix(**dimensions)
    if not is_identity_matrix(scale_matrix):
        matrix = multiply_transform_matrices(matrix, scale_matrix)
    return matrix
