"""Axis-aligned bounding box of a set of 2D points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy

from .matrix2d import MatrixLike, _as_matrix
from .point import Point


@dataclass(frozen=True)
class BoundingBox:
    left: float
    top: float
    width: float
    height: float

    @property
    def size(self) -> Point:
        return Point(self.width, self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)


def make_bounding_box_from_points(
    points: Iterable[Point],
    transform: Optional[MatrixLike] = None,
) -> BoundingBox:
    """Bounding box of points, transformed first when transform is given."""
    pts = numpy.array([tuple(p) for p in points], dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        raise ValueError("cannot bound an empty set of points")
    if transform is not None:
        pts = _as_matrix(transform).transform_points(pts)
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return BoundingBox(
        left=float(lo[0]),
        top=float(lo[1]),
        width=float(hi[0] - lo[0]),
        height=float(hi[1] - lo[1]),
    )
