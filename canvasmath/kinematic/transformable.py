"""Transformable - the object contract used by the transform utilities.

Objects positioned on a canvas describe their placement with fields rather
than a matrix: left/top (the position of the origin anchor), scale, skew,
rotation angle in degrees and flips. The matrix is derived from these fields
by calc_own_matrix().

Origins are "left" / "center" / "right" horizontally and "top" / "center" /
"bottom" vertically, or a float from 0 (left/top) to 1 (right/bottom).
"""

from __future__ import annotations

from typing import Mapping, Protocol, Union, runtime_checkable

from canvasmath.geombase import Matrix2D, Point, compose_matrix, degrees_to_radians

from .object_transforms import size_after_transform

Origin = Union[str, float]

_ORIGIN_OFFSETS = {
    "left": -0.5,
    "top": -0.5,
    "center": 0.0,
    "right": 0.5,
    "bottom": 0.5,
}


def resolve_origin(origin: Origin) -> float:
    """Convert a named origin to an offset relative to the center."""
    if isinstance(origin, str):
        try:
            return _ORIGIN_OFFSETS[origin]
        except KeyError:
            raise ValueError(f"Unknown origin: {origin!r}") from None
    return float(origin) - 0.5


@runtime_checkable
class Transformable(Protocol):
    """What the transform utilities need from an object."""

    scale_x: float
    scale_y: float
    skew_x: float
    skew_y: float
    angle: float
    flip_x: bool
    flip_y: bool
    left: float
    top: float

    def calc_own_matrix(self) -> Matrix2D: ...

    def set(self, mapping: Mapping[str, object] = None, **fields) -> "Transformable": ...

    def set_position_by_origin(self, pos: Point, origin_x: Origin, origin_y: Origin) -> None: ...

    def rotate(self, angle: float) -> None: ...


class TransformableObject:
    """Minimal object implementing the Transformable contract.

    Sizes are unstroked. With centered_rotation, rotate() keeps the center in
    place instead of the origin anchor.
    """

    _FIELDS = (
        "left", "top", "width", "height",
        "scale_x", "scale_y", "skew_x", "skew_y", "angle",
        "flip_x", "flip_y", "origin_x", "origin_y", "centered_rotation",
    )

    def __init__(
        self,
        left: float = 0.0,
        top: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        skew_x: float = 0.0,
        skew_y: float = 0.0,
        angle: float = 0.0,
        flip_x: bool = False,
        flip_y: bool = False,
        origin_x: Origin = "left",
        origin_y: Origin = "top",
        centered_rotation: bool = False,
    ):
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.skew_x = skew_x
        self.skew_y = skew_y
        self.angle = angle
        self.flip_x = flip_x
        self.flip_y = flip_y
        self.origin_x = origin_x
        self.origin_y = origin_y
        self.centered_rotation = centered_rotation

    def __repr__(self):
        return (
            f"TransformableObject(left={self.left}, top={self.top}, "
            f"width={self.width}, height={self.height}, angle={self.angle}, "
            f"scale=({self.scale_x}, {self.scale_y}), skew=({self.skew_x}, {self.skew_y}), "
            f"flip=({self.flip_x}, {self.flip_y}))"
        )

    def set(self, mapping: Mapping[str, object] = None, **fields) -> "TransformableObject":
        """Assign several fields at once. Unknown names raise AttributeError."""
        values = dict(mapping or {})
        values.update(fields)
        for name in values:
            if name not in self._FIELDS:
                raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        for name, value in values.items():
            setattr(self, name, value)
        return self

    # --- Dimensions ---

    def get_transformed_dimensions(self) -> Point:
        """Size of the object after scale and skew, rotation excluded."""
        if self.skew_x == 0 and self.skew_y == 0:
            return Point(self.width * self.scale_x, self.height * self.scale_y)
        return size_after_transform(self.width, self.height, {
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
            "skew_x": self.skew_x,
            "skew_y": self.skew_y,
        })

    # --- Origins ---

    def translate_to_given_origin(
        self,
        point: Point,
        from_origin_x: Origin,
        from_origin_y: Origin,
        to_origin_x: Origin,
        to_origin_y: Origin,
    ) -> Point:
        """Move point between two anchors of the unrotated object."""
        offset_x = resolve_origin(to_origin_x) - resolve_origin(from_origin_x)
        offset_y = resolve_origin(to_origin_y) - resolve_origin(from_origin_y)
        if not offset_x and not offset_y:
            return point
        dim = self.get_transformed_dimensions()
        return Point(point.x + offset_x * dim.x, point.y + offset_y * dim.y)

    def translate_to_center_point(self, point: Point, origin_x: Origin, origin_y: Origin) -> Point:
        """Center of the object whose (origin_x, origin_y) anchor is at point."""
        p = self.translate_to_given_origin(point, origin_x, origin_y, "center", "center")
        if self.angle:
            return p.rotate(degrees_to_radians(self.angle), point)
        return p

    def translate_to_origin_point(self, center: Point, origin_x: Origin, origin_y: Origin) -> Point:
        """Position of the (origin_x, origin_y) anchor of the object centered at center."""
        p = self.translate_to_given_origin(center, "center", "center", origin_x, origin_y)
        if self.angle:
            return p.rotate(degrees_to_radians(self.angle), center)
        return p

    def get_center_point(self) -> Point:
        return self.translate_to_center_point(Point(self.left, self.top), self.origin_x, self.origin_y)

    def set_position_by_origin(self, pos: Point, origin_x: Origin, origin_y: Origin) -> None:
        """Move the object so that its (origin_x, origin_y) anchor lands on pos."""
        center = self.translate_to_center_point(pos, origin_x, origin_y)
        position = self.translate_to_origin_point(center, self.origin_x, self.origin_y)
        self.left = position.x
        self.top = position.y

    # --- Transform ---

    def calc_own_matrix(self) -> Matrix2D:
        center = self.get_center_point()
        return compose_matrix(
            translate_x=center.x,
            translate_y=center.y,
            angle=self.angle,
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            skew_x=self.skew_x,
            skew_y=self.skew_y,
            flip_x=self.flip_x,
            flip_y=self.flip_y,
        )

    def rotate(self, angle: float) -> None:
        if self.centered_rotation:
            center = self.get_center_point()
            self.angle = angle
            self.set_position_by_origin(center, "center", "center")
        else:
            self.angle = angle
