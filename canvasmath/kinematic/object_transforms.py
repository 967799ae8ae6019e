"""Move objects between coordinate spaces.

An object placed inside a transformed container (a group, a nested group, an
active selection) is described in the container's space. When it leaves the
container, the container transform has to be baked into the object's own
fields; when it enters, the transform has to be removed. These helpers do that
by decomposing the resulting matrix back into the object fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, TYPE_CHECKING

from canvasmath import log
from canvasmath.geombase import (
    MatrixLike,
    Point,
    calc_dimensions_matrix,
    invert_transform,
    make_bounding_box_from_points,
    multiply_transform_matrices,
    qr_decompose,
)

if TYPE_CHECKING:
    from .transformable import Transformable


@dataclass
class ObjectTransform:
    """Saved transform fields of an object."""

    scale_x: float
    scale_y: float
    skew_x: float
    skew_y: float
    angle: float
    left: float
    flip_x: bool
    flip_y: bool
    top: float


def apply_transform_to_object(obj: "Transformable", transform: MatrixLike) -> None:
    """Discard the object transform state and take the one from the matrix.

    The object is positioned so that the translation of the matrix becomes its
    center. Flips are cleared: the decomposition expresses mirroring through
    scale and angle instead.
    """
    decomposed = qr_decompose(transform)
    center = Point(decomposed.translate_x, decomposed.translate_y)
    obj.flip_x = False
    obj.flip_y = False
    obj.angle = decomposed.angle
    obj.skew_x = decomposed.skew_x
    obj.skew_y = decomposed.skew_y
    obj.flip_x = decomposed.flip_x
    obj.flip_y = decomposed.flip_y
    obj.set(scale_x=decomposed.scale_x, scale_y=decomposed.scale_y)
    obj.set_position_by_origin(center, "center", "center")


def remove_transform_from_object(obj: "Transformable", transform: MatrixLike) -> None:
    """Apply the inverse of transform to the object.

    Removing a transform that scales by 2 is like scaling the object by 1/2;
    removing a 30 degree rotation rotates it by -30 degrees. Used when adding
    an object to a transformed group, so that it looks the same afterwards.
    """
    log.debug(f"Removing transform {transform!r} from {obj!r}")
    inverted = invert_transform(transform)
    apply_transform_to_object(obj, multiply_transform_matrices(inverted, obj.calc_own_matrix()))


def add_transform_to_object(obj: "Transformable", transform: MatrixLike) -> None:
    """Apply transform to the object, changing the space it is drawn in.

    Used when an object leaves a transformed group or an active selection.
    """
    log.debug(f"Adding transform {transform!r} to {obj!r}")
    apply_transform_to_object(obj, multiply_transform_matrices(transform, obj.calc_own_matrix()))


def reset_object_transform(target: "Transformable") -> None:
    """Reset scale, skew, flips and angle to neutral. left/top are kept."""
    target.scale_x = 1
    target.scale_y = 1
    target.skew_x = 0
    target.skew_y = 0
    target.flip_x = False
    target.flip_y = False
    target.rotate(0)


def save_object_transform(target: "Transformable") -> ObjectTransform:
    return ObjectTransform(
        scale_x=target.scale_x,
        scale_y=target.scale_y,
        skew_x=target.skew_x,
        skew_y=target.skew_y,
        angle=target.angle,
        left=target.left,
        flip_x=target.flip_x,
        flip_y=target.flip_y,
        top=target.top,
    )


def size_after_transform(width: float, height: float, options: Mapping[str, float]) -> Point:
    """Size of the box that contains a width x height box after scale/skew.

    options takes the keyword arguments of calc_dimensions_matrix (scale_x,
    scale_y, skew_x, skew_y, flip_x, flip_y). Rotation is not applied.
    Used to size the controls drawn around objects.
    """
    dim_x = width / 2
    dim_y = height / 2
    points = [
        Point(-dim_x, -dim_y),
        Point(dim_x, -dim_y),
        Point(-dim_x, dim_y),
        Point(dim_x, dim_y),
    ]
    transform_matrix = calc_dimensions_matrix(**options)
    bbox = make_bounding_box_from_points(points, transform_matrix)
    return Point(bbox.width, bbox.height)
