"""Transform utilities for objects described by position, scale, skew and angle."""

from .object_transforms import (
    ObjectTransform,
    add_transform_to_object,
    apply_transform_to_object,
    remove_transform_from_object,
    reset_object_transform,
    save_object_transform,
    size_after_transform,
)
from .transformable import Transformable, TransformableObject, resolve_origin

__all__ = [
    'ObjectTransform',
    'Transformable',
    'TransformableObject',
    'add_transform_to_object',
    'apply_transform_to_object',
    'remove_transform_from_object',
    'reset_object_transform',
    'resolve_origin',
    'save_object_transform',
    'size_after_transform',
]
