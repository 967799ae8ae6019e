"""
Базовые геометрические классы (Geometric Base).

Содержит значения, с которыми работают утилиты трансформаций:
- Point - неизменяемая 2D точка
- Matrix2D - аффинное преобразование [a, b, c, d, e, f]
- DecomposedTransform - разложение матрицы на сдвиг, поворот, масштаб и скос
- BoundingBox - ограничивающий прямоугольник набора точек
"""

from .point import Point
from .matrix2d import (
    Matrix2D,
    MatrixLike,
    DecomposedTransform,
    calc_dimensions_matrix,
    calc_rotate_matrix,
    compose_matrix,
    degrees_to_radians,
    invert_transform,
    is_identity_matrix,
    multiply_transform_matrices,
    qr_decompose,
    radians_to_degrees,
    transform_point,
)
from .bounding_box import BoundingBox, make_bounding_box_from_points

__all__ = [
    'Point',
    'Matrix2D',
    'MatrixLike',
    'DecomposedTransform',
    'BoundingBox',
    'calc_dimensions_matrix',
    'calc_rotate_matrix',
    'compose_matrix',
    'degrees_to_radians',
    'invert_transform',
    'is_identity_matrix',
    'make_bounding_box_from_points',
    'multiply_transform_matrices',
    'qr_decompose',
    'radians_to_degrees',
    'transform_point',
]
