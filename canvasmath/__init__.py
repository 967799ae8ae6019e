"""
Canvasmath - числовые утилиты 2D canvas-библиотеки.

Основные модули:
- geombase - точки, аффинные матрицы, разложение матриц
- kinematic - перенос объектов между системами координат
- tween - функции сглаживания для анимаций
"""

from .geombase import Point, Matrix2D, DecomposedTransform
from .kinematic import (
    add_transform_to_object,
    apply_transform_to_object,
    remove_transform_from_object,
    reset_object_transform,
    save_object_transform,
    size_after_transform,
)
from .tween import Ease

__version__ = '0.1.0'

__all__ = [
    # Geombase
    'Point',
    'Matrix2D',
    'DecomposedTransform',
    # Kinematic
    'add_transform_to_object',
    'apply_transform_to_object',
    'remove_transform_from_object',
    'reset_object_transform',
    'save_object_transform',
    'size_after_transform',
    # Tween
    'Ease',
]
