"""Tests for TransformableObject - origins, centers and own matrix."""

import pytest

from canvasmath.geombase import Point
from canvasmath.kinematic import Transformable, TransformableObject, resolve_origin


def assert_point_approx(actual: Point, expected: tuple, eps=1e-9):
    assert abs(actual.x - expected[0]) < eps, f"x: {actual.x} != {expected[0]}"
    assert abs(actual.y - expected[1]) < eps, f"y: {actual.y} != {expected[1]}"


class TestOrigins:

    @pytest.mark.parametrize("origin, offset", [
        ("left", -0.5),
        ("top", -0.5),
        ("center", 0.0),
        ("right", 0.5),
        ("bottom", 0.5),
        (0, -0.5),
        (1, 0.5),
        (0.25, -0.25),
    ])
    def test_resolve(self, origin, offset):
        assert resolve_origin(origin) == offset

    def test_unknown_origin(self):
        with pytest.raises(ValueError):
            resolve_origin("middle")


class TestTransformableObject:

    def test_satisfies_protocol(self):
        assert isinstance(TransformableObject(), Transformable)

    def test_set_many_fields(self):
        obj = TransformableObject()
        result = obj.set({"left": 3}, top=4, scale_x=2)
        assert result is obj
        assert (obj.left, obj.top, obj.scale_x) == (3, 4, 2)

    def test_set_unknown_field(self):
        obj = TransformableObject()
        with pytest.raises(AttributeError):
            obj.set(color="red")
        assert obj.left == 0

    def test_center_from_top_left(self):
        obj = TransformableObject(left=10, top=20, width=100, height=50)
        assert_point_approx(obj.get_center_point(), (60, 45))

    def test_center_of_rotated_object(self):
        obj = TransformableObject(left=10, top=20, width=100, height=50, angle=90)
        assert_point_approx(obj.get_center_point(), (-15, 70))

    def test_transformed_dimensions(self):
        obj = TransformableObject(width=100, height=50, scale_x=2)
        assert obj.get_transformed_dimensions() == Point(200, 50)

    def test_transformed_dimensions_with_skew(self):
        obj = TransformableObject(width=100, height=50, skew_x=45)
        assert_point_approx(obj.get_transformed_dimensions(), (150, 50))

    def test_set_position_by_origin(self):
        obj = TransformableObject(width=100, height=50)
        obj.set_position_by_origin(Point(0, 0), "right", "bottom")
        assert (obj.left, obj.top) == (-100, -50)

    def test_own_matrix_translates_to_center(self):
        obj = TransformableObject(left=10, top=20, width=100, height=50, scale_x=2)
        m = obj.calc_own_matrix()
        assert tuple(m) == (2, 0, 0, 1, 110, 45)

    def test_rotate_keeps_origin_by_default(self):
        obj = TransformableObject(left=10, top=20, width=100, height=50)
        obj.rotate(45)
        assert obj.angle == 45
        assert (obj.left, obj.top) == (10, 20)

    def test_centered_rotation_keeps_center(self):
        obj = TransformableObject(left=10, top=20, width=100, height=50, centered_rotation=True)
        center = obj.get_center_point()
        obj.rotate(45)
        assert obj.angle == 45
        assert_point_approx(obj.get_center_point(), tuple(center))
