"""Tests for moving objects between coordinate spaces."""

import logging

import numpy
import pytest

from canvasmath.geombase import Matrix2D, Point, compose_matrix
from canvasmath.kinematic import (
    ObjectTransform,
    TransformableObject,
    add_transform_to_object,
    apply_transform_to_object,
    remove_transform_from_object,
    reset_object_transform,
    save_object_transform,
    size_after_transform,
)


def assert_matrix_approx(actual, expected, eps=1e-6):
    """Helper to compare the six coefficients."""
    for i, (x, y) in enumerate(zip(actual, expected)):
        assert abs(x - y) < eps, f"[{i}]: {x} != {y} in {actual!r}"


def make_object(**overrides) -> TransformableObject:
    fields = dict(
        left=10, top=20, width=80, height=40,
        angle=25, scale_x=1.5, scale_y=0.8, skew_x=10,
        flip_y=True,
    )
    fields.update(overrides)
    return TransformableObject(**fields)


ROUND_TRIP_MATRICES = [
    compose_matrix(translate_x=30, translate_y=-12, angle=-40, scale_x=2, scale_y=1.25, skew_x=5),
    Matrix2D(-1, 0, 0, 1, 15, 0),
    Matrix2D(1, 0, 0, -1, 0, -8),
    Matrix2D(1.2, 0.3, -0.7, 0.9, 11, -4),
    compose_matrix(angle=170, scale_x=0.5, skew_x=35, skew_y=-20, flip_x=True),
]

ROUND_TRIP_OBJECTS = [
    {},
    {"flip_x": True, "flip_y": False},
    {"skew_x": -25, "skew_y": 15},
    {"origin_x": "center", "origin_y": "center"},
    {"origin_x": "right", "origin_y": 0.3, "angle": -110, "centered_rotation": True},
]


def random_matrix(rng) -> Matrix2D:
    return compose_matrix(
        translate_x=rng.uniform(-200, 200),
        translate_y=rng.uniform(-200, 200),
        angle=rng.uniform(-180, 180),
        scale_x=rng.uniform(0.3, 3),
        scale_y=rng.uniform(0.3, 3),
        skew_x=rng.uniform(-40, 40),
        skew_y=rng.uniform(-40, 40),
        flip_x=bool(rng.integers(2)),
        flip_y=bool(rng.integers(2)),
    )


def random_object(rng) -> TransformableObject:
    return TransformableObject(
        left=rng.uniform(-100, 100),
        top=rng.uniform(-100, 100),
        width=rng.uniform(1, 200),
        height=rng.uniform(1, 200),
        scale_x=rng.uniform(0.3, 3),
        scale_y=rng.uniform(0.3, 3),
        skew_x=rng.uniform(-40, 40),
        skew_y=rng.uniform(-40, 40),
        angle=rng.uniform(-180, 180),
        flip_x=bool(rng.integers(2)),
        flip_y=bool(rng.integers(2)),
        origin_x=rng.choice(["left", "center", "right"]),
        origin_y=float(rng.uniform(0, 1)),
    )

class TestSizeAfterTransform:

    def test_scale(self):
        size = size_after_transform(100, 50, {"scale_x": 2, "scale_y": 1, "skew_x": 0, "skew_y": 0})
        assert size == Point(200, 50)

    def test_skew(self):
        size = size_after_transform(100, 50, {"skew_x": 45})
        assert size.x == pytest.approx(150)
        assert size.y == pytest.approx(50)

    def test_never_negative(self):
        size = size_after_transform(10, 10, {"scale_x": -3, "flip_y": True})
        assert size == Point(30, 10)

    def test_empty_options(self):
        assert size_after_transform(4, 6, {}) == Point(4, 6)


class TestApplyTransform:

    def test_scale_and_translation(self):
        obj = TransformableObject(width=100, height=50, flip_x=True)
        apply_transform_to_object(obj, Matrix2D(2, 0, 0, 3, 40, 60))
        assert obj.scale_x == pytest.approx(2)
        assert obj.scale_y == pytest.approx(3)
        assert obj.angle == pytest.approx(0)
        assert obj.skew_x == pytest.approx(0)
        assert obj.flip_x is False
        assert obj.flip_y is False
        # translation becomes the center, left/top follows the origin
        assert obj.left == pytest.approx(-60)
        assert obj.top == pytest.approx(-15)

    def test_center_lands_on_translation(self):
        obj = make_object()
        m = compose_matrix(translate_x=7, translate_y=9, angle=60, scale_x=2)
        apply_transform_to_object(obj, m)
        center = obj.get_center_point()
        assert center.x == pytest.approx(7)
        assert center.y == pytest.approx(9)

    @pytest.mark.parametrize("m", [
        Matrix2D(2, 0, 0, 3, 40, 60),
        Matrix2D(1.2, 0.3, -0.7, 0.9, 11, -4),
        Matrix2D(1, 0, 0, -1, 5, 5),
        compose_matrix(translate_x=3, angle=-135, scale_x=0.5, scale_y=4, skew_x=30),
    ])
    def test_own_matrix_matches_applied(self, m):
        obj = make_object()
        apply_transform_to_object(obj, m)
        assert_matrix_approx(obj.calc_own_matrix(), m)

    def test_flips_are_cleared(self):
        obj = make_object(flip_x=True, flip_y=True)
        apply_transform_to_object(obj, Matrix2D(-1, 0, 0, 1, 0, 0))
        assert obj.flip_x is False
        assert obj.flip_y is False
        assert_matrix_approx(obj.calc_own_matrix(), (-1, 0, 0, 1, 0, 0))

    def test_accepts_sequence(self):
        obj = make_object()
        apply_transform_to_object(obj, (1, 0, 0, 1, 2, 3))
        assert obj.get_center_point().x == pytest.approx(2)


class TestAddRemoveTransform:

    @pytest.mark.parametrize("m", ROUND_TRIP_MATRICES)
    @pytest.mark.parametrize("fields", ROUND_TRIP_OBJECTS)
    def test_round_trip_restores_matrix(self, m, fields):
        obj = make_object(**fields)
        before = obj.calc_own_matrix()

        remove_transform_from_object(obj, m)
        add_transform_to_object(obj, m)

        assert_matrix_approx(obj.calc_own_matrix(), before)

    @pytest.mark.parametrize("seed", range(20))
    def test_round_trip_random(self, seed):
        rng = numpy.random.default_rng(seed)
        obj = random_object(rng)
        m = random_matrix(rng)
        before = obj.calc_own_matrix()

        remove_transform_from_object(obj, m)
        add_transform_to_object(obj, m)

        assert_matrix_approx(obj.calc_own_matrix(), before)

    def test_removed_transform_is_expressed_in_container_space(self):
        obj = make_object()
        before = obj.calc_own_matrix()
        m = compose_matrix(translate_x=100, translate_y=50, angle=90, scale_x=3, scale_y=3)

        remove_transform_from_object(obj, m)

        assert_matrix_approx(m * obj.calc_own_matrix(), before)

    def test_add_translation_moves_object(self):
        obj = TransformableObject(width=10, height=10, origin_x="center", origin_y="center")
        add_transform_to_object(obj, Matrix2D.translation(5, 7))
        assert obj.left == pytest.approx(5)
        assert obj.top == pytest.approx(7)

    def test_remove_scale_halves(self):
        obj = TransformableObject(width=10, height=10, scale_x=4, scale_y=4)
        remove_transform_from_object(obj, Matrix2D.scaling(2))
        assert obj.scale_x == pytest.approx(2)
        assert obj.scale_y == pytest.approx(2)

    def test_remove_singular_raises_and_keeps_object(self):
        obj = make_object()
        snapshot = save_object_transform(obj)
        with pytest.raises(ValueError):
            remove_transform_from_object(obj, Matrix2D(0, 0, 0, 0, 1, 1))
        assert save_object_transform(obj) == snapshot

    def test_logs_rebase(self, caplog):
        caplog.set_level(logging.DEBUG, logger="canvasmath")
        add_transform_to_object(make_object(), Matrix2D.translation(1, 1))
        assert any("Adding transform" in r.getMessage() for r in caplog.records)


class TestResetTransform:

    def test_resets_fields(self):
        obj = make_object(skew_y=5, flip_x=True)
        reset_object_transform(obj)
        assert (obj.scale_x, obj.scale_y) == (1, 1)
        assert (obj.skew_x, obj.skew_y) == (0, 0)
        assert obj.flip_x is False
        assert obj.flip_y is False
        assert obj.angle == 0

    def test_keeps_position(self):
        obj = make_object()
        reset_object_transform(obj)
        assert (obj.left, obj.top) == (10, 20)

    def test_keeps_position_with_centered_rotation(self):
        obj = make_object(origin_x="center", origin_y="center", centered_rotation=True)
        reset_object_transform(obj)
        assert (obj.left, obj.top) == (10, 20)


class TestSaveTransform:

    def test_snapshot(self):
        obj = make_object()
        saved = save_object_transform(obj)
        assert saved == ObjectTransform(
            scale_x=1.5, scale_y=0.8, skew_x=10, skew_y=0, angle=25,
            left=10, flip_x=False, flip_y=True, top=20,
        )

    def test_snapshot_is_not_aliased(self):
        obj = make_object()
        saved = save_object_transform(obj)
        obj.set(left=500, scale_x=9, angle=0, flip_y=False)
        assert saved.left == 10
        assert saved.scale_x == 1.5
        assert saved.angle == 25
        assert saved.flip_y is True

    def test_does_not_mutate(self):
        obj = make_object()
        before = vars(obj).copy()
        save_object_transform(obj)
        assert vars(obj) == before
