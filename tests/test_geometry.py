import math

import pytest

from arpg.geometry import (
    BoundingBox,
    Ray,
    Vector3,
    check_collision_box_sphere,
    check_collision_boxes,
)


def unit_box(x=0.0):
    return BoundingBox(Vector3(x, 0, 0), Vector3(x + 1, 1, 1))


@pytest.mark.parametrize(
    "vector",
    [Vector3(3, 0, 4), Vector3(-2, 5, 1), Vector3(0, 0, 0.25), Vector3(10, -10, 10)],
)
def test_normalized_has_unit_length(vector):
    assert math.isclose(vector.normalized().length(), 1.0, rel_tol=1e-9)


@pytest.mark.parametrize("vector", [Vector3(3, 0, 4), Vector3(-2, 5, 1)])
def test_normalized_keeps_direction(vector):
    rebuilt = vector.normalized() * vector.length()
    assert math.isclose(rebuilt.x, vector.x, abs_tol=1e-9)
    assert math.isclose(rebuilt.y, vector.y, abs_tol=1e-9)
    assert math.isclose(rebuilt.z, vector.z, abs_tol=1e-9)


def test_normalized_zero_vector_stays_zero():
    assert Vector3().normalized() == Vector3()


def test_vector_add_sub_round_trip():
    a = Vector3(1.5, -2, 3)
    b = Vector3(0.25, 4, -1)
    assert (a + b) - b == a


def test_scalar_multiplication_is_commutative():
    v = Vector3(1, 2, 3)
    assert 2 * v == v * 2


def test_center_of_symmetric_box_is_origin():
    box = BoundingBox(Vector3(-1, -2, -3), Vector3(1, 2, 3))
    assert box.center() == Vector3(0, 0, 0)


def test_center_lies_inside_box():
    box = BoundingBox(Vector3(0.5, 1, -4), Vector3(2, 7, 3))
    c = box.center()
    assert box.min.x <= c.x <= box.max.x
    assert box.min.y <= c.y <= box.max.y
    assert box.min.z <= c.z <= box.max.z


def test_boxes_overlapping_collide():
    other = BoundingBox(Vector3(0.5, 0, 0), Vector3(1.5, 1, 1))
    assert check_collision_boxes(unit_box(), other) is True


def test_touching_boxes_collide():
    assert check_collision_boxes(unit_box(0), unit_box(1)) is True


def test_separated_boxes_do_not_collide():
    assert check_collision_boxes(unit_box(0), unit_box(2)) is False


@pytest.mark.parametrize("offset", [0.0, 0.5, 1.0, 1.5, 3.0])
def test_box_collision_is_symmetric(offset):
    a = unit_box(0)
    b = unit_box(offset)
    assert check_collision_boxes(a, b) == check_collision_boxes(b, a)


def test_sphere_inside_box_collides():
    assert check_collision_box_sphere(unit_box(), Vector3(0.5, 0.5, 0.5), 0.1) is True


def test_sphere_outside_but_reaching_box_collides():
    assert check_collision_box_sphere(unit_box(), Vector3(1.2, 0.5, 0.5), 0.3) is True


def test_distant_sphere_misses_box():
    assert check_collision_box_sphere(unit_box(), Vector3(5, 5, 5), 0.5) is False


def test_ray_equality_by_value():
    origin = Vector3(1, 2, 3)
    direction = Vector3(0, -1, 0)
    assert Ray(origin, direction) == Ray(Vector3(1, 2, 3), Vector3(0, -1, 0))