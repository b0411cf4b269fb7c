import math

import pytest

from craftorio.geometry import BoundingBox, Vec3, Vector2i, Vector3i


def test_add_and_sub_are_inverse():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_mul_and_neg():
    v = Vec3(1.0, -2.0, 3.0)
    assert v * 2 == Vec3(2.0, -4.0, 6.0)
    assert 2 * v == v * 2
    assert -v == Vec3(-1.0, 2.0, -3.0)
    assert v + (-v) == Vec3(0.0, 0.0, 0.0)


def test_length_of_axis_vector():
    assert Vec3(0.0, 0.0, 5.0).length() == 5.0


def test_normalized_has_unit_length():
    v = Vec3(3.0, -7.0, 2.5).normalized()
    assert math.isclose(v.length(), 1.0)


def test_normalized_zero_stays_zero():
    assert Vec3().normalized() == Vec3(0.0, 0.0, 0.0)


def test_cross_of_axes():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    z = Vec3(0.0, 0.0, 1.0)
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert math.isclose(c.x * a.x + c.y * a.y + c.z * a.z, 0.0, abs_tol=1e-9)
    assert math.isclose(c.x * b.x + c.y * b.y + c.z * b.z, 0.0, abs_tol=1e-9)


def test_distance_is_symmetric():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 6.0, 3.0)
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0.0


def test_floored_rounds_down():
    assert Vec3(-0.5, 1.2, 2.0).floored() == Vector3i(-1, 1, 2)


def test_integer_vectors_are_hashable_keys():
    chunks = {Vector2i(1, -2): "a"}
    assert chunks[Vector2i(1, -2)] == "a"
    assert Vector2i(1, -2) != Vector2i(-2, 1)
    cells = {Vector3i(1, 2, 3), Vector3i(1, 2, 3)}
    assert len(cells) == 1


def _unit_box(x, y, z):
    return BoundingBox(Vec3(x, y, z), Vec3(x + 1.0, y + 1.0, z + 1.0))


def test_boxes_overlap():
    assert _unit_box(0, 0, 0).collides(_unit_box(0.5, 0.5, 0.5))


def test_touching_boxes_collide():
    assert _unit_box(0, 0, 0).collides(_unit_box(1, 0, 0))


@pytest.mark.parametrize("offset", [(1.5, 0, 0), (0, 1.5, 0), (0, 0, -1.5)])
def test_separate_boxes_do_not_collide(offset):
    a = _unit_box(0, 0, 0)
    b = _unit_box(*offset)
    assert not a.collides(b)
    assert not b.collides(a)