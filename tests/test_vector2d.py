import math

import pytest

from rengine.vector2d import PI, ZERO_VECTOR, Vector2D


def test_coordinates_become_floats():
    v = Vector2D(1, 2)
    assert (v.x, v.y) == (1.0, 2.0)
    assert isinstance(v.x, float)


def test_default_is_zero():
    assert Vector2D() == ZERO_VECTOR


def test_unpacking():
    x, y = Vector2D(7, -2)
    assert (x, y) == (7.0, -2.0)


def test_addition_is_commutative_and_zero_is_identity():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(4.0, 9.0)
    assert a + b == b + a
    assert a + ZERO_VECTOR == a


def test_vector_subtraction_is_reversed():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(10.0, -5.0)
    assert (a - b) + a == b
    assert a - a == ZERO_VECTOR


def test_scalar_add_sub_round_trip():
    v = Vector2D(3.0, -1.0)
    assert (v + 3) - 3 == v


def test_scalar_mul_div_round_trip():
    v = Vector2D(3.0, -1.0)
    assert (v * 2) / 2 == v


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D(1.0, 1.0) / 0


def test_length_of_three_four():
    assert Vector2D(3, 4).length() == pytest.approx(5.0)


def test_distance_to_self_is_zero():
    v = Vector2D(2.0, 8.0)
    assert v.distance_squared(v) == 0
    assert v.distance(v) == 0


def test_distance_squared_matches_length_on_diagonal_target():
    a = Vector2D(1.0, -3.0)
    b = Vector2D(5.0, 5.0)
    assert a.distance_squared(b) == pytest.approx((b - a).length() ** 2)
    assert a.distance(b) == pytest.approx(math.sqrt(a.distance_squared(b)))


def test_distance_is_nan_when_squared_is_negative():
    a = Vector2D(0.0, 10.0)
    b = Vector2D(0.0, 20.0)
    assert a.distance_squared(b) < 0
    assert math.isnan(a.distance(b))


def test_angle_to_opposite_directions_differ_by_pi():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(4.0, 6.0)
    assert abs(a.angle_to(b) - b.angle_to(a)) == pytest.approx(PI)


def test_dot_with_self_is_length_squared():
    v = Vector2D(2.0, 7.0)
    assert v * v == pytest.approx(v.length() ** 2)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_not_equal_requires_both_components_to_differ():
    assert (Vector2D(1, 2) != Vector2D(1, 3)) is False
    assert (Vector2D(1, 2) != Vector2D(3, 4)) is True
    assert (Vector2D(1, 2) == Vector2D(1, 3)) is False