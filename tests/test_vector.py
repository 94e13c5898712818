# MIT License (see LICENSE)
import math

import numpy as np
import pytest
from gravity_lander.vector import Vec2, stack


def test_arithmetic_returns_new_values():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, -1.0)

    assert a + b == Vec2(4.0, 1.0)
    assert a - b == Vec2(-2.0, 3.0)
    assert a * 2 == Vec2(2.0, 4.0)
    assert 2 * a == Vec2(2.0, 4.0)
    assert a / 2 == Vec2(0.5, 1.0)
    assert -a == Vec2(-1.0, -2.0)
    # Receivers untouched
    assert a == Vec2(1.0, 2.0)
    assert b == Vec2(3.0, -1.0)


def test_vectors_are_immutable():
    v = Vec2(1.0, 1.0)
    with pytest.raises(AttributeError):
        v.x = 5.0


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0).div(0.0)


def test_length_and_squared_length():
    v = Vec2(3.0, 4.0)
    assert v.length() == pytest.approx(5.0)
    assert v.length_sq() == pytest.approx(25.0)
    assert Vec2(1.0, 1.0).distance_to(Vec2(4.0, 5.0)) == pytest.approx(5.0)


def test_normalize_zero_is_zero():
    """Zero vector has no heading; normalizing it is not an error."""
    assert Vec2.zero().normalized() == Vec2.zero()
    n = Vec2(0.0, -7.0).normalized()
    assert n.x == pytest.approx(0.0)
    assert n.y == pytest.approx(-1.0)


def test_dot_angle_rotate():
    assert Vec2(1.0, 2.0).dot(Vec2(3.0, 4.0)) == pytest.approx(11.0)
    assert Vec2(-1.0, 0.0).angle() == pytest.approx(math.pi)
    assert Vec2(0.0, -1.0).angle() == pytest.approx(-math.pi / 2)

    r = Vec2(1.0, 0.0).rotate(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_from_angle():
    v = Vec2.from_angle(math.pi / 3, 2.0)
    assert v.length() == pytest.approx(2.0)
    assert v.angle() == pytest.approx(math.pi / 3)
    assert Vec2.from_angle(0.0) == Vec2(1.0, 0.0)


def test_array_interop():
    assert np.allclose(Vec2(1.5, -2.0).as_array(), [1.5, -2.0])
    assert Vec2.of(np.array([3.0, 4.0])) == Vec2(3.0, 4.0)
    assert Vec2.of((1, 2)) == Vec2(1.0, 2.0)

    pts = stack([Vec2(0, 0), Vec2(1, 2)])
    assert pts.shape == (2, 2)
    assert stack([]).shape == (0, 2)
