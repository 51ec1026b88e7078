import dataclasses
import math

import pytest

from ascii_galaxy.models.vector import Vec2


def test_arithmetic_returns_new_vectors():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, -1.0)

    assert a + b == Vec2(4.0, 1.0)
    assert a - b == Vec2(-2.0, 3.0)
    assert a * 2.5 == Vec2(2.5, 5.0)
    assert 2.5 * a == Vec2(2.5, 5.0)
    assert a == Vec2(1.0, 2.0)


def test_vectors_are_immutable():
    v = Vec2(1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_length():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vec2().length() == 0.0


def test_normalizing_zero_vector_gives_zero_vector():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


@pytest.mark.parametrize(
    "x, y",
    [(3.0, 4.0), (-2.0, 0.0), (0.0, 1e-9), (1e6, -1e6), (0.3, 0.7)],
)
def test_normalized_has_unit_length(x, y):
    n = Vec2(x, y).normalized()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(y, x))


def test_perpendicular_rotates_a_quarter_turn():
    v = Vec2(2.0, 1.0)
    p = v.perpendicular()

    assert p == Vec2(-1.0, 2.0)
    assert v.x * p.x + v.y * p.y == pytest.approx(0.0)
    assert Vec2(1.0, 0.0).perpendicular() == Vec2(0.0, 1.0)
