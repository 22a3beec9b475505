import pytest

from ponsic.point import Point


def test_point_add():
    assert Point(1, 2) + Point(3, 4) == Point(4, 6)


def test_point_sub():
    assert Point(1, 2) - Point(3, 4) == Point(-2, -2)


def test_point_mul():
    assert Point(1, 2) * 3 == Point(3, 6)


def test_point_div():
    assert Point(1, 2) / 2 == Point(0, 1)


def test_point_neg():
    assert -Point(1, 2) == Point(-1, -2)


def test_point_add_assign():
    p1 = Point(1, 2)
    p1 += Point(3, 4)
    assert p1 == Point(4, 6)


def test_point_sub_assign():
    p1 = Point(1, 2)
    p1 -= Point(3, 4)
    assert p1 == Point(-2, -2)


def test_point_mul_assign():
    p1 = Point(1, 2)
    p1 *= 3
    assert p1 == Point(3, 6)


def test_point_div_assign():
    p1 = Point(1, 2)
    p1 /= 2
    assert p1 == Point(0, 1)


def test_integer_division_truncates_toward_zero():
    assert Point(-3, 3) / 2 == Point(-1, 1)


def test_float_division_is_exact():
    assert Point(1.0, 3.0) / 2 == Point(0.5, 1.5)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(1, 2) / 0


def test_from_tuple():
    assert Point.from_tuple((5, -7)) == Point(5, -7)


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_unpacking():
    x, y = Point(8, 9)
    assert (x, y) == (8, 9)


def test_adding_non_point_raises():
    with pytest.raises(TypeError):
        Point(1, 2) + 3


def test_points_are_hashable():
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2