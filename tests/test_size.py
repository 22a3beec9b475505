import pytest

from ponsic.size import Size


def test_size_add():
    assert Size(1, 2) + Size(3, 4) == Size(4, 6)


def test_size_sub():
    assert Size(1, 2) - Size(3, 4) == Size(-2, -2)


def test_size_mul():
    assert Size(1, 2) * 3 == Size(3, 6)


def test_size_div():
    assert Size(1, 2) / 2 == Size(0, 1)


def test_size_neg():
    assert -Size(1, 2) == Size(-1, -2)


def test_size_add_assign():
    a = Size(1, 2)
    a += Size(3, 4)
    assert a == Size(4, 6)


def test_size_sub_assign():
    a = Size(1, 2)
    a -= Size(3, 4)
    assert a == Size(-2, -2)


def test_size_mul_assign():
    a = Size(1, 2)
    a *= 3
    assert a == Size(3, 6)


def test_size_div_assign():
    a = Size(1, 2)
    a /= 2
    assert a == Size(0, 1)


def test_from_tuple():
    assert Size.from_tuple((10, 20)) == Size(10, 20)


def test_convert_to_float():
    converted = Size(10, 20).convert(float)
    assert converted == Size(10.0, 20.0)
    assert isinstance(converted.width, float)
    assert isinstance(converted.height, float)


def test_negative_division_truncates_toward_zero():
    assert Size(-5, 5) / 2 == Size(-2, 2)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Size(1, 2) / 0


def test_default_is_zero():
    assert Size() == Size(0, 0)


def test_subtracting_non_size_raises():
    with pytest.raises(TypeError):
        Size(1, 2) - 1