import math

import pytest

from starforge.angle import PI, Angle, degrees, positive_remainder, radians


def test_zero_angle():
    assert Angle.ZERO == degrees(0)
    assert float(Angle.ZERO) == 0.0


def test_degrees_radians_round_trip():
    a = degrees(73.25)
    assert radians(a.as_radians()).as_degrees() == pytest.approx(73.25)


def test_radians_of_pi_is_half_turn():
    assert radians(PI).as_degrees() == pytest.approx(180)


def test_as_radians_matches_math():
    assert degrees(45).as_radians() == pytest.approx(math.radians(45), rel=1e-6)


@pytest.mark.parametrize("value", [-1000.5, -180.0, -1.0, 0.0, 179.9, 180.0, 540.0, 1234.5])
def test_wrap_signed_range(value):
    wrapped = degrees(value).wrap_signed().as_degrees()
    assert -180 <= wrapped < 180
    assert (wrapped - value) % 360 == pytest.approx(0) or (wrapped - value) % 360 == pytest.approx(360)


@pytest.mark.parametrize("value", [-725.0, -0.5, 0.0, 359.0, 360.0, 1080.25])
def test_wrap_unsigned_range(value):
    wrapped = degrees(value).wrap_unsigned().as_degrees()
    assert 0 <= wrapped < 360
    assert (wrapped - value) % 360 == pytest.approx(0) or (wrapped - value) % 360 == pytest.approx(360)


def test_positive_remainder_rejects_non_positive_divisor():
    with pytest.raises(ValueError):
        positive_remainder(10, 0)
    with pytest.raises(ValueError):
        positive_remainder(10, -5)


def test_positive_remainder_is_non_negative():
    for a in (-17.5, -3.0, 0.0, 4.0, 22.75):
        r = positive_remainder(a, 7.0)
        assert 0 <= r < 7.0


def test_add_sub_round_trip():
    a, b = degrees(30), degrees(100)
    assert (a + b) - b == a


def test_negation():
    a = degrees(42)
    assert -(-a) == a
    assert a + (-a) == Angle.ZERO


def test_multiplication_and_division():
    a = degrees(12)
    assert a * 3 == 3 * a
    assert (a * 4) / 4 == a


def test_ratio_of_angles():
    assert degrees(90) / degrees(45) == 2.0


def test_modulo_stays_below_divisor():
    result = degrees(-370) % degrees(360)
    assert degrees(0) <= result < degrees(360)


def test_ordering():
    assert degrees(10) < degrees(20)
    assert degrees(20) >= degrees(20)
    assert max(degrees(5), degrees(-5)) == degrees(5)


def test_multiply_by_angle_not_supported():
    with pytest.raises(TypeError):
        degrees(2) * degrees(3)