import math

import pytest

from coregeometry.internal.angles import (
    DEGREE,
    TAU,
    acos,
    asin,
    atan,
    cos,
    degree,
    normalized,
    radian,
    sin,
    tan,
)


class TestConversion:

    @pytest.mark.parametrize("value", [0, 1, 45, 90, 180, -30, 720.5])
    def test_degree_radian_round_trip(self, value):
        assert degree(radian(value)) == pytest.approx(value)

    def test_known_values(self):
        assert radian(180) == pytest.approx(math.pi)
        assert degree(math.pi / 2) == pytest.approx(90)

    def test_degree_unit_matches_radian(self):
        assert 90 * DEGREE == radian(90)
        assert 90.0 * DEGREE == radian(90.0)
        assert 45 * DEGREE == radian(45)


class TestTrigonometry:

    def test_sin_cos(self):
        assert sin(math.pi / 2) == pytest.approx(1)
        assert cos(math.pi) == pytest.approx(-1)
        assert asin(1) == pytest.approx(math.pi / 2)
        assert acos(-1) == pytest.approx(math.pi)

    def test_tan_and_atan(self):
        assert tan(math.pi / 4) == pytest.approx(1)
        assert atan(1) == pytest.approx(math.pi / 4)
        assert atan(tan(0.3)) == pytest.approx(0.3)

    def test_results_are_plain_floats(self):
        assert type(sin(1)) is float
        assert type(atan(1)) is float


class TestNormalized:

    def test_three_pi_is_pi(self):
        assert normalized(3 * math.pi) == pytest.approx(math.pi)

    def test_negative_angle(self):
        assert normalized(-math.pi / 2) == pytest.approx(3 * math.pi / 2)

    @pytest.mark.parametrize("angle", [-100.0, -TAU, -1.0, 0.0, 1.0, TAU, 12.5, 1e4])
    def test_range(self, angle):
        result = normalized(angle)
        assert 0 <= result < TAU

    @pytest.mark.parametrize("k", [-3, -1, 1, 2, 5])
    def test_periodic(self, k):
        assert normalized(1.0 + k * TAU) == pytest.approx(normalized(1.0), abs=1e-9)
