import pytest

from rounding import abs, ceil, floor, round, sign, trunc
from tower import GaussianRational, Integer, Rational, to_canonical

NAN = to_canonical(float("nan"))
INF = to_canonical(float("inf"))


class TestRealRounding:
    @pytest.mark.parametrize("x, f, c, t, r", [
        (Rational(7, 2), 3, 4, 3, 4),
        (Rational(-7, 2), -4, -3, -3, -3),
        (Rational(5, 2), 2, 3, 2, 3),
        (Rational(-5, 2), -3, -2, -2, -2),
        (Rational(7, 3), 2, 3, 2, 2),
        (Integer(4), 4, 4, 4, 4),
    ])
    def test_table(self, x, f, c, t, r):
        assert floor(x) == f
        assert ceil(x) == c
        assert trunc(x) == t
        assert round(x) == r

    def test_results_are_integers(self):
        assert floor(Rational(9, 4)).is_integer


class TestGaussianRounding:
    def test_parts_rounded_separately(self):
        z = GaussianRational(3, 2, -5, 2)
        assert floor(z) == GaussianRational(1, 1, -3, 1)
        assert ceil(z) == GaussianRational(2, 1, -2, 1)
        assert trunc(z) == GaussianRational(1, 1, -2, 1)
        assert round(z) == GaussianRational(2, 1, -2, 1)


class TestAbsAndSign:
    def test_abs_real(self):
        assert abs(Rational(-3, 4)) == Rational(3, 4)
        assert abs(Integer(0)) == 0

    def test_abs_complex(self):
        assert abs(GaussianRational(3, 1, 4, 1)) == Integer(5)
        assert abs(GaussianRational(-5, 13, 12, 13)) == Integer(1)

    def test_sign_real(self):
        assert sign(-5) == -1
        assert sign(0) == 0
        assert sign(Rational(2, 3)) == 1

    def test_sign_complex_is_unit_vector(self):
        assert sign(GaussianRational(3, 1, 4, 1)) == GaussianRational(3, 5, 4, 5)


class TestNonFiniteRounding:
    def test_nan_and_inf_pass_through(self):
        assert floor(INF) == INF
        assert round(NAN) == NAN
        assert abs(to_canonical(float("-inf"))) == INF
        assert sign(NAN) == NAN
        assert sign(INF) == 1
