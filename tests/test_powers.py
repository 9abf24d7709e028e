import logging
import math

import pytest

import constants
from errors import DomainError, InternalInvariantError, InvalidTypeError
from powers import cbrt, hypot, max, min, nth_root, pow, sqrt
from rounding import abs as tower_abs
from tower import GaussianRational, Integer, Rational, to_canonical

I = GaussianRational(0, 1, 1, 1)


class TestExactCases:
    def test_integer_power(self):
        assert Integer(2) ** Integer(10) == Integer(1024)
        assert pow(3, 40) == 3 ** 40

    def test_negative_integer_exponent(self):
        assert pow(2, -2) == Rational(1, 4)
        assert pow(-2, -3) == Rational(-1, 8)

    def test_rational_base(self):
        assert pow(Rational(2, 3), 2) == Rational(4, 9)
        assert pow(Rational(2, 3), -2) == Rational(9, 4)

    @pytest.mark.parametrize("x", [5, Rational(1, 2), -3, GaussianRational(1, 1, 1, 1), 0])
    def test_zero_exponent(self, x):
        assert pow(x, 0) == Integer(1)

    @pytest.mark.parametrize("y", [3, Rational(1, 2), -2, GaussianRational(1, 1, 1, 1)])
    def test_zero_base(self, y):
        assert pow(0, y) == Integer(0)

    def test_i_squared(self):
        assert GaussianRational(0, 1, 1, 1) ** 2 == Integer(-1)

    def test_complex_integer_powers(self):
        z = GaussianRational(1, 1, 1, 1)
        assert pow(z, 2) == GaussianRational(0, 1, 2, 1)
        assert pow(z, 4) == Integer(-4)
        assert pow(z, -1) == GaussianRational(1, 2, -1, 2)


class TestRationalExponents:
    def test_perfect_roots_are_exact(self):
        assert pow(4, Rational(1, 2)) == Integer(2)
        assert pow(8, Rational(2, 3)) == Integer(4)
        assert sqrt(Rational(9, 4)) == Rational(3, 2)
        assert cbrt(27) == Integer(3)
        assert nth_root(16, 4) == Integer(2)

    def test_square_root_of_two(self):
        root = pow(Integer(2), Rational(1, 2))
        assert float(root) == pytest.approx(math.sqrt(2), rel=1e-15)
        assert float(root * root) == pytest.approx(2.0, rel=1e-15)

    def test_negative_base_half_exponent_is_imaginary(self):
        assert pow(-4, Rational(1, 2)) == GaussianRational(0, 1, 2, 1)
        assert sqrt(-1) == I

    def test_negative_base_odd_root(self):
        assert pow(-8, Rational(1, 3)) == Integer(-2)
        assert cbrt(-27) == Integer(-3)

    def test_negative_base_even_root_is_a_domain_error(self):
        with pytest.raises(DomainError):
            pow(-16, Rational(1, 4))
        with pytest.raises(DomainError):
            pow(-16, Rational(-3, 4))

    def test_negative_rational_exponent(self):
        assert pow(4, Rational(-1, 2)) == Rational(1, 2)

    def test_float_exponent_is_decomposed(self):
        assert pow(9, 0.5) == Integer(3)

    @pytest.mark.parametrize("x", [-3, Rational(5, 7), 0.1, Rational(-22, 7), 12345])
    def test_square_then_sqrt_recovers_abs(self, x):
        back = sqrt(pow(x, 2))
        assert float(back) == pytest.approx(float(tower_abs(x)), rel=1e-14)


class TestGeneralExponent:
    def test_i_to_the_i(self):
        assert float(pow(I, I)) == pytest.approx(math.exp(-math.pi / 2), rel=1e-12)

    def test_negative_real_base_with_gaussian_exponent(self):
        result = pow(-1, I)
        assert result.is_real
        assert float(result) == pytest.approx(((-1 + 0j) ** 1j).real, rel=1e-12)

    def test_negative_real_base_with_complex_exponent(self):
        result = pow(-4, GaussianRational(1, 2, 1, 1))
        assert abs(complex(result) - (-4 + 0j) ** (0.5 + 1j)) < 1e-12

    def test_complex_square_root(self):
        root = sqrt(GaussianRational(3, 1, 4, 1))
        assert abs(complex(root) - (2 + 1j)) < 1e-12


class TestNthRoot:
    def test_converges_to_double_resolution(self):
        root = nth_root(2, 2)
        assert float(root) == pytest.approx(math.sqrt(2), rel=1e-15)

    def test_capped_iteration_returns_last_iterate(self, caplog):
        with caplog.at_level(logging.WARNING, logger="powers"):
            assert nth_root(2, 2, max_iterations=1) == Rational(3, 2)
        assert "iteration cap" in caplog.text

    def test_no_iterations_is_an_internal_error(self):
        with pytest.raises(InternalInvariantError):
            nth_root(2, 2, max_iterations=0)

    def test_negative_radicand(self):
        with pytest.raises(DomainError):
            nth_root(-1, 2)

    def test_degree_must_be_positive_integer(self):
        with pytest.raises(InvalidTypeError):
            nth_root(2, 0)
        with pytest.raises(InvalidTypeError):
            nth_root(2, 1.5)

    def test_complex_radicand_rejected(self):
        with pytest.raises(InvalidTypeError):
            nth_root(I, 2)

    def test_zero(self):
        assert nth_root(0, 3) == 0


class TestHypotMaxMin:
    def test_abs_of_one_plus_i(self):
        assert float(tower_abs(GaussianRational(1, 1, 1, 1))) == pytest.approx(1.4142135623730951, rel=1e-15)

    def test_hypot(self):
        assert hypot(3, 4) == Integer(5)
        assert hypot(5) == Integer(5)
        assert hypot() == Integer(0)

    def test_max_min(self):
        values = [1, Rational(5, 2), -3]
        assert max(*values) == Rational(5, 2)
        assert min(*values) == Integer(-3)

    def test_max_of_equal_magnitudes_keeps_first(self):
        a = GaussianRational(1, 1, 1, 1)
        b = GaussianRational(1, 1, -1, 1)
        assert max(a, b) == a
        assert min(b, a) == b

    def test_empty(self):
        with pytest.raises(ValueError):
            max()
        with pytest.raises(ValueError):
            min()


class TestNonFinitePowers:
    def test_infinite_base(self):
        inf = to_canonical(float("inf"))
        assert pow(inf, 2) == inf
        assert pow(2, to_canonical(float("-inf"))) == 0

    def test_pi_squared_uses_the_cached_constant(self):
        assert pow(constants.PI, 2) == constants.PI * constants.PI
