import doctest

import pytest

import constants
import exactmath as xm


class TestNamespace:
    def test_every_exported_name_resolves(self):
        for name in xm.__all__:
            assert getattr(xm, name) is not None

    def test_constants_through_facade(self):
        assert xm.PI is constants.PI
        assert xm.I == xm.GaussianRational(0, 1, 1, 1)

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            xm.TAU

    def test_docstring_examples(self):
        assert doctest.testmod(xm).failed == 0


class TestPartAccessors:
    def test_real_imag_conjugate(self):
        assert xm.real(3 + 4j) == 3
        assert xm.imag(3 + 4j) == 4
        assert xm.conjugate(3 + 4j) == xm.GaussianRational(3, 1, -4, 1)
        assert xm.imag(xm.Rational(1, 2)) == 0
