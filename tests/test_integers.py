import pytest

from integers import gcd, iabs, sign


class TestGcd:
    @pytest.mark.parametrize("a, b, expected", [
        (12, 18, 6),
        (-12, 18, 6),
        (12, -18, 6),
        (0, 5, 5),
        (5, 0, 5),
        (0, 0, 0),
        (17, 5, 1),
    ])
    def test_small_values(self, a, b, expected):
        assert gcd(a, b) == expected

    def test_large_operands_do_not_recurse(self):
        a = 3 * 2 ** 4000
        b = 5 * 2 ** 3000
        assert gcd(a, b) == 2 ** 3000

    def test_consecutive_fibonacci_numbers(self):
        # worst case for Euclid: many steps
        x, y = 1, 1
        for _ in range(5000):
            x, y = y, x + y
        assert gcd(x, y) == 1


class TestSignAndAbs:
    def test_sign(self):
        assert sign(-42) == -1
        assert sign(0) == 0
        assert sign(10 ** 100) == 1

    def test_iabs(self):
        assert iabs(-7) == 7
        assert iabs(7) == 7
        assert iabs(0) == 0
