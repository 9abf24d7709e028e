"""
Exponentiation and roots over the tower.

pow(x, y) walks an ordered case table; the first matching case wins:

   1. y == 0                                   -> 1
   2. x == 0                                   -> 0
   3. x, y integers, y > 0                     -> x ** y (exact)
   4. x, y integers, y < 0                     -> 1 / pow(x, -y)
   5. x rational, y integer                    -> num**y / den**y (reciprocal when y < 0)
   6. x Gaussian, y positive integer           -> x * x * ... * x (y factors)
   7. x Gaussian, y negative integer           -> 1 / (case 6)
   8. x > 0 real, y > 0 rational               -> nth_root(x ** y.num, y.den)
   9. x < 0 real, y > 0 rational, y.den == 2   -> nth_root(|x| ** y.num, 2) * i
  10. x < 0 real, y > 0 rational, y.den odd    -> -nth_root(|x| ** y.num, y.den)
  11. x < 0 real, y > 0 rational, y.den even   -> DomainError
  12. x real, y < 0 rational                   -> 1 / pow(x, -y)
  13. anything else                            -> exp(y * log(x)) (principal value)

nth_root is a Newton iteration whose fractional part is snapped back onto
binary64 after every step, which keeps numerators and denominators from
growing without bound. Results for irrational roots are therefore rational
approximations at double resolution.
"""
from __future__ import annotations
import logging
import math
from fractions import Fraction

import numpy as np

import arithmetic
import constants
import transcendental
from errors import DomainError, InternalInvariantError, InvalidTypeError
from formats import decompose_float
from tower import GaussianRational, Integer, Kind, Number, ONE, Rational, ZERO, to_canonical

LOG = logging.getLogger(__name__)

NEWTON_MAX_ITERATIONS = 65536

def _reapproximate(q: Fraction) -> Fraction:
    """Keep the integer part of q exact, snap the fractional remainder to binary64."""
    whole = math.trunc(q)
    num, den = decompose_float(float(q - whole))
    return whole + Fraction(num, den)

def nth_root(m: Number, n: int, max_iterations: int = NEWTON_MAX_ITERATIONS) -> GaussianRational:
    """
    n-th root of a non-negative real m by Newton's method on f(t) = t^n - m:

      x_0     = 1
      x_{s+1} = x_s - f(x_s) / f'(x_s), fractional part re-approximated

    Stops as soon as an iterate equals the previous one exactly, or after
    max_iterations steps, and returns the last iterate.
    """
    m = to_canonical(m)
    if not m.is_real:
        raise InvalidTypeError(f"nth_root needs a real radicand, got {m}")
    if not isinstance(n, int) or n < 1:
        raise InvalidTypeError(f"nth_root needs a positive integer degree, got {n!r}")
    if not m.is_finite:
        return arithmetic.native(lambda v: np.power(v, 1.0 / n), m)
    target = m.real_q
    if target < 0:
        raise DomainError(f"nth_root of negative radicand {m}")
    if target == 0:
        return ZERO

    x = Fraction(1)
    last = None
    converged = False
    steps = 0
    for steps in range(1, max_iterations + 1):
        nxt = _reapproximate(x - (x ** n - target) / (n * x ** (n - 1)))
        converged = nxt == x or nxt == 0  # 0: root below binary64 resolution
        x = last = nxt
        if converged:
            break

    if last is None:
        raise InternalInvariantError(f"nth_root({m}, {n}) produced no iterate")
    if converged:
        LOG.debug("nth_root(%s, %d) converged after %d iterations", m, n, steps)
    else:
        LOG.warning("nth_root(%s, %d) stopped at the %d iteration cap", m, n, max_iterations)
    return GaussianRational.from_fractions(last)

def pow(x: Number, y: Number) -> GaussianRational:
    x, y = to_canonical(x), to_canonical(y)
    if not (x.is_finite and y.is_finite):
        return arithmetic.native(np.power, x, y)

    if y == ZERO:
        return ONE
    if x == ZERO:
        return ZERO

    xk, yk = x.kind, y.kind
    if yk is Kind.INTEGER:
        e = y.re_num
        if e < 0:
            return arithmetic.div(ONE, pow(x, -e))
        if xk is Kind.INTEGER:
            return Integer(x.re_num ** e)
        if xk is Kind.RATIONAL:
            return Rational(x.re_num ** e, x.re_den ** e)
        # no square-and-multiply: e factors, one at a time
        result = x
        for _ in range(e - 1):
            result = arithmetic.mul(result, x)
        return result

    if xk is not Kind.GAUSSIAN and yk is Kind.RATIONAL:
        if y.re_num < 0:
            return arithmetic.div(ONE, pow(x, arithmetic.neg(y)))
        if x.re_num > 0:
            return nth_root(pow(x, y.re_num), y.re_den)
        root = nth_root(pow(arithmetic.neg(x), y.re_num), y.re_den)
        if y.re_den == 2:
            return arithmetic.mul(root, constants.I)
        if y.re_den % 2 == 1:
            return arithmetic.neg(root)
        raise DomainError(f"pow({x}, {y}): negative base with even root degree {y.re_den}")

    return transcendental.exp(arithmetic.mul(y, transcendental.principal_log(x)))

def sqrt(x: Number) -> GaussianRational:
    return pow(x, Rational(1, 2))

def cbrt(x: Number) -> GaussianRational:
    return pow(x, Rational(1, 3))

def hypot(*values: Number) -> GaussianRational:
    """sqrt(v1**2 + v2**2 + ...); squares are plain powers, not |v|**2."""
    total = ZERO
    for v in values:
        total = arithmetic.add(total, pow(v, 2))
    return sqrt(total)

def max(*values: Number) -> GaussianRational:
    if not values:
        raise ValueError("max() arg is an empty sequence")
    best = to_canonical(values[0])
    for v in values[1:]:
        v = to_canonical(v)
        if arithmetic.gt(v, best):
            best = v
    return best

def min(*values: Number) -> GaussianRational:
    if not values:
        raise ValueError("min() arg is an empty sequence")
    best = to_canonical(values[0])
    for v in values[1:]:
        v = to_canonical(v)
        if arithmetic.lt(v, best):
            best = v
    return best
