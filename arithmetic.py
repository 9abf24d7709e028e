from __future__ import annotations
import math
from fractions import Fraction
from typing import Callable, Tuple

import numpy as np

import constants
import rounding
import transcendental
from integers import sign
from tower import GaussianRational, Number, ZERO, to_canonical

Q = Fraction  # rational type alias

DECIMAL_MAX_DIGITS = 100

def qstr(q: Fraction, max_digits: int = DECIMAL_MAX_DIGITS) -> str:
    """
    Exact decimal expansion of a Fraction without float rounding.
    - If it terminates, returns all digits.
    - If it repeats, returns a string with the repeating part in parentheses, e.g. "0.(3)".
    - If neither shows up within max_digits fractional digits, the digits so far are
      followed by "...".
    """
    if q == 0:
        return "0"

    sign_str = '-' if q < 0 else ''
    n = abs(q.numerator)
    d = q.denominator

    int_part = n // d
    rem = n % d
    if rem == 0:
        return f"{sign_str}{int_part}"

    # Long division for fractional part with cycle detection
    digits = []
    seen = {}  # remainder -> index in digits

    while rem != 0 and rem not in seen and len(digits) < max_digits:
        seen[rem] = len(digits)
        rem *= 10
        digits.append(str(rem // d))
        rem = rem % d

    if rem == 0:
        return f"{sign_str}{int_part}.{''.join(digits)}"
    if rem not in seen:
        return f"{sign_str}{int_part}.{''.join(digits)}..."
    start = seen[rem]
    nonrep = ''.join(digits[:start])
    rep = ''.join(digits[start:])
    return f"{sign_str}{int_part}.{nonrep}({rep})"

def to_decimal(x: Number, max_digits: int = DECIMAL_MAX_DIGITS) -> str:
    """Decimal rendering of a tower value, e.g. "0.(3)" or "1.5 + -0.25i"."""
    x = to_canonical(x)
    if not x.is_finite:
        return str(complex(x)) if x.is_gaussian else str(float(x))
    if x.is_real:
        return qstr(x.real_q, max_digits)
    return f"{qstr(x.real_q, max_digits)} + {qstr(x.imag_q, max_digits)}i"

# ==============================================================================
# Native double bridge
# ==============================================================================

def native(func: Callable, *values: GaussianRational) -> GaussianRational:
    """Evaluate func on IEEE doubles and re-coerce the result.

    Real operands travel as numpy.float64, anything complex as complex128.
    numpy keeps IEEE semantics (NaN for out-of-domain, inf at poles) where the
    math module would raise; the decomposer turns those into sentinels.
    """
    if all(v.is_real for v in values):
        args = [np.float64(float(v)) for v in values]
    else:
        args = [np.complex128(complex(v)) for v in values]
    with np.errstate(all="ignore"):
        result = func(*args)
    if np.iscomplexobj(result):
        return to_canonical(complex(result))
    return to_canonical(float(result))

def _operands(x: Number, y: Number) -> Tuple[GaussianRational, GaussianRational]:
    return to_canonical(x), to_canonical(y)

def _finite(*values: GaussianRational) -> bool:
    return all(v.is_finite for v in values)

# ==============================================================================
# Arithmetic
# ==============================================================================

def neg(x: Number) -> GaussianRational:
    x = to_canonical(x)
    return GaussianRational.from_pairs((-x.re_num, x.re_den), (-x.im_num, x.im_den))

def add(x: Number, y: Number) -> GaussianRational:
    x, y = _operands(x, y)
    if not _finite(x, y):
        return native(np.add, x, y)
    if x.is_real and y.is_real:
        return GaussianRational.from_fractions(x.real_q + y.real_q)
    # (a+bi) + (c+di) = (a+c) + (b+d)i
    return GaussianRational.from_fractions(x.real_q + y.real_q, x.imag_q + y.imag_q)

def sub(x: Number, y: Number) -> GaussianRational:
    x, y = _operands(x, y)
    if not _finite(x, y):
        return native(np.subtract, x, y)
    if x.is_real and y.is_real:
        return GaussianRational.from_fractions(x.real_q - y.real_q)
    return GaussianRational.from_fractions(x.real_q - y.real_q, x.imag_q - y.imag_q)

def mul(x: Number, y: Number) -> GaussianRational:
    x, y = _operands(x, y)
    if not _finite(x, y):
        return native(np.multiply, x, y)
    if x.is_real and y.is_real:
        return GaussianRational.from_fractions(x.real_q * y.real_q)
    # (a+bi)(c+di) = (ac-bd) + (ad+bc)i
    a, b, c, d = x.real_q, x.imag_q, y.real_q, y.imag_q
    return GaussianRational.from_fractions(a * c - b * d, a * d + b * c)

def div(x: Number, y: Number) -> GaussianRational:
    x, y = _operands(x, y)
    if not _finite(x, y):
        return native(np.true_divide, x, y)
    if y == ZERO:
        raise ZeroDivisionError(f"division of {x} by zero")
    if x.is_real and y.is_real:
        return GaussianRational.from_fractions(x.real_q / y.real_q)
    # multiply through by the conjugate of the divisor
    a, b, c, d = x.real_q, x.imag_q, y.real_q, y.imag_q
    denom = c * c + d * d
    return GaussianRational.from_fractions((a * c + b * d) / denom, (b * c - a * d) / denom)

def mod(x: Number, y: Number) -> GaussianRational:
    """Remainder.

    Reals: x - y*trunc(x/y) for non-negative operands, sign(x) * (|x| mod |y|)
    otherwise, so the result takes the sign of the dividend.
    Complex: (y / 2πi) * log(exp((2π/y) * i * x)), the principal value the
    complex logarithm gives, not a reduction onto a lattice.
    """
    x, y = _operands(x, y)
    if x.is_real and y.is_real:
        if not _finite(x, y):
            return native(np.fmod, x, y)
        if y == ZERO:
            raise ZeroDivisionError(f"modulo of {x} by zero")
        a, b = x.real_q, y.real_q
        if a >= 0 and b >= 0:
            return GaussianRational.from_fractions(a - b * math.trunc(a / b))
        return mul(sign(x.re_num), mod(abs(a), abs(b)))

    if y == ZERO:
        raise ZeroDivisionError(f"modulo of {x} by zero")
    two_pi_i = mul(mul(2, constants.PI), constants.I)
    winding = transcendental.exp(mul(div(two_pi_i, y), x))
    return mul(div(y, two_pi_i), transcendental.principal_log(winding))

# ==============================================================================
# Comparison
# ==============================================================================

def eq(x: Number, y: Number) -> bool:
    x, y = _operands(x, y)
    return (x.re_num, x.re_den, x.im_num, x.im_den) == (y.re_num, y.re_den, y.im_num, y.im_den)

def ne(x: Number, y: Number) -> bool:
    return not eq(x, y)

def _ordered(x: Number, y: Number):
    """Operands reduced to plain ordered numbers.

    Complex values are ordered by magnitude only, so 1+i and 1-i are neither
    less nor greater than each other.
    """
    x, y = _operands(x, y)
    if not (x.is_real and y.is_real):
        x, y = rounding.abs(x), rounding.abs(y)
    if not _finite(x, y):
        return float(x), float(y)
    return x.real_q, y.real_q  # Fraction compares by cross-multiplication

def lt(x: Number, y: Number) -> bool:
    a, b = _ordered(x, y)
    return a < b

def le(x: Number, y: Number) -> bool:
    a, b = _ordered(x, y)
    return a <= b

def gt(x: Number, y: Number) -> bool:
    a, b = _ordered(x, y)
    return a > b

def ge(x: Number, y: Number) -> bool:
    a, b = _ordered(x, y)
    return a >= b
