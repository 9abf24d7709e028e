"""Rounding, magnitude and sign over the tower.

Reals are handled exactly. Gaussian values are rounded part by part, so
floor(3/2 + 5/2i) is the Gaussian integer 1 + 2i.
"""
from __future__ import annotations
import math
from fractions import Fraction
from typing import Callable

import numpy as np

import arithmetic
import powers
from integers import sign as isign
from tower import GaussianRational, Integer, Number, to_canonical

def _partwise(x: Number, func: Callable[[Fraction], int], fallback: Callable) -> GaussianRational:
    x = to_canonical(x)
    if not x.is_finite:
        re = arithmetic.native(fallback, x.real)
        if x.is_real:
            return re
        im = arithmetic.native(fallback, x.imag)
        return GaussianRational.from_pairs((re.re_num, re.re_den), (im.re_num, im.re_den))
    if x.is_real:
        return Integer(func(x.real_q))
    return GaussianRational(func(x.real_q), 1, func(x.imag_q), 1)

def _round_half_up(q: Fraction) -> int:
    return math.floor(q + Fraction(1, 2))

def ceil(x: Number) -> GaussianRational:
    return _partwise(x, math.ceil, np.ceil)

def floor(x: Number) -> GaussianRational:
    return _partwise(x, math.floor, np.floor)

def trunc(x: Number) -> GaussianRational:
    return _partwise(x, math.trunc, np.trunc)

def round(x: Number) -> GaussianRational:
    """Round half up (towards +inf): round(-5/2) == -2, round(5/2) == 3."""
    return _partwise(x, _round_half_up, np.round)

def abs(x: Number) -> GaussianRational:
    """|x|: exact for reals, hypot(re, im) for Gaussian values."""
    x = to_canonical(x)
    if x.is_real:
        return GaussianRational.from_pairs((isign(x.re_num) * x.re_num, x.re_den))
    if not x.is_finite:
        return arithmetic.native(np.abs, x)
    return powers.hypot(x.real, x.imag)

def sign(x: Number) -> GaussianRational:
    """-1, 0 or 1 for reals (NaN stays NaN); x / |x| for Gaussian values."""
    x = to_canonical(x)
    if x.is_real:
        if x.re_den == 0 and x.re_num == 0:
            return x
        return Integer(isign(x.re_num))
    return arithmetic.div(x, abs(x))
