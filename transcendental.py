"""
Transcendental functions over the tower.

Real arguments are evaluated in IEEE double (numpy ufuncs) and the result is
decomposed back into an exact rational, so these values are approximations
of the true result. Out-of-domain reals follow IEEE: asin(2) is the NaN
sentinel, log(0) is the -inf sentinel.

Gaussian arguments go through identities built on exp and i:

    exp(a+bi) = e^a (cos b + i sin b)
    sin z     = (e^{iz} - e^{-iz}) / 2i
    cos z     = (e^{iz} + e^{-iz}) / 2
    sinh z    = (e^z - e^{-z}) / 2i
    cosh z    = (e^z + e^{-z}) / 2i
    log z     = log|z| + i atan2(im, re)
    atan z    = (i/2) (log(1 - iz) - log(1 + iz))

The 2i in sinh/cosh is part of the contract of this library and differs from
the textbook 2; tanh = sinh/cosh is unaffected.
"""
from __future__ import annotations
from typing import Callable, List

import numpy as np

import arithmetic
import constants
import powers
import rounding
from errors import InvalidTypeError
from tower import GaussianRational, Number, ONE, Rational, to_canonical

def _dispatch(x: Number, real_func: Callable, complex_impl: Callable) -> GaussianRational:
    x = to_canonical(x)
    if x.is_real:
        return arithmetic.native(real_func, x)
    return complex_impl(x)

def _two_i() -> GaussianRational:
    return arithmetic.mul(2, constants.I)

def _neg_i() -> GaussianRational:
    return arithmetic.neg(constants.I)

# ==============================================================================
# Exponential and logarithm
# ==============================================================================

def _exp_complex(z: GaussianRational) -> GaussianRational:
    a, b = z.real, z.imag
    rotation = arithmetic.add(cos(b), arithmetic.mul(constants.I, sin(b)))
    return arithmetic.mul(exp(a), rotation)

def exp(x: Number) -> GaussianRational:
    return _dispatch(x, np.exp, _exp_complex)

def expm1(x: Number) -> GaussianRational:
    return _dispatch(x, np.expm1, lambda z: arithmetic.sub(exp(z), ONE))

def principal_log(x: Number) -> GaussianRational:
    """log|x| + i arg(x) whatever the kind of x: principal_log(-3) is log 3 + i pi.

    Intermediates of the complex identities go through this, not log: 1 + iz
    may narrow to a negative real even when z is Gaussian.
    """
    z = to_canonical(x)
    return arithmetic.add(log(rounding.abs(z)), arithmetic.mul(constants.I, arg(z)))

def log(x: Number) -> GaussianRational:
    return _dispatch(x, np.log, principal_log)

def log1p(x: Number) -> GaussianRational:
    return _dispatch(x, np.log1p, lambda z: log(arithmetic.add(ONE, z)))

def log10(x: Number) -> GaussianRational:
    return _dispatch(x, np.log10, lambda z: arithmetic.mul(log(z), constants.LOG10E))

def log2(x: Number) -> GaussianRational:
    return _dispatch(x, np.log2, lambda z: arithmetic.mul(log(z), constants.LOG2E))

# ==============================================================================
# Trigonometric
# ==============================================================================

def _sin_complex(z: GaussianRational) -> GaussianRational:
    iz = arithmetic.mul(constants.I, z)
    return arithmetic.div(arithmetic.sub(exp(iz), exp(arithmetic.neg(iz))), _two_i())

def _cos_complex(z: GaussianRational) -> GaussianRational:
    iz = arithmetic.mul(constants.I, z)
    return arithmetic.div(arithmetic.add(exp(iz), exp(arithmetic.neg(iz))), 2)

def sin(x: Number) -> GaussianRational:
    return _dispatch(x, np.sin, _sin_complex)

def cos(x: Number) -> GaussianRational:
    return _dispatch(x, np.cos, _cos_complex)

def tan(x: Number) -> GaussianRational:
    return _dispatch(x, np.tan, lambda z: arithmetic.div(sin(z), cos(z)))

def _asin_complex(z: GaussianRational) -> GaussianRational:
    # -i log(iz + sqrt(1 - z^2))
    root = powers.sqrt(arithmetic.sub(ONE, powers.pow(z, 2)))
    return arithmetic.mul(_neg_i(), principal_log(arithmetic.add(arithmetic.mul(constants.I, z), root)))

def _acos_complex(z: GaussianRational) -> GaussianRational:
    # -i log(z + i sqrt(1 - z^2))
    root = powers.sqrt(arithmetic.sub(ONE, powers.pow(z, 2)))
    return arithmetic.mul(_neg_i(), principal_log(arithmetic.add(z, arithmetic.mul(constants.I, root))))

def _atan_complex(z: GaussianRational) -> GaussianRational:
    # (i/2) (log(1 - iz) - log(1 + iz)), the same branch cuts as cmath.atan
    iz = arithmetic.mul(constants.I, z)
    diff = arithmetic.sub(principal_log(arithmetic.sub(ONE, iz)), principal_log(arithmetic.add(ONE, iz)))
    return arithmetic.mul(arithmetic.div(constants.I, 2), diff)

def asin(x: Number) -> GaussianRational:
    return _dispatch(x, np.arcsin, _asin_complex)

def acos(x: Number) -> GaussianRational:
    return _dispatch(x, np.arccos, _acos_complex)

def atan(x: Number) -> GaussianRational:
    return _dispatch(x, np.arctan, _atan_complex)

def atan2(y: Number, x: Number) -> GaussianRational:
    y, x = to_canonical(y), to_canonical(x)
    if not (y.is_real and x.is_real):
        raise InvalidTypeError(f"atan2 needs real operands, got {y} and {x}")
    return arithmetic.native(np.arctan2, y, x)

# ==============================================================================
# Hyperbolic
# ==============================================================================

def _sinh_complex(z: GaussianRational) -> GaussianRational:
    return arithmetic.div(arithmetic.sub(exp(z), exp(arithmetic.neg(z))), _two_i())

def _cosh_complex(z: GaussianRational) -> GaussianRational:
    return arithmetic.div(arithmetic.add(exp(z), exp(arithmetic.neg(z))), _two_i())

def sinh(x: Number) -> GaussianRational:
    return _dispatch(x, np.sinh, _sinh_complex)

def cosh(x: Number) -> GaussianRational:
    return _dispatch(x, np.cosh, _cosh_complex)

def tanh(x: Number) -> GaussianRational:
    return _dispatch(x, np.tanh, lambda z: arithmetic.div(sinh(z), cosh(z)))

def _asinh_complex(z: GaussianRational) -> GaussianRational:
    return principal_log(arithmetic.add(z, powers.sqrt(arithmetic.add(powers.pow(z, 2), ONE))))

def _acosh_complex(z: GaussianRational) -> GaussianRational:
    return principal_log(arithmetic.add(z, powers.sqrt(arithmetic.sub(powers.pow(z, 2), ONE))))

def _atanh_complex(z: GaussianRational) -> GaussianRational:
    # (log(1 + z) - log(1 - z)) / 2
    diff = arithmetic.sub(principal_log(arithmetic.add(ONE, z)), principal_log(arithmetic.sub(ONE, z)))
    return arithmetic.mul(Rational(1, 2), diff)

def asinh(x: Number) -> GaussianRational:
    return _dispatch(x, np.arcsinh, _asinh_complex)

def acosh(x: Number) -> GaussianRational:
    return _dispatch(x, np.arccosh, _acosh_complex)

def atanh(x: Number) -> GaussianRational:
    return _dispatch(x, np.arctanh, _atanh_complex)

# ==============================================================================
# Angles and polar form
# ==============================================================================

def degrees(x: Number) -> GaussianRational:
    return arithmetic.mul(x, arithmetic.div(180, constants.PI))

def radians(x: Number) -> GaussianRational:
    return arithmetic.mul(x, arithmetic.div(constants.PI, 180))

def arg(x: Number) -> GaussianRational:
    """Principal argument atan2(im, re), in (-pi, pi]."""
    x = to_canonical(x)
    return arithmetic.native(np.arctan2, x.imag, x.real)

phase = arg

def polar(x: Number) -> List[GaussianRational]:
    return [rounding.abs(x), phase(x)]

def orthogonal(modulus: Number, amplitude: Number) -> GaussianRational:
    """Inverse of polar: modulus*cos(amplitude) + modulus*i*sin(amplitude)."""
    re = arithmetic.mul(modulus, cos(amplitude))
    im = arithmetic.mul(arithmetic.mul(modulus, constants.I), sin(amplitude))
    return arithmetic.add(re, im)
