"""
Public namespace of the exact numeric tower.

    >>> import exactmath as xm
    >>> xm.Rational(1, 3) + xm.Rational(1, 6)
    Rational(1, 2)
    >>> str(xm.pow(xm.Integer(2), 10))
    '1024'
"""
import constants
from arithmetic import add, div, eq, ge, gt, le, lt, mod, mul, native, ne, neg, qstr, sub, to_decimal
from errors import DomainError, ExactMathError, InternalInvariantError, InvalidTypeError
from powers import cbrt, hypot, max, min, nth_root, pow, sqrt
from rounding import abs, ceil, floor, round, sign, trunc
from tower import GaussianRational, Integer, Kind, Rational, to_canonical
from transcendental import (
    acos,
    acosh,
    arg,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cos,
    cosh,
    degrees,
    exp,
    expm1,
    log,
    log1p,
    log2,
    log10,
    orthogonal,
    phase,
    polar,
    principal_log,
    radians,
    sin,
    sinh,
    tan,
    tanh,
)

def real(x):
    return to_canonical(x).real

def imag(x):
    return to_canonical(x).imag

def conjugate(x):
    return to_canonical(x).conjugate()

def __getattr__(name: str):
    # E, PI, I, ... are built on first access
    if name in constants.NAMES:
        return constants.constant(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    # Tower
    "GaussianRational",
    "Integer",
    "Kind",
    "Rational",
    "to_canonical",
    # Errors
    "DomainError",
    "ExactMathError",
    "InternalInvariantError",
    "InvalidTypeError",
    # Arithmetic & comparison
    "add",
    "conjugate",
    "div",
    "eq",
    "ge",
    "gt",
    "imag",
    "le",
    "lt",
    "mod",
    "mul",
    "native",
    "ne",
    "neg",
    "real",
    "sub",
    # Display
    "qstr",
    "to_decimal",
    # Rounding
    "abs",
    "ceil",
    "floor",
    "round",
    "sign",
    "trunc",
    # Powers and roots
    "cbrt",
    "hypot",
    "max",
    "min",
    "nth_root",
    "pow",
    "sqrt",
    # Transcendental
    "acos",
    "acosh",
    "arg",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "cos",
    "cosh",
    "degrees",
    "exp",
    "expm1",
    "log",
    "log1p",
    "log2",
    "log10",
    "orthogonal",
    "phase",
    "polar",
    "principal_log",
    "radians",
    "sin",
    "sinh",
    "tan",
    "tanh",
    # Constants
    *constants.NAMES,
]
