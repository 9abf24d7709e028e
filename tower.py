"""
Canonical numeric tower: Integer ⊂ Rational ⊂ GaussianRational.

There is one value type, GaussianRational, holding four integers
(re_num, re_den, im_num, im_den) for re_num/re_den + (im_num/im_den)·i.
Integer and Rational are constructor functions narrowing the same type;
the tightest category a value belongs to is reported by `kind`.

Invariants, enforced at construction:
  - denominators are positive, the sign lives in the numerator
  - each part is reduced: gcd(|num|, den) == 1, zero is 0/1
The float decomposer is the only source of zero denominators: NaN -> 0/0,
+inf -> 1/0, -inf -> -1/0. Those sentinels are built through `from_pairs`
and are terminal for the arithmetic engine.
"""
from __future__ import annotations

import numbers
import operator
import sys
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Tuple, Union

from errors import InvalidTypeError
from formats import decompose_float
from integers import gcd, sign

class Kind(Enum):
    INTEGER = "integer"
    RATIONAL = "rational"
    GAUSSIAN = "gaussian"

def _reduce(num: int, den: int, allow_sentinel: bool = False) -> Tuple[int, int]:
    num = operator.index(num)
    den = operator.index(den)
    if den == 0:
        if not allow_sentinel:
            raise ZeroDivisionError(f"zero denominator in {num}/{den}")
        return sign(num), 0
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    return num // g, den // g

def _to_float(num: int, den: int) -> float:
    if den == 0:
        if num == 0:
            return float("nan")
        return float("inf") if num > 0 else float("-inf")
    try:
        return num / den  # correctly rounded for int operands
    except OverflowError:
        return float("inf") if num > 0 else float("-inf")

def _part_hash(num: int, den: int) -> int:
    if den == 0:
        if num == 0:
            return 0  # NaN
        return sys.hash_info.inf if num > 0 else -sys.hash_info.inf
    return hash(Fraction(num, den))

def _engine():
    # deferred: the engine modules import this one
    import exactmath
    return exactmath

@dataclass(frozen=True, eq=False)
class GaussianRational:
    re_num: int
    re_den: int = 1
    im_num: int = 0
    im_den: int = 1

    def __post_init__(self):
        rn, rd = _reduce(self.re_num, self.re_den)
        in_, id_ = _reduce(self.im_num, self.im_den)
        object.__setattr__(self, "re_num", rn)
        object.__setattr__(self, "re_den", rd)
        object.__setattr__(self, "im_num", in_)
        object.__setattr__(self, "im_den", id_)

    @classmethod
    def from_pairs(cls, re: Tuple[int, int], im: Tuple[int, int] = (0, 1)) -> GaussianRational:
        """Build from (numerator, denominator) pairs, keeping non-finite sentinels."""
        self = object.__new__(cls)
        rn, rd = _reduce(*re, allow_sentinel=True)
        in_, id_ = _reduce(*im, allow_sentinel=True)
        object.__setattr__(self, "re_num", rn)
        object.__setattr__(self, "re_den", rd)
        object.__setattr__(self, "im_num", in_)
        object.__setattr__(self, "im_den", id_)
        return self

    @classmethod
    def from_fractions(cls, re: Fraction, im: Fraction = Fraction(0)) -> GaussianRational:
        return cls(re.numerator, re.denominator, im.numerator, im.denominator)

    # ==================================================================
    # Shape
    # ==================================================================

    @property
    def kind(self) -> Kind:
        if self.im_num != 0 or self.im_den != 1:
            return Kind.GAUSSIAN
        if self.re_den == 1:
            return Kind.INTEGER
        return Kind.RATIONAL

    @property
    def is_integer(self) -> bool:
        return self.kind is Kind.INTEGER

    @property
    def is_real(self) -> bool:
        return self.kind is not Kind.GAUSSIAN

    @property
    def is_gaussian(self) -> bool:
        return self.kind is Kind.GAUSSIAN

    @property
    def is_finite(self) -> bool:
        return self.re_den != 0 and self.im_den != 0

    # ==================================================================
    # Accessors
    # ==================================================================

    @property
    def real(self) -> GaussianRational:
        return GaussianRational.from_pairs((self.re_num, self.re_den))

    @property
    def imag(self) -> GaussianRational:
        return GaussianRational.from_pairs((self.im_num, self.im_den))

    def conjugate(self) -> GaussianRational:
        return GaussianRational.from_pairs((self.re_num, self.re_den), (-self.im_num, self.im_den))

    @property
    def numerator(self) -> int:
        self._require_real("numerator")
        return self.re_num

    @property
    def denominator(self) -> int:
        self._require_real("denominator")
        return self.re_den

    @property
    def real_q(self) -> Fraction:
        return Fraction(self.re_num, self.re_den)

    @property
    def imag_q(self) -> Fraction:
        return Fraction(self.im_num, self.im_den)

    def _require_real(self, what: str) -> None:
        if not self.is_real:
            raise InvalidTypeError(f"{what} is only defined for real values, got {self}")

    # ==================================================================
    # Interop
    # ==================================================================

    def __float__(self) -> float:
        if not self.is_real:
            raise TypeError(f"can't convert complex value {self} to float")
        return _to_float(self.re_num, self.re_den)

    def __complex__(self) -> complex:
        return complex(_to_float(self.re_num, self.re_den), _to_float(self.im_num, self.im_den))

    def __int__(self) -> int:
        if not self.is_real:
            raise TypeError(f"can't convert complex value {self} to int")
        if not self.is_finite:
            return int(float(self))  # ValueError for NaN, OverflowError for inf
        if self.re_num >= 0:
            return self.re_num // self.re_den
        return -(-self.re_num // self.re_den)

    def __bool__(self) -> bool:
        return (self.re_num, self.re_den, self.im_num, self.im_den) != (0, 1, 0, 1)

    def __str__(self) -> str:
        kind = self.kind
        if kind is Kind.INTEGER:
            return f"{self.re_num}"
        if kind is Kind.RATIONAL:
            return f"{self.re_num}/{self.re_den}"
        return f"{self.re_num}/{self.re_den} + {self.im_num}/{self.im_den}i"

    def __repr__(self) -> str:
        if not self.is_finite:
            return (f"GaussianRational.from_pairs(({self.re_num}, {self.re_den}), "
                    f"({self.im_num}, {self.im_den}))")
        kind = self.kind
        if kind is Kind.INTEGER:
            return f"Integer({self.re_num})"
        if kind is Kind.RATIONAL:
            return f"Rational({self.re_num}, {self.re_den})"
        return f"GaussianRational({self.re_num}, {self.re_den}, {self.im_num}, {self.im_den})"

    # ==================================================================
    # Equality and hashing
    # ==================================================================

    def __eq__(self, other) -> bool:
        try:
            other = to_canonical(other)
        except InvalidTypeError:
            return NotImplemented
        return (self.re_num == other.re_num and self.re_den == other.re_den
                and self.im_num == other.im_num and self.im_den == other.im_den)

    def __hash__(self) -> int:
        # same scheme as int, Fraction, float and complex, which compare equal
        re = _part_hash(self.re_num, self.re_den)
        if self.is_real:
            return re
        width = sys.hash_info.width
        h = (re + sys.hash_info.imag * _part_hash(self.im_num, self.im_den)) % (1 << width)
        if h >= 1 << (width - 1):
            h -= 1 << width
        return -2 if h == -1 else h

    # ==================================================================
    # Operators, delegated to the engine
    # ==================================================================

    def _binary(self, name: str, other, reflected: bool = False):
        try:
            other = to_canonical(other)
        except InvalidTypeError:
            return NotImplemented
        func = getattr(_engine(), name)
        return func(other, self) if reflected else func(self, other)

    def __add__(self, other):
        return self._binary("add", other)

    def __radd__(self, other):
        return self._binary("add", other, reflected=True)

    def __sub__(self, other):
        return self._binary("sub", other)

    def __rsub__(self, other):
        return self._binary("sub", other, reflected=True)

    def __mul__(self, other):
        return self._binary("mul", other)

    def __rmul__(self, other):
        return self._binary("mul", other, reflected=True)

    def __truediv__(self, other):
        return self._binary("div", other)

    def __rtruediv__(self, other):
        return self._binary("div", other, reflected=True)

    def __mod__(self, other):
        return self._binary("mod", other)

    def __rmod__(self, other):
        return self._binary("mod", other, reflected=True)

    def __pow__(self, other):
        return self._binary("pow", other)

    def __rpow__(self, other):
        return self._binary("pow", other, reflected=True)

    def __lt__(self, other):
        return self._binary("lt", other)

    def __le__(self, other):
        return self._binary("le", other)

    def __gt__(self, other):
        return self._binary("gt", other)

    def __ge__(self, other):
        return self._binary("ge", other)

    def __neg__(self) -> GaussianRational:
        return _engine().neg(self)

    def __pos__(self) -> GaussianRational:
        return self

    def __abs__(self) -> GaussianRational:
        return _engine().abs(self)

# ==============================================================================
# Constructors and coercion
# ==============================================================================

Number = Union[int, float, complex, Fraction, GaussianRational]

def Integer(n: int) -> GaussianRational:
    if not isinstance(n, numbers.Integral):
        raise InvalidTypeError(f"Integer() needs an integer, got {type(n).__name__}")
    return GaussianRational(int(n))

def Rational(numerator: int, denominator: int = 1) -> GaussianRational:
    if not isinstance(numerator, numbers.Integral) or not isinstance(denominator, numbers.Integral):
        raise InvalidTypeError(
            f"Rational() needs integers, got {type(numerator).__name__}/{type(denominator).__name__}"
        )
    return GaussianRational(int(numerator), int(denominator))

def to_canonical(value: Number) -> GaussianRational:
    """Narrow a raw value to the tower member that represents it exactly.

    - int (and bool, numpy integers)  -> Integer
    - Fraction                        -> Rational (Integer when den == 1)
    - float                           -> float decomposer -> Rational
    - complex                         -> both parts decomposed
    - GaussianRational                -> itself (already canonical)
    """
    if isinstance(value, GaussianRational):
        return value
    if isinstance(value, numbers.Integral):
        return GaussianRational(int(value))
    if isinstance(value, numbers.Rational):
        return GaussianRational(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        return GaussianRational.from_pairs(decompose_float(float(value)))
    if isinstance(value, numbers.Complex):
        value = complex(value)
        return GaussianRational.from_pairs(decompose_float(value.real), decompose_float(value.imag))
    raise InvalidTypeError(f"cannot convert {type(value).__name__} to a tower value: {value!r}")

ZERO = GaussianRational(0)
ONE = GaussianRational(1)
