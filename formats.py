from dataclasses import dataclass
from typing import Tuple

import numpy as np

from integers import gcd

@dataclass(frozen=True)
class FloatFormat:
    name: str
    p: int              # precision in bits (incl. implicit 1)
    emin: int           # minimum normal exponent (unbiased)
    emax: int           # maximum finite exponent (unbiased), also the exponent bias
    dtype: type         # numpy scalar type holding a value of this format
    bits_dtype: type    # unsigned integer type of the same width, for bit views

    @property
    def width(self) -> int:
        return np.dtype(self.dtype).itemsize * 8

    @property
    def mantissa_bits(self) -> int:
        return self.p - 1

    @property
    def exponent_bits(self) -> int:
        return self.width - self.p

# IEEE-754 binary formats numpy can hold natively (unbiased exponent bounds):
# - binary16:   p=11,  emin = -14,   emax = 15
# - binary32:   p=24,  emin = -126,  emax = 127
# - binary64:   p=53,  emin = -1022, emax = 1023
BINARY16 = FloatFormat("binary16", 11, -14, 15, np.float16, np.uint16)
BINARY32 = FloatFormat("binary32", 24, -126, 127, np.float32, np.uint32)
BINARY64 = FloatFormat("binary64", 53, -1022, 1023, np.float64, np.uint64)

_REGISTRY = {
    "float16":   BINARY16,
    "fp16":      BINARY16,
    "binary16":  BINARY16,
    "half":      BINARY16,

    "float32":   BINARY32,
    "fp32":      BINARY32,
    "binary32":  BINARY32,
    "single":    BINARY32,

    "float64":   BINARY64,
    "fp64":      BINARY64,
    "binary64":  BINARY64,
    "double":    BINARY64,
}

def get_float_format(name: str) -> FloatFormat:
    key = (name or "float64").lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {_REGISTRY.keys()}")

# ==============================================================================
# Bit-level decomposition
# ==============================================================================

def float_bits(x: float, fmt: FloatFormat = BINARY64) -> Tuple[int, int, int]:
    """Raw IEEE-754 fields of x rounded into `fmt`.

    Returns:
        (sign, biased_exponent, mantissa) where sign is 0 or 1 and the
        mantissa excludes the implicit leading one.
    """
    with np.errstate(over="ignore"):
        bits = int(np.array([x], dtype=fmt.dtype).view(fmt.bits_dtype)[0])
    mbits = fmt.mantissa_bits
    sign = bits >> (fmt.width - 1)
    exponent = (bits >> mbits) & ((1 << fmt.exponent_bits) - 1)
    mantissa = bits & ((1 << mbits) - 1)
    return sign, exponent, mantissa

def decompose_float(x: float, fmt: FloatFormat = BINARY64) -> Tuple[int, int]:
    """Exact (numerator, denominator) of the binary value of x.

    The pair reproduces the bit pattern, not the decimal appearance:
    0.1 becomes 3602879701896397/36028797018963968.

    Non-finite inputs map onto sentinel pairs with a zero denominator:
        NaN -> (0, 0), +inf -> (1, 0), -inf -> (-1, 0)
    Both signed zeros map onto (0, 1).
    """
    with np.errstate(over="ignore"):
        value = fmt.dtype(x)
    if np.isnan(value):
        return 0, 0
    if np.isinf(value):
        return (1, 0) if value > 0 else (-1, 0)
    if value == 0:
        return 0, 1

    sign, exponent, mantissa = float_bits(value, fmt)
    mbits = fmt.mantissa_bits
    if exponent == 0:
        # subnormal: no implicit one, exponent pinned at emin
        significand = mantissa
        e = fmt.emin
    else:
        significand = mantissa | (1 << mbits)
        e = exponent - fmt.emax

    # value = significand / 2^mbits * 2^e
    num, den = significand, 1 << mbits
    if e >= 0:
        num <<= e
    else:
        den <<= -e
    g = gcd(num, den)
    num //= g
    den //= g
    return (-num if sign else num), den
