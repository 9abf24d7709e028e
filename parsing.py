from fractions import Fraction
from typing import Tuple

from tower import GaussianRational

Q = Fraction

class ParseError(ValueError):
    pass

def skip_spaces(s: str, i: int) -> int:
    while i < len(s) and s[i].isspace():
        i += 1
    return i

def parse_digits(s: str, i: int) -> Tuple[str, int]:
    start = i
    while i < len(s) and s[i].isdigit():
        i += 1
    if i == start:
        raise ParseError(f"Expected digit at position {i}")
    return s[start:i], i

def parse_decimal(s: str, i: int) -> Tuple[Fraction, int]:
    """Unsigned digits or digits.digits, read exactly."""
    start = i
    _, i = parse_digits(s, i)
    if i < len(s) and s[i] == '.':
        i += 1
        if i >= len(s) or not s[i].isdigit():
            raise ParseError(f"Expected digit(s) after '.' at position {i}")
        _, i = parse_digits(s, i)
    return Q(s[start:i]), i

def parse_literal(s: str, i: int) -> Tuple[Fraction, int]:
    """Unsigned decimal, optionally over an integer denominator: 7, 2.5, 3/4."""
    value, i = parse_decimal(s, i)
    if i < len(s) and s[i] == '/':
        den, i = parse_digits(s, i + 1)
        if int(den) == 0:
            raise ParseError(f"Zero denominator at position {i}")
        value /= int(den)
    return value, i

def parse_term(s: str, i: int) -> Tuple[Fraction, bool, int]:
    """Signed real or imaginary term: -3/4, 2.5, 3/4i, -i. Returns (value, is_imaginary, next_index)."""
    negative = False
    if i < len(s) and s[i] == '-':
        negative = True
        i = skip_spaces(s, i + 1)
    if i < len(s) and s[i] == 'i':
        value, imaginary, i = Q(1), True, i + 1
    else:
        value, i = parse_literal(s, i)
        imaginary = i < len(s) and s[i] == 'i'
        if imaginary:
            i += 1
    return (-value if negative else value), imaginary, i

def parse_number(s: str) -> GaussianRational:
    """
    Read the canonical text form back into a tower value:
      "7", "-7/3", "1/2 + -3/4i", "1/2 - 3/4i", "2.5", "3i", "-i"
    """
    i = skip_spaces(s, 0)
    if i == len(s):
        raise ParseError("Empty input.")
    first, first_imag, i = parse_term(s, i)
    i = skip_spaces(s, i)
    if i == len(s):
        return GaussianRational.from_fractions(Q(0), first) if first_imag \
            else GaussianRational.from_fractions(first)

    if first_imag:
        raise ParseError(f"Imaginary part must come last, unexpected content at position {i}")
    if s[i] not in "+-":
        raise ParseError(f"Expected '+' or '-' at position {i}")
    op = s[i]
    i = skip_spaces(s, i + 1)
    second, second_imag, i = parse_term(s, i)
    if not second_imag:
        raise ParseError(f"Expected imaginary term ending in 'i' before position {i}")
    i = skip_spaces(s, i)
    if i != len(s):
        raise ParseError(f"Unexpected trailing content at position {i}")
    if op == '-':
        second = -second
    return GaussianRational.from_fractions(first, second)
