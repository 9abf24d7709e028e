def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| (Euclid, iterative). gcd(0, 0) == 0."""
    a, b = iabs(a), iabs(b)
    while b:
        a, b = b, a % b
    return a

def sign(a: int) -> int:
    if a > 0:
        return 1
    if a < 0:
        return -1
    return 0

def iabs(a: int) -> int:
    return -a if a < 0 else a
