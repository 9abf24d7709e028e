"""
Process-wide constants of the tower.

The irrational constants are the exact rationals of their nearest binary64
values (see formats.decompose_float). Each one is built on first use under
a lock and never recomputed.
"""
import math
import threading
from typing import Callable, Dict

from tower import GaussianRational, to_canonical

_SOURCES: Dict[str, Callable[[], GaussianRational]] = {
    "E":       lambda: to_canonical(math.e),
    "LN2":     lambda: to_canonical(math.log(2)),
    "LN10":    lambda: to_canonical(math.log(10)),
    "LOG2E":   lambda: to_canonical(1 / math.log(2)),
    "LOG10E":  lambda: to_canonical(1 / math.log(10)),
    "PI":      lambda: to_canonical(math.pi),
    "SQRT1_2": lambda: to_canonical(math.sqrt(0.5)),
    "SQRT2":   lambda: to_canonical(math.sqrt(2)),
    "I":       lambda: GaussianRational(0, 1, 1, 1),
}

NAMES = tuple(_SOURCES)

_cache: Dict[str, GaussianRational] = {}
_lock = threading.Lock()

def constant(name: str) -> GaussianRational:
    try:
        return _cache[name]
    except KeyError:
        pass
    if name not in _SOURCES:
        raise KeyError(f"unknown constant '{name}'. Known constants {NAMES}")
    with _lock:
        if name not in _cache:
            _cache[name] = _SOURCES[name]()
        return _cache[name]

def __getattr__(name: str) -> GaussianRational:
    if name in _SOURCES:
        return constant(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
