class ExactMathError(Exception):
    """Base class of every error raised by the numeric tower."""
    pass

class InvalidTypeError(ExactMathError, TypeError):
    """Operands whose shape matches no supported case."""
    pass

class DomainError(ExactMathError, ValueError):
    """An operation with no value in the tower (e.g. (-x) ** (1/4))."""
    pass

class InternalInvariantError(ExactMathError, AssertionError):
    """A broken internal invariant; signals a bug, not bad input."""
    pass
