"""
Formula evaluation over the tower.

A formula is read as infix text, converted to reverse Polish notation with
the shunting-yard algorithm, and evaluated on a value stack. Operators,
functions and named constants share one description: name, priority,
arity (operands to the left and right in infix notation), associativity
and the function that computes the result. hypot, max and min take any
number of arguments. Any other name is a variable, bound at evaluation time.

    $ exactcalc "1/3 + 1/6"
    1/2
    $ exactcalc "x^2 - y" x=1/2 y=-3i
    1/4 + 3/1i
    $ exactcalc --decimal "2^-3 * (1 + i)"
    1/8 + 1/8i
    0.125 + 0.125i
"""
import sys
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Callable, Dict, List, Mapping, Optional, Union

import constants
import exactmath
from arithmetic import to_decimal
from errors import ExactMathError
from parsing import ParseError, parse_decimal, parse_number
from tower import GaussianRational, Number, to_canonical

@dataclass(frozen=True)
class Arity:
    left: int
    right: int

    @property
    def total(self) -> int:
        return self.left + self.right

@dataclass(frozen=True)
class Operator:
    name: str
    priority: int
    arity: Arity
    associativity: str    # "L" or "R"
    func: Callable[..., GaussianRational]
    variadic: bool = False    # a call takes as many operands as it is given

    @property
    def is_constant(self) -> bool:
        return self.arity.total == 0

    @property
    def is_prefix(self) -> bool:
        return self.arity.left == 0 and self.arity.right > 0

@dataclass(frozen=True)
class Variable:
    name: str

Token = Union[GaussianRational, Operator, Variable, str]   # str: "(", ")" or ","

FUNCTION_PRIORITY = 5

BINARY_OPERATORS: Dict[str, Operator] = {
    "+":  Operator("+", 1, Arity(1, 1), "L", exactmath.add),
    "-":  Operator("-", 1, Arity(1, 1), "L", exactmath.sub),
    "*":  Operator("*", 2, Arity(1, 1), "L", exactmath.mul),
    "/":  Operator("/", 2, Arity(1, 1), "L", exactmath.div),
    "%":  Operator("%", 2, Arity(1, 1), "L", exactmath.mod),
    "^":  Operator("^", 4, Arity(1, 1), "R", exactmath.pow),
    "**": Operator("**", 4, Arity(1, 1), "R", exactmath.pow),
}

# binds looser than ^ so that -2^2 == -4
NEGATE = Operator("neg", 3, Arity(0, 1), "R", exactmath.neg)

_UNARY_FUNCTIONS = [
    "abs", "ceil", "floor", "round", "trunc", "sign",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
    "exp", "expm1", "log", "log1p", "log10", "log2", "principal_log",
    "sqrt", "cbrt", "degrees", "radians", "arg", "phase",
    "real", "imag", "conjugate",
]
_BINARY_FUNCTIONS = ["pow", "atan2", "mod", "orthogonal"]
_VARIADIC_FUNCTIONS = ["hypot", "max", "min"]

def _build_names() -> Dict[str, Operator]:
    names: Dict[str, Operator] = {}
    for name in _UNARY_FUNCTIONS:
        names[name] = Operator(name, FUNCTION_PRIORITY, Arity(0, 1), "R", getattr(exactmath, name))
    for name in _BINARY_FUNCTIONS:
        names[name] = Operator(name, FUNCTION_PRIORITY, Arity(0, 2), "R", getattr(exactmath, name))
    for name in _VARIADIC_FUNCTIONS:
        names[name] = Operator(name, FUNCTION_PRIORITY, Arity(0, 2), "R", getattr(exactmath, name), variadic=True)
    for name in constants.NAMES:
        names[name.lower()] = Operator(
            name.lower(), FUNCTION_PRIORITY, Arity(0, 0), "L",
            lambda name=name: constants.constant(name),
        )
    return names

NAMED_OPERATORS: Dict[str, Operator] = _build_names()

# ==============================================================================
# Tokenizer
# ==============================================================================

def _unary_position(prev) -> bool:
    if prev is None or isinstance(prev, str):
        return prev != ")"
    return isinstance(prev, Operator) and not prev.is_constant

def _next_char(s: str, i: int) -> str:
    while i < len(s) and s[i].isspace():
        i += 1
    return s[i] if i < len(s) else ""

def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        prev = tokens[-1] if tokens else None
        if c.isspace():
            i += 1
        elif c.isdigit():
            value, i = parse_decimal(s, i)
            if i < n and s[i] == 'i' and not (i + 1 < n and (s[i + 1].isalnum() or s[i + 1] == '_')):
                tokens.append(GaussianRational.from_fractions(Fraction(0), value))
                i += 1
            else:
                tokens.append(GaussianRational.from_fractions(value))
        elif c.isalpha() or c == '_':
            start = i
            while i < n and (s[i].isalnum() or s[i] == '_'):
                i += 1
            name = s[start:i]
            if name.lower() in NAMED_OPERATORS:
                tokens.append(NAMED_OPERATORS[name.lower()])
            elif _next_char(s, i) == "(":
                raise ParseError(f"Unknown function '{name}' at position {start}")
            else:
                tokens.append(Variable(name))
        elif c in "(),":
            tokens.append(c)
            i += 1
        elif s.startswith("**", i):
            tokens.append(BINARY_OPERATORS["**"])
            i += 2
        elif c in BINARY_OPERATORS:
            if c == '-' and _unary_position(prev):
                tokens.append(NEGATE)
            elif c == '+' and _unary_position(prev):
                pass
            else:
                tokens.append(BINARY_OPERATORS[c])
            i += 1
        else:
            raise ParseError(f"Illegal character '{c}' at position {i}")
    return tokens

# ==============================================================================
# Shunting-yard and evaluation
# ==============================================================================

def _is_function(tok) -> bool:
    return isinstance(tok, Operator) and tok.priority == FUNCTION_PRIORITY and not tok.is_constant

def _call(func: Operator, count: int) -> Operator:
    """The operator a call with `count` arguments puts into the RPN sequence."""
    if func.variadic:
        if count < 1:
            raise ParseError(f"'{func.name}' needs at least one argument")
        return replace(func, arity=Arity(0, count))
    if count != func.arity.right:
        raise ParseError(f"'{func.name}' takes {func.arity.right} argument(s), got {count}")
    return func

def to_rpn(tokens: List[Token]) -> List[Token]:
    output: List[Token] = []
    stack: List[Token] = []
    commas: List[int] = []  # one counter per open "("
    prev: Optional[Token] = None
    for tok in tokens:
        if isinstance(tok, (GaussianRational, Variable)):
            output.append(tok)
        elif isinstance(tok, Operator):
            if tok.is_constant:
                output.append(tok)
            elif tok.is_prefix:
                stack.append(tok)
            else:
                while stack and isinstance(stack[-1], Operator):
                    top = stack[-1]
                    if top.priority > tok.priority or (top.priority == tok.priority and tok.associativity == "L"):
                        output.append(stack.pop())
                    else:
                        break
                stack.append(tok)
        elif tok == "(":
            stack.append(tok)
            commas.append(0)
        elif tok in (")", ","):
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ParseError(f"Unbalanced '{tok}'")
            if tok == ",":
                commas[-1] += 1
            else:
                stack.pop()
                count = 0 if isinstance(prev, str) and prev == "(" else commas[-1] + 1
                commas.pop()
                if stack and _is_function(stack[-1]):
                    output.append(_call(stack.pop(), count))
                elif count != 1:
                    raise ParseError("Unexpected ',' or empty '()' outside a function call")
        prev = tok
    while stack:
        tok = stack.pop()
        if tok == "(":
            raise ParseError("Unbalanced '('")
        output.append(tok)
    return output

def evaluate_rpn(tokens: List[Token], bindings: Optional[Mapping[str, Number]] = None) -> GaussianRational:
    bindings = bindings or {}
    stack: List[GaussianRational] = []
    for tok in tokens:
        if isinstance(tok, GaussianRational):
            stack.append(tok)
            continue
        if isinstance(tok, Variable):
            if tok.name not in bindings:
                raise ParseError(f"Unbound variable '{tok.name}'")
            stack.append(to_canonical(bindings[tok.name]))
            continue
        n = tok.arity.total
        if len(stack) < n:
            raise ParseError(f"'{tok.name}' needs {n} operand(s), found {len(stack)}")
        args = stack[len(stack) - n:]
        del stack[len(stack) - n:]
        stack.append(tok.func(*args))
    if len(stack) != 1:
        raise ParseError(f"Formula leaves {len(stack)} values instead of one")
    return stack[0]

def evaluate(s: str, /, **bindings: Number) -> GaussianRational:
    """Evaluate a formula, substituting keyword bindings for its variables.

        >>> str(evaluate("x^2 + 1", x=3))
        '10'
    """
    return evaluate_rpn(to_rpn(tokenize(s)), bindings)

def _usage():
    print(f"Usage: {sys.argv[0]} [--decimal] <formula> [name=value ...]")
    sys.exit(1)

def main():
    args = sys.argv[1:]
    decimal = "--decimal" in args
    args = [a for a in args if a != "--decimal"]
    if not args:
        _usage()

    formula, assignments = args[0], args[1:]
    try:
        bindings = {}
        for assignment in assignments:
            name, sep, text = assignment.partition("=")
            if not sep or not name:
                _usage()
            bindings[name] = parse_number(text)
        value = evaluate(formula, **bindings)
    except (ParseError, ExactMathError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(value)
    if decimal:
        print(to_decimal(value))

if __name__ == "__main__":
    main()
