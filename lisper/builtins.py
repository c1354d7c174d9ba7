from __future__ import annotations
from typing import Any, Callable
from lisper import INT_MIN, INT_MAX
from lisper.types import Environment
from lisper.errors import ArgumentCountError, IllegalArgumentError

# Operators receive already-evaluated arguments; the evaluator guarantees at
# least one.
OperatorFn = Callable[[Environment, list[Any]], Any]


def _integers(name: str, args: list[Any]) -> list[int]:
    for a in args:
        # bool is an int subclass; it is not a number here
        if type(a) is not int:
            raise IllegalArgumentError(name, "All arguments must be numbers")
    return args


def _booleans(name: str, args: list[Any]) -> list[bool]:
    for a in args:
        if not isinstance(a, bool):
            raise IllegalArgumentError(name, "All arguments must be booleans")
    return args


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: Any, b: Any) -> bool:
    # Type-strict, so 1 and true are different values
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(env: Environment, args: list[Any]) -> bool:
    return all(is_equal(a, b) for a, b in zip(args, args[1:]))


def not_equals(env: Environment, args: list[Any]) -> bool:
    if not args:
        return False
    first = args[0]
    return not all(is_equal(first, other) for other in args)


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(name: str, value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise IllegalArgumentError(name, "Integer overflow")
    return value


def add(env: Environment, args: list[Any]) -> int:
    result = 0
    for x in _integers("+", args):
        result = _checked("+", result + x)
    return result


def sub(env: Environment, args: list[Any]) -> int:
    first, *rest = _integers("-", args)
    result = first
    for x in rest:
        result = _checked("-", result - x)
    return result


def mul(env: Environment, args: list[Any]) -> int:
    result = 1
    for x in _integers("*", args):
        result = _checked("*", result * x)
    return result


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    if b == 0:
        raise IllegalArgumentError("/", "Division by zero")
    q = abs(a) // abs(b)
    # INT_MIN / -1 is the one quotient that leaves the range
    return _checked("/", q if (a < 0) == (b < 0) else -q)


def div(env: Environment, args: list[Any]) -> int:
    first, *rest = _integers("/", args)
    result = first
    for x in rest:
        result = truncating_div(result, x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, args: list[Any], predicate: Callable[[int, int], bool]) -> bool:
    values = _integers(name, args)
    return all(predicate(a, b) for a, b in zip(values, values[1:]))


def lt(env: Environment, args: list[Any]) -> bool:
    return _compare("<", args, lambda a, b: a < b)


def lte(env: Environment, args: list[Any]) -> bool:
    return _compare("<=", args, lambda a, b: a <= b)


def gt(env: Environment, args: list[Any]) -> bool:
    return _compare(">", args, lambda a, b: a > b)


def gte(env: Environment, args: list[Any]) -> bool:
    return _compare(">=", args, lambda a, b: a >= b)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: list[Any]) -> bool:
    result = True
    for x in _booleans("and", args):
        result = result and x
    return result


def logical_or(env: Environment, args: list[Any]) -> bool:
    result = False
    for x in _booleans("or", args):
        result = result or x
    return result


def logical_not(env: Environment, args: list[Any]) -> bool:
    if len(args) != 1:
        raise ArgumentCountError("not", 1)
    if not isinstance(args[0], bool):
        raise IllegalArgumentError("not", "Argument must be a boolean")
    return not args[0]


# -------------------------------
# Registration
# -------------------------------
OPERATORS: dict[str, OperatorFn] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '!=': not_equals,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    'and': logical_and,
    'or': logical_or,
    'not': logical_not,
}

# Operators taking an exact number of arguments; checked before evaluation.
FIXED_ARITY: dict[str, int] = {
    'not': 1,
}
