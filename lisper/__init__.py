# Core type aliases for Lisper's data model.
# Code and runtime values share one representation: ints, bools and Python lists
# stand for themselves, and the remaining variants (Symbol, Operator, Keyword,
# the If marker, Closure, Unit) live in lisper.types.
#
# Naming guidance:
# - Expression: Use in reader/evaluator code for any tree node or value.
# - EvaluatorFn: the recursive evaluator as passed into special forms.

from typing import Any, Callable

__version__ = "0.1.0"

Expression = Any

# Signature: (expr, env, runtime, depth) -> Expression
EvaluatorFn = Callable[..., Expression]

# Integers are 64-bit signed values.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
