"""Core evaluator for the Lisper interpreter.

Dispatches on the shape of an expression: operator calls go to the built-in
operator table, keyword-headed lists to the special forms, symbol-headed lists
to closure application, and any other list is evaluated element by element.

Recursion is bounded by an explicit depth argument: every recursive call
passes `depth + 1`, and exceeding `runtime.max_depth` raises
RecursionLimitError instead of overflowing the host stack.
"""

from __future__ import annotations

import logging
import sys

from lisper import Expression
from lisper.builtins import OPERATORS, FIXED_ARITY
from lisper.errors import (
    ArgumentCountError,
    RecursionLimitError,
    UndefinedFunctionError,
    UnimplementedError,
)
from lisper.evaluation.runtime import Runtime
from lisper.evaluation.special_forms import SPECIAL_FORMS, if_form
from lisper.types.closure import Closure
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol, Operator, Keyword, IfMarker
from lisper.types.unit import Unit

logger = logging.getLogger(__name__)

# Upper bound of Python frames spent per evaluator level
# (evaluate0 -> helper -> comprehension -> evaluate0).
_FRAMES_PER_LEVEL = 4
_FRAME_MARGIN = 500


def _reserve_host_stack(max_depth: int) -> int:
    """Raise the host recursion limit for this run; returns the previous limit."""
    previous = sys.getrecursionlimit()
    needed = (max_depth + 1) * _FRAMES_PER_LEVEL + _FRAME_MARGIN
    if previous < needed:
        sys.setrecursionlimit(needed)
    return previous


def evaluate(
    expr: Expression, env: Environment, runtime: Runtime | None = None
) -> Expression:
    """
    Evaluate one expression tree in `env`, starting at depth 0.
    """
    if runtime is None:
        runtime = Runtime()
    previous_limit = _reserve_host_stack(runtime.max_depth)
    try:
        return evaluate0(expr, env, runtime, 0)
    except RecursionError:
        logger.warning("host recursion limit hit below max_depth=%d", runtime.max_depth)
        raise RecursionLimitError(runtime.max_depth) from None
    finally:
        # The limit is process-wide; leave it as the caller had it.
        if sys.getrecursionlimit() != previous_limit:
            sys.setrecursionlimit(previous_limit)


def evaluate0(
    expr: Expression, env: Environment, runtime: Runtime, depth: int
) -> Expression:
    """
    Core evaluator: a single recursive step at the given depth.
    """
    if depth > runtime.max_depth:
        logger.debug("recursion limit %d reached", runtime.max_depth)
        raise RecursionLimitError(runtime.max_depth)

    match expr:
        case []:
            return []

        case [Operator() as op, *tail_args]:
            return apply_operator(op, tail_args, env, runtime, depth)

        case [IfMarker(), *tail_args]:
            return if_form(tail_args, env, runtime, evaluate0, depth)

        case [Keyword() as keyword, *tail_args]:
            form = SPECIAL_FORMS.get(keyword)
            if form is None:
                raise UnimplementedError(f"keyword {keyword}")
            return form(tail_args, env, runtime, evaluate0, depth)

        case [Symbol() as name, *tail_args]:
            fn = env.get(name)
            if not isinstance(fn, Closure):
                raise UndefinedFunctionError(name.id)
            return apply_closure(fn, name, tail_args, env, runtime, depth)

        case list():
            # Literal or nested-list head: evaluate each element in turn.
            return [evaluate0(e, env, runtime, depth + 1) for e in expr]

        case bool() | int():
            return expr

        case Symbol():
            value = env.lookup(expr)
            if isinstance(value, Closure):
                raise UnimplementedError(f"closure {expr} used as a value")
            return value

        case Closure():
            return Unit

    raise UnimplementedError(f"{expr!r} outside of call position")


def apply_operator(
    op: Operator,
    tail_args: list[Expression],
    env: Environment,
    runtime: Runtime,
    depth: int,
) -> Expression:
    """Evaluate the arguments left to right, then run the built-in."""
    fn = OPERATORS.get(op.id)
    if fn is None:
        raise UnimplementedError(f"operator {op}")
    arity = FIXED_ARITY.get(op.id)
    if arity is not None and len(tail_args) != arity:
        raise ArgumentCountError(op.id, arity)
    if not tail_args:
        # counted in elements, operator included
        raise ArgumentCountError(op.id, 2)

    args = [evaluate0(a, env, runtime, depth + 1) for a in tail_args]
    return fn(env, args)


def apply_closure(
    fn: Closure,
    name: Symbol,
    tail_args: list[Expression],
    env: Environment,
    runtime: Runtime,
    depth: int,
) -> Expression:
    """Call a closure.

    Arguments are evaluated in the caller's env; the body runs in a new frame
    extending the closure's captured env.
    """
    if len(tail_args) != fn.arity:
        raise ArgumentCountError(name.id, fn.arity)

    args = [evaluate0(a, env, runtime, depth + 1) for a in tail_args]
    frame = fn.extend_env(args)
    logger.debug("call %s depth=%d", name, depth)
    return evaluate0(fn.body, frame, runtime, depth + 1)
