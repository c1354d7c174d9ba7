import logging

from lisper import EvaluatorFn, Expression
from lisper.errors import ArgumentCountError, IllegalArgumentError
from lisper.evaluation.runtime import Runtime
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol
from lisper.types.unit import Unit

logger = logging.getLogger(__name__)


def def_form(
    tail: list[Expression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> Expression:
    """
    (def name value)
    The value is evaluated eagerly and bound in the current frame.
    """
    if len(tail) != 2:
        raise ArgumentCountError("def", 3)

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise IllegalArgumentError("def", "Variable name must be a symbol")

    value = evaluate_fn(val_expr, env, runtime, depth + 1)
    env.set(name, value)
    logger.debug("def %s", name)
    return Unit
