import logging

from lisper import EvaluatorFn, Expression
from lisper.errors import ArgumentCountError, IllegalArgumentError
from lisper.evaluation.runtime import Runtime
from lisper.evaluation.special_forms.lambda_form import lambda_form
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol, Keyword
from lisper.types.unit import Unit

logger = logging.getLogger(__name__)

LAMBDA = Keyword("lambda")


def defun_form(
    tail: list[Expression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> Expression:
    """
    (defun name (lambda (params...) body))
    """
    if len(tail) != 2:
        raise ArgumentCountError("defun", 3)

    name, lambda_expr = tail
    if not isinstance(name, Symbol):
        raise IllegalArgumentError("defun", "Function name must be a symbol")
    if not isinstance(lambda_expr, list) or not lambda_expr or lambda_expr[0] != LAMBDA:
        raise IllegalArgumentError("lambda", "Missing lambda")

    closure = lambda_form(lambda_expr[1:], env, runtime, evaluate_fn, depth)
    closure.name = name.id
    env.set(name, closure)
    logger.debug("defun %s/%d", name, closure.arity)
    return Unit
