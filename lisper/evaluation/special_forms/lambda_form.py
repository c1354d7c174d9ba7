from lisper import EvaluatorFn, Expression
from lisper.errors import ArgumentCountError, IllegalArgumentError
from lisper.evaluation.runtime import Runtime
from lisper.types.closure import Closure
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol


def lambda_form(
    tail: list[Expression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> Expression:
    """
    (lambda (params...) body)
    Captures the current frame itself, not a copy of it.
    """
    if len(tail) != 2:
        raise ArgumentCountError("lambda", 3)

    params, body = tail
    if not isinstance(params, list):
        raise IllegalArgumentError("lambda", "Function arguments must be a list of symbols")
    for p in params:
        if not isinstance(p, Symbol):
            raise IllegalArgumentError("lambda", "Function arguments must be symbols")
    if not isinstance(body, list):
        raise IllegalArgumentError("lambda", "Function body must be an evaluable list")

    return Closure(list(params), body, env)
