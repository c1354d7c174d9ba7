from lisper import EvaluatorFn, Expression
from lisper.errors import ArgumentCountError, IllegalArgumentError
from lisper.evaluation.runtime import Runtime
from lisper.types.environment import Environment


def if_form(
    tail: list[Expression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> Expression:
    """
    (if condition then else)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise ArgumentCountError("if", 4)

    cond = evaluate_fn(tail[0], env, runtime, depth + 1)
    if not isinstance(cond, bool):
        raise IllegalArgumentError("if", "Condition must evaluate to bool")

    branch = tail[1] if cond else tail[2]
    return evaluate_fn(branch, env, runtime, depth + 1)
