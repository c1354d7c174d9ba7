from lisper import EvaluatorFn, Expression
from lisper.errors import ArgumentCountError
from lisper.evaluation.runtime import Runtime
from lisper.printer import render
from lisper.types.environment import Environment


def print_form(
    tail: list[Expression],
    env: Environment,
    runtime: Runtime,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> Expression:
    """
    (print expr)
    Writes the rendered value and returns the value itself.
    """
    if len(tail) != 1:
        raise ArgumentCountError("print", 2)

    value = evaluate_fn(tail[0], env, runtime, depth + 1)
    runtime.write_line(render(value))
    return value
