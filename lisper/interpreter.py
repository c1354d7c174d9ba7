from __future__ import annotations

from lisper import Expression
from lisper.reader.parser import lex, TokenStream
from lisper.types.unit import Unit
from lisper.types.environment import Environment
from lisper.evaluation.runtime import Runtime
from lisper.evaluation.evaluator import evaluate


class Interpreter:
    """
    Orchestrates reading and evaluating Lisper code.
    Maintains one root Environment across calls, so def/defun persist.
    """

    def __init__(self, runtime: Runtime | None = None, env: Environment | None = None):
        self.runtime: Runtime = runtime if runtime is not None else Runtime()
        self.env: Environment = env if env is not None else Environment()

    def eval_expr(self, expr: Expression) -> Expression:
        return evaluate(expr, self.env, self.runtime)

    def eval(self, code: str) -> Expression:
        """Evaluate every top-level expression in `code`, in order."""
        stream = TokenStream(lex(code))
        results: list[Expression] = []
        while (expr := stream.parse_expr()) is not None:
            results.append(self.eval_expr(expr))
        if not results:
            return Unit
        if len(results) == 1:
            return results[0]
        return results
