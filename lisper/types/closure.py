"""Closure representation and argument binding for Lisper."""

from __future__ import annotations

from lisper import Expression
from lisper.errors import ArgumentCountError
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol


class Closure:
    """A function value: formal parameters, body, and the defining env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: list[Expression],
        env: Environment,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[Expression] = body
        # Captured by reference, never copied
        self.env: Environment = env
        self.name: str | None = name

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        return "-=-"

    def __repr__(self) -> str:
        # The captured env may contain this closure; never render it.
        params = " ".join(str(f) for f in self.formals)
        label = self.name or "lambda"
        return f"<Closure {label} ({params})>"

    def extend_env(self, args: list[Expression]) -> Environment:
        """
        Bind already-evaluated argument values to the formal parameters in a
        new frame whose parent is the captured environment.
        """
        if len(args) != len(self.formals):
            raise ArgumentCountError(self.name or "lambda", len(self.formals))
        frame = Environment.extend(self.env)
        for formal, value in zip(self.formals, args):
            frame.set(formal, value)
        return frame
