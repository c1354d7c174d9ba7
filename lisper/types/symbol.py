from __future__ import annotations
import sys


class Name:
    """Identifier base; subclasses differ only in lexical class."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self):
        return f"{type(self).__name__}({self.id!r})"

    def __str__(self):
        return self.id


class Symbol(Name):
    """User-level name: variables, functions and parameters."""
    __slots__ = ()


class Operator(Name):
    """Built-in operator such as + or <=, resolved by the operator table."""
    __slots__ = ()


class Keyword(Name):
    """Reserved word introducing a special form (def, defun, lambda, print)."""
    __slots__ = ()


class IfMarker:
    """Head of a conditional; always the first element of a 4-element list."""

    __slots__ = ()

    def __repr__(self): return "If"
    def __str__(self): return "if"

    def __eq__(self, other):
        return isinstance(other, IfMarker)

    def __hash__(self):
        return hash("if")


If = IfMarker()
