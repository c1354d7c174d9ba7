"""Textual rendering of Lisper values, as written by `print` and the REPL."""

from __future__ import annotations

from lisper import Expression
from lisper.types.closure import Closure
from lisper.types.symbol import Name, IfMarker
from lisper.types.unit import UnitType

PLACEHOLDER = "-=-"


def render(expr: Expression) -> str:
    """Render an expression the way the reader would accept it back.

    Closures and the unit value are opaque and render as a placeholder.
    """
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if isinstance(expr, int):
        return str(expr)
    if isinstance(expr, list):
        return "(" + " ".join(render(e) for e in expr) + ")"
    if isinstance(expr, (Name, IfMarker)):
        return str(expr)
    if isinstance(expr, (Closure, UnitType)):
        return PLACEHOLDER
    return str(expr)
