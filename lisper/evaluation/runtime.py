from __future__ import annotations

import sys
from typing import TextIO

from lisper.config import get_max_recursion_depth


class Runtime:
    """Per-run evaluation options threaded through every evaluator call."""

    __slots__ = ("max_depth", "_output")

    def __init__(self, max_depth: int | None = None, output: TextIO | None = None):
        self.max_depth: int = max_depth if max_depth is not None else get_max_recursion_depth()
        self._output = output

    @property
    def output(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees print output.
        return self._output if self._output is not None else sys.stdout

    def write_line(self, text: str) -> None:
        out = self.output
        out.write(text + "\n")
        out.flush()

    def __repr__(self) -> str:
        return f"Runtime(max_depth={self.max_depth})"
