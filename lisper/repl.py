"""Drivers: run a source file once, or read-eval-print lines interactively."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

from lisper import __version__
from lisper.errors import LisperError, LisperSyntaxError
from lisper.evaluation.runtime import Runtime
from lisper.interpreter import Interpreter
from lisper.printer import render
from lisper.reader.parser import read

logger = logging.getLogger(__name__)

BANNER = f"""
==========  Lisper v{__version__}  ==========

A simple LISP-like interpreter.

To exit the REPL, type `exit`.
"""

PROMPT = "> "


def _report(err: LisperError, out: TextIO) -> None:
    prefix = "PARSER ERROR" if isinstance(err, LisperSyntaxError) else "EVAL ERROR"
    out.write(f"{prefix}: {err}\n")


def run_file(path: str | Path, output: TextIO | None = None, max_depth: int | None = None) -> int:
    """Evaluate a whole file in a fresh environment. Returns an exit status."""
    out = output if output is not None else sys.stdout
    try:
        source = Path(path).read_text(encoding="utf-8")
    except OSError as ex:
        out.write(f"READ FILE ERROR: {ex}\n")
        return 1

    interp = Interpreter(Runtime(max_depth=max_depth, output=output))
    try:
        # Parse everything first so a syntax error runs nothing.
        exprs = read(source)
        for expr in exprs:
            interp.eval_expr(expr)
    except LisperError as err:
        logger.debug("run_file %s failed: %r", path, err)
        _report(err, out)
        return 1
    return 0


def run_repl(
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
    max_depth: int | None = None,
) -> int:
    """Interactive loop; definitions persist between lines."""
    out = output if output is not None else sys.stdout
    out.write(BANNER + "\n")
    interp = Interpreter(Runtime(max_depth=max_depth, output=output))

    while True:
        try:
            line = input_fn(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            return 0
        if line == "exit":
            return 0
        if not line:
            continue
        try:
            for expr in read(line):
                out.write(render(interp.eval_expr(expr)) + "\n")
        except LisperError as err:
            _report(err, out)
