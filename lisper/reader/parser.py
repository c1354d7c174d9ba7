"""
  Lisper Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives where they exist:

    - integers -> int (64-bit range; larger words read as symbols)
    - true / false -> bool
    - lists -> Python list
    - if -> the If marker
    - operators (+ - * / = != < <= > >= and or not) -> Operator
    - reserved words (def defun lambda print ...) -> Keyword
    - everything else -> Symbol
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lisper import Expression, INT_MIN, INT_MAX
from lisper.errors import LisperSyntaxError
from lisper.types.symbol import Symbol, Operator, Keyword, If


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<word>[^\s();]+)"  # anything else up to a delimiter
    r")",
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

OPERATORS = frozenset(
    ["+", "-", "*", "/", "=", "!=", "<", "<=", ">", ">=", "and", "or", "not"]
)
KEYWORDS = frozenset(["def", "defun", "lambda", "print", "len", "concat"])
BOOLEANS = {"true": True, "false": False}


def classify(word: str) -> str:
    """Lexical class of a bare word."""
    if word == "if":
        return "if"
    if word in OPERATORS:
        return "operator"
    if word in BOOLEANS:
        return "boolean"
    if word in KEYWORDS:
        return "keyword"
    if INTEGER_RE.fullmatch(word) and INT_MIN <= int(word) <= INT_MAX:
        return "integer"
    return "symbol"


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("comment"):
            continue
        if m.group("lparen"):
            yield "lparen", "("
        elif m.group("rparen"):
            yield "rparen", ")"
        else:
            word = m.group("word")
            yield classify(word), word


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Expression:
        """Parse the next expression; None once the input is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _ = self.peek()
                if nxt is None:
                    raise LisperSyntaxError("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise LisperSyntaxError("Unexpected ')'")
        if tok_type == "integer":
            return int(tok_val)
        if tok_type == "boolean":
            return BOOLEANS[tok_val]
        if tok_type == "if":
            return If
        if tok_type == "operator":
            return Operator(tok_val)
        if tok_type == "keyword":
            return Keyword(tok_val)
        if tok_type == "symbol":
            return Symbol(tok_val)

        raise LisperSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[Expression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
