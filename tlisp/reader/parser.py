"""
  Lisp Reader

Reader from text to Value trees.

    Sexp ::= Atom | '(' List | "'" Sexp
    List ::= ')' | Sexp List

- 'x            -> (quote x)
- "..."         -> String; no escapes, ends at the next literal '"'
- numbers       -> a token starting with a digit, '-' or '.' that reads
                   completely as a float; Long when integral, else Double
- symbols       -> the maximal run of characters other than whitespace
                   and parentheses
- (a . b)       -> three-element list with the Symbol '.' in the middle;
                   there is no dotted-pair syntax

Failures never escape: ``parse`` returns a ParseError sentinel instead.
"""

from __future__ import annotations

import math
import re

from tlisp import SExpression
from tlisp.errors import (
    LispSyntaxError,
    UNEXPECTED_CLOSE_PAREN,
    UNEXPECTED_EOF,
    UNTERMINATED_LIST,
    UNTERMINATED_STRING,
    sentinel,
)
from tlisp.types.value import (
    from_list,
    make_double,
    make_number,
    make_string,
    make_symbol,
)

TOKEN_RE = re.compile(r"[^\s()]+")

NUMBER_RE = re.compile(
    r"""
    -?(?:
        (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)

NUMBER_START = frozenset("0123456789-.")

QUOTE = "quote"


def read_number(token: str) -> SExpression | None:
    """Read ``token`` as a canonical number, or None if it is not one."""
    m = NUMBER_RE.fullmatch(token)
    if m is None:
        return None
    if m.group("hex"):
        try:
            return make_number(float.fromhex(token))
        except OverflowError:
            # Out of float range saturates to infinity, keeping the sign
            return make_double(-math.inf if token.startswith("-") else math.inf)
    return make_number(float(token))


class Reader:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def skip_whitespace(self) -> None:
        n = len(self.source)
        while self.pos < n and self.source[self.pos].isspace():
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_whitespace()
        return self.pos >= len(self.source)

    def read_expr(self) -> SExpression:
        """Read one expression starting at ``pos``.

        Nesting is tracked on an explicit stack, so depth is limited by
        memory rather than the host call stack. Each entry is an open list
        (its start offset and the items read so far) or a pending quote
        (items is None).
        """
        source = self.source
        stack: list[tuple[int, list[SExpression] | None]] = []
        while True:
            self.skip_whitespace()
            if self.pos >= len(source):
                if stack and stack[-1][1] is not None:
                    raise LispSyntaxError(UNTERMINATED_LIST, stack[-1][0])
                raise LispSyntaxError(UNEXPECTED_EOF, self.pos)

            c = source[self.pos]
            if c == "(":
                stack.append((self.pos, []))
                self.pos += 1
                continue
            if c == "'":
                stack.append((self.pos, None))
                self.pos += 1
                continue
            if c == ")":
                if not stack or stack[-1][1] is None:
                    raise LispSyntaxError(UNEXPECTED_CLOSE_PAREN, self.pos)
                self.pos += 1
                expr = from_list(stack.pop()[1])
            else:
                expr = self.read_atom()

            # Close any quotes waiting on this expression
            while stack and stack[-1][1] is None:
                stack.pop()
                expr = from_list([make_symbol(QUOTE), expr])
            if not stack:
                return expr
            stack[-1][1].append(expr)

    def read_atom(self) -> SExpression:
        source = self.source
        c = source[self.pos]

        if c == '"':
            end = source.find('"', self.pos + 1)
            if end == -1:
                raise LispSyntaxError(UNTERMINATED_STRING, self.pos)
            text = source[self.pos + 1 : end]
            self.pos = end + 1
            return make_string(text)

        m = TOKEN_RE.match(source, self.pos)
        token = m.group(0)
        self.pos = m.end()

        if c in NUMBER_START:
            number = read_number(token)
            if number is not None:
                return number
        return make_symbol(token)


def parse(text: str) -> SExpression:
    """Read exactly one expression from ``text``; trailing text is ignored."""
    try:
        return Reader(text).read_expr()
    except LispSyntaxError as ex:
        return sentinel(ex.sentinel)
