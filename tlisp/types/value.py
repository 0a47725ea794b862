"""Tagged-union value model for tlisp.

A Value is one of:

- LONG, DOUBLE, SYMBOL, STRING: immutable atoms; ``data`` holds the Python
  int, float or str payload.
- PAIR: a cons cell; ``data`` is the ``(car, cdr)`` tuple.
- CLOSURE: a user function; ``data`` is a tlisp.types.closure.Closure.
- NIL: the single ``Nil`` instance, both the empty list and logical false.

Dispatch is always on ``tag``. Falseness is identity with ``Nil``; a pair or
an atom is always true, whatever its contents.
"""

from __future__ import annotations

import math
import sys
from enum import IntEnum

from tlisp.errors import NOT_A_PAIR

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1


class Tag(IntEnum):
    NIL = 0
    LONG = 1
    DOUBLE = 2
    SYMBOL = 3
    STRING = 4
    PAIR = 5
    CLOSURE = 6


NUMBER_TAGS = frozenset({Tag.LONG, Tag.DOUBLE})


class Value:
    __slots__ = ("tag", "data")

    def __init__(self, tag: Tag, data=None):
        self.tag: Tag = tag
        self.data = data

    def __str__(self) -> str:
        from tlisp.printer import to_string

        return to_string(self)

    def __repr__(self) -> str:
        if self.tag == Tag.NIL:
            return "Nil"
        return f"Value({self.tag.name}, {self.data!r})"

    def __iter__(self):
        """Iterate the cars of a list, stopping at Nil or a dotted tail."""
        current = self
        while current.tag == Tag.PAIR:
            yield current.data[0]
            current = current.data[1]


# Process-wide singletons.
Nil = Value(Tag.NIL)
Truth = Value(Tag.SYMBOL, "t")


# --- Constructors ---
def make_long(value: int) -> Value:
    return Value(Tag.LONG, int(value))


def make_double(value: float) -> Value:
    return Value(Tag.DOUBLE, float(value))


def make_symbol(name: str) -> Value:
    # Intern to keep repeated names cheap to compare
    return Value(Tag.SYMBOL, sys.intern(name))


def make_string(text: str) -> Value:
    return Value(Tag.STRING, text)


def truncate(x: float) -> int | None:
    """Truncate toward zero, or None if the result is not a 64-bit integer."""
    if not math.isfinite(x):
        return None
    t = math.trunc(x)
    if LONG_MIN <= t <= LONG_MAX:
        return t
    return None


def make_number(x: float) -> Value:
    """Canonical numeric value: a Long when ``x`` equals its own truncation."""
    t = truncate(x)
    if t is not None and x == t:
        return make_long(t)
    return make_double(x)


def to_bool(flag: bool) -> Value:
    return Truth if flag else Nil


# --- Structure ---
def cons(a: Value, b: Value) -> Value:
    return Value(Tag.PAIR, (a, b))


def car(v: Value) -> Value:
    match v.tag:
        case Tag.PAIR:
            return v.data[0]
        case Tag.NIL:
            return Nil
        case _:
            return make_symbol(NOT_A_PAIR)


def cdr(v: Value) -> Value:
    match v.tag:
        case Tag.PAIR:
            return v.data[1]
        case Tag.NIL:
            return Nil
        case _:
            return make_symbol(NOT_A_PAIR)


def cadr(v: Value) -> Value:
    return car(cdr(v))


def cddr(v: Value) -> Value:
    return cdr(cdr(v))


def caddr(v: Value) -> Value:
    return car(cdr(cdr(v)))


def cadddr(v: Value) -> Value:
    return car(cdr(cdr(cdr(v))))


def from_list(items, tail: Value = Nil) -> Value:
    """Build a right-nested chain of pairs ending in ``tail``."""
    result = tail
    for item in reversed(list(items)):
        result = cons(item, result)
    return result


def length(v: Value) -> int:
    """Number of pairs in the chain starting at ``v``."""
    n = 0
    while v.tag == Tag.PAIR:
        n += 1
        v = v.data[1]
    return n
