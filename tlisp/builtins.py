"""Primitive library for the tlisp runtime.

Arithmetic, comparison, equality, predicates and logical negation. Every
primitive takes already-evaluated Values and returns a Value; failures come
back as sentinel symbols (see tlisp.errors), never as exceptions.

Arithmetic is done in double precision and re-canonicalized, so an integral
result is a Long whatever the operand types were: (add 2.5 2.5) is 5.
"""
from __future__ import annotations

from typing import Optional

from tlisp import LispValue
from tlisp.errors import (
    DIVIDE_BY_ZERO,
    LIST_EQUALITY,
    NOT_A_NUMBER,
    TYPE_MISMATCH,
    sentinel,
)
from tlisp.types.value import (
    NUMBER_TAGS,
    Nil,
    Tag,
    make_long,
    make_number,
    to_bool,
    truncate,
)

LIST_TAGS = frozenset({Tag.NIL, Tag.PAIR})


def get_number(v: LispValue) -> Optional[float]:
    """Numeric payload of a Long or Double as a float, else None."""
    match v.tag:
        case Tag.LONG:
            return float(v.data)
        case Tag.DOUBLE:
            return v.data
        case _:
            return None


# -------------------------------
# Arithmetic
# -------------------------------
def add(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return make_number(x + y)


def sub(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return make_number(x - y)


def mul(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return make_number(x * y)


def div(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    if y == 0:
        return sentinel(DIVIDE_BY_ZERO)
    return make_number(x / y)


def mod(a: LispValue, b: LispValue) -> LispValue:
    """Truncating remainder of the truncated operands; sign follows ``a``."""
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    tx, ty = truncate(x), truncate(y)
    if tx is None or ty is None:
        return sentinel(NOT_A_NUMBER)
    if ty == 0:
        return sentinel(DIVIDE_BY_ZERO)
    r = abs(tx) % abs(ty)
    return make_long(-r if tx < 0 else r)


# -------------------------------
# Comparison
# -------------------------------
def lt(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return to_bool(x < y)


def gt(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return to_bool(x > y)


def lte(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return to_bool(x <= y)


def gte(a: LispValue, b: LispValue) -> LispValue:
    x, y = get_number(a), get_number(b)
    if x is None or y is None:
        return sentinel(NOT_A_NUMBER)
    return to_bool(x >= y)


# -------------------------------
# Equality
# -------------------------------
def eq(a: LispValue, b: LispValue) -> LispValue:
    """Atom equality.

    Longs and Doubles compare by value with each other; symbols and strings
    by text. Lists (including Nil) are not comparable and always give the
    ListEquality sentinel, even when structurally identical.
    """
    if a.tag in NUMBER_TAGS and b.tag in NUMBER_TAGS:
        return to_bool(a.data == b.data)
    if a.tag in LIST_TAGS and b.tag in LIST_TAGS:
        return sentinel(LIST_EQUALITY)
    if a.tag != b.tag:
        return sentinel(TYPE_MISMATCH)
    match a.tag:
        case Tag.SYMBOL | Tag.STRING:
            return to_bool(a.data == b.data)
        case _:
            return sentinel(TYPE_MISMATCH)


# -------------------------------
# Boolean logic and predicates
# -------------------------------
def logical_not(a: LispValue) -> LispValue:
    return to_bool(a is Nil)


def is_nil(a: LispValue) -> LispValue:
    return to_bool(a is Nil)


def is_symbol(a: LispValue) -> LispValue:
    return to_bool(a.tag == Tag.SYMBOL)


def is_number(a: LispValue) -> LispValue:
    return to_bool(a.tag in NUMBER_TAGS)


def is_string(a: LispValue) -> LispValue:
    return to_bool(a.tag == Tag.STRING)


def is_list(a: LispValue) -> LispValue:
    return to_bool(a.tag in LIST_TAGS)
