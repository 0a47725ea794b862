"""Canonical text form of tlisp values.

- Long    -> decimal integer
- Double  -> fixed six decimal places ("%f"), e.g. 5.500000
- Symbol  -> its text
- String  -> text wrapped in '"'
- Nil     -> ()
- Pair    -> (e1 e2 ...), or (e1 ... . tail) when the chain ends in a
             non-pair, non-nil value
- Closure -> (lambda PARAMS BODY)
"""

from __future__ import annotations

from io import StringIO

from tlisp import LispValue
from tlisp.types.value import Nil, Tag


def write(value: LispValue, buffer: StringIO) -> None:
    # Work stack, last item first: literal text or a value still to render.
    # Nested lists are expanded here instead of by recursion.
    todo: list[str | LispValue] = [value]
    while todo:
        item = todo.pop()
        if isinstance(item, str):
            buffer.write(item)
            continue
        match item.tag:
            case Tag.NIL:
                buffer.write("()")
            case Tag.LONG:
                buffer.write(str(item.data))
            case Tag.DOUBLE:
                buffer.write("%f" % item.data)
            case Tag.SYMBOL:
                buffer.write(item.data)
            case Tag.STRING:
                buffer.write('"')
                buffer.write(item.data)
                buffer.write('"')
            case Tag.PAIR:
                todo.extend(reversed(_pair_parts(item)))
            case Tag.CLOSURE:
                closure = item.data
                todo.extend(reversed(["(lambda ", closure.params, " ", closure.body, ")"]))


def _pair_parts(value: LispValue) -> list[str | LispValue]:
    parts: list[str | LispValue] = ["("]
    current = value
    while current is not Nil:
        head, tail = current.data
        parts.append(head)
        if tail is not Nil and tail.tag != Tag.PAIR:
            # dotted pair
            parts.append(" . ")
            parts.append(tail)
            break
        current = tail
        if current is not Nil:
            parts.append(" ")
    parts.append(")")
    return parts


def to_string(value: LispValue) -> str:
    """Render ``value`` in its canonical textual form."""
    with StringIO() as buffer:
        write(value, buffer)
        return buffer.getvalue()
