"""Runtime environment for tlisp.

An Environment is one frame of bindings plus an optional ``outer`` link.
Frames are shadow lists, not maps: binding a name never overwrites or
removes anything, it pushes a new ``(symbol, value)`` entry on the front.
Lookup scans front to back, then continues in ``outer``, so the most recent
binding wins while older ones stay in the frame, unreachable.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from tlisp import LispValue
from tlisp.types.value import Tag


class Environment:
    """Chained frame of Symbol bindings with most-recent-wins lookup."""

    __slots__ = ("bindings", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.bindings: deque[tuple[LispValue, LispValue]] = deque()
        self.outer: Environment | None = outer

    def __len__(self) -> int:
        return len(self.bindings)

    def __iter__(self) -> Iterator[tuple[LispValue, LispValue]]:
        return iter(self.bindings)

    def bind(self, name: LispValue, value: LispValue) -> LispValue:
        """Prepend ``name -> value`` to this frame and return ``value``."""
        if name.tag != Tag.SYMBOL:
            raise TypeError(f"Cannot bind non-symbol {name!r}")
        self.bindings.appendleft((name, value))
        return value

    def lookup(self, name: LispValue) -> LispValue:
        """Value bound to ``name``, or ``name`` itself when nothing binds it.

        Names compare by text, not identity.
        """
        env: Optional[Environment] = self
        while env is not None:
            for sym, value in env.bindings:
                if sym.data == name.data:
                    return value
            env = env.outer
        return name

    @classmethod
    def extend(
        cls, params: list[LispValue], args: list[LispValue], outer: Environment
    ) -> Environment:
        """New frame binding each parameter to the argument at the same position."""
        frame = cls(outer=outer)
        for param, arg in zip(params, args):
            frame.bind(param, arg)
        return frame


def new_global_environment() -> Environment:
    """Empty, parentless environment shared by a whole session."""
    return Environment()
