"""Closure representation for tlisp."""

from __future__ import annotations

from tlisp import SExpression, LispValue
from tlisp.types.environment import Environment
from tlisp.types.value import Tag, Value


class Closure:
    """A user function: parameter list, single body expression and the
    environment it was created in.

    ``env`` is held by reference, so later bindings made in the defining
    environment (the closure's own name, for recursion) are visible to calls.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: SExpression, body: SExpression, env: Environment):
        self.params: SExpression = params
        self.body: SExpression = body
        self.env: Environment = env

    def extend_env(self, args: list[LispValue]) -> Environment | None:
        """Bind ``args`` to the parameters in a new frame under ``self.env``,
        or None on an argument count mismatch.

        Delegates to tlisp.types.bind so closure calls share one binder.
        """
        from tlisp.types.bind import bind_arguments

        return bind_arguments(list(self.params), args, self.env)


def make_closure(params: SExpression, body: SExpression, env: Environment) -> Value:
    return Value(Tag.CLOSURE, Closure(params, body, env))
