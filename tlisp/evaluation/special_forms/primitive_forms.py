"""Special forms that evaluate their operands and call a primitive.

Operands are evaluated left to right; a missing operand evaluates as Nil,
so the primitive reports its own type error for it.
"""

from typing import Callable

from tlisp import SExpression, LispValue, EvaluatorFn
from tlisp.types.environment import Environment
from tlisp.types.value import cadr, car

UnaryFn = Callable[[LispValue], LispValue]
BinaryFn = Callable[[LispValue, LispValue], LispValue]


def unary_form(fn: UnaryFn):
    def form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
        return fn(evaluate_fn(car(tail), env))

    form.__name__ = f"{fn.__name__}_form"
    return form


def binary_form(fn: BinaryFn):
    def form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
        a = evaluate_fn(car(tail), env)
        b = evaluate_fn(cadr(tail), env)
        return fn(a, b)

    form.__name__ = f"{fn.__name__}_form"
    return form
