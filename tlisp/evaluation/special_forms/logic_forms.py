from tlisp import SExpression, LispValue, EvaluatorFn
from tlisp.types.environment import Environment
from tlisp.types.value import Nil, Truth, cadr, car


def and_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b) evaluates a; if it is Nil the result is Nil and b is never
    evaluated. Otherwise the result is the value of b itself.
    """
    if evaluate_fn(car(tail), env) is Nil:
        return Nil
    return evaluate_fn(cadr(tail), env)


def or_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b) evaluates a; if it is not Nil the result is t (not a's value)
    and b is never evaluated. Otherwise the result is the value of b.
    """
    if evaluate_fn(car(tail), env) is not Nil:
        return Truth
    return evaluate_fn(cadr(tail), env)
