from tlisp import EvaluatorFn
from tlisp import SExpression, LispValue
from tlisp.types.environment import Environment
from tlisp.types.value import Nil, caddr, cadr, car


def if_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    cond = evaluate_fn(car(tail), env)
    # Only Nil is false
    if cond is not Nil:
        return evaluate_fn(cadr(tail), env)
    return evaluate_fn(caddr(tail), env)
