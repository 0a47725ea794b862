from tlisp import EvaluatorFn
from tlisp import SExpression, LispValue
from tlisp.errors import NOT_A_SYMBOL, sentinel
from tlisp.evaluation.special_forms.lambda_form import make_lambda
from tlisp.types.environment import Environment
from tlisp.types.value import Nil, Tag, caddr, cadr, car, cddr


def define_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name (params) body)
    (define name expr)          e.g. (define name (lambda (params) body))

    Binds ``name`` in the current environment and returns the name symbol.
    The closure captures that same environment, so the body can call ``name``
    recursively.
    """
    name = car(tail)
    if name.tag != Tag.SYMBOL:
        return sentinel(NOT_A_SYMBOL)

    if cddr(tail) is Nil:
        value = evaluate_fn(cadr(tail), env)
    else:
        value = make_lambda(cadr(tail), caddr(tail), env)
        if value.tag != Tag.CLOSURE:
            return value
    env.bind(name, value)
    return name
