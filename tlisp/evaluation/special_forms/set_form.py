from tlisp import EvaluatorFn
from tlisp import SExpression, LispValue
from tlisp.errors import NOT_A_SYMBOL, sentinel
from tlisp.types.environment import Environment
from tlisp.types.value import Tag, cadr, car


def set_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set var value)

    Binds ``var`` in the current frame, shadowing any earlier binding, and
    returns the value.
    """
    var_sym = car(tail)
    if var_sym.tag != Tag.SYMBOL:
        return sentinel(NOT_A_SYMBOL)
    value = evaluate_fn(cadr(tail), env)
    return env.bind(var_sym, value)
