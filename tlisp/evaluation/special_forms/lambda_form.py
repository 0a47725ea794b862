from tlisp import EvaluatorFn
from tlisp import SExpression, LispValue
from tlisp.errors import NOT_A_SYMBOL, sentinel
from tlisp.types.closure import make_closure
from tlisp.types.environment import Environment
from tlisp.types.value import Tag, cadr, car


def valid_params(params: SExpression) -> bool:
    """True for Nil or a proper list of Symbols."""
    while params.tag == Tag.PAIR:
        head, params = params.data
        if head.tag != Tag.SYMBOL:
            return False
    return params.tag == Tag.NIL


def make_lambda(params: SExpression, body: SExpression, env: Environment) -> LispValue:
    if not valid_params(params):
        return sentinel(NOT_A_SYMBOL)
    return make_closure(params, body, env)


def lambda_form(
    tail: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): one body expression; anything after it is ignored.
    return make_lambda(car(tail), cadr(tail), env)
