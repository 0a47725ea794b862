from tlisp import SExpression, LispValue, EvaluatorFn
from tlisp.types.environment import Environment
from tlisp.types.value import car


def quote_form(
    tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote x) returns x unevaluated."""
    return car(tail)
