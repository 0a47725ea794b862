"""Special form: cond, the multi-branch conditional."""

from tlisp import SExpression, LispValue, EvaluatorFn
from tlisp.errors import NO_BRANCH_MATCHED, sentinel
from tlisp.types.environment import Environment
from tlisp.types.value import Nil, cadr, car


def cond_form(tail: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test result) ...).

    Tests are evaluated in order; the result expression of the first clause
    whose test is not Nil is evaluated and returned. When no test succeeds
    the result is the NoBranchMatched sentinel.
    """
    for clause in tail:
        if evaluate_fn(car(clause), env) is not Nil:
            return evaluate_fn(cadr(clause), env)
    return sentinel(NO_BRANCH_MATCHED)
