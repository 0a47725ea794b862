"""Application engine for tlisp closures.

Arguments are evaluated left to right in the caller's environment, then
bound positionally in a fresh frame whose parent is the closure's captured
environment. The single body expression is evaluated in that frame.
"""

from tlisp import LispValue, SExpression, EvaluatorFn
from tlisp.errors import ARITY_MISMATCH, sentinel
from tlisp.types.environment import Environment


def apply(
    fn: LispValue,
    arg_exprs: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the closure ``fn`` to the unevaluated argument list ``arg_exprs``.

    Returns the ArityMismatch sentinel when the argument count differs from
    the parameter count.
    """
    closure = fn.data
    args = [evaluate_fn(arg, env) for arg in arg_exprs]
    call_env = closure.extend_env(args)
    if call_env is None:
        return sentinel(ARITY_MISMATCH)
    return evaluate_fn(closure.body, call_env)
