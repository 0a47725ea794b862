"""Core evaluator for the tlisp interpreter.

A plain recursive tree walk over the host call stack: no trampoline and no
state beyond the Environment argument. Special forms are dispatched by head
symbol name before anything is evaluated, so their operands arrive
unevaluated.
"""

from __future__ import annotations

from tlisp import SExpression, LispValue
from tlisp.types.environment import Environment
from tlisp.types.value import Nil, Tag
from tlisp.evaluation.apply import apply
from tlisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate ``expr`` in ``env``.

    - Nil evaluates to Nil; Long, Double, String and Closure to themselves.
    - A Symbol evaluates to its binding, or to itself when unbound.
    - A pair headed by a special-form name is handed to that form.
    - Otherwise the head is evaluated; a Closure is applied, and any other
      operator leaves the whole expression unevaluated.
    """
    match expr.tag:
        case Tag.NIL:
            return Nil
        case Tag.SYMBOL:
            return env.lookup(expr)
        case Tag.PAIR:
            head, tail = expr.data
            if head.tag == Tag.SYMBOL:
                form = SPECIAL_FORMS.get(head.data)
                if form is not None:
                    return form(tail, env, evaluate)

            operator = evaluate(head, env)
            if operator.tag == Tag.CLOSURE:
                return apply(operator, tail, env, evaluate)
            return expr

    # --- Atoms return as-is ---
    return expr
