"""Registry of special forms for the tlisp evaluator.

Maps head symbol names to handler functions ``(tail, env, evaluate_fn)``.
The evaluator consults this table before evaluating the head of a pair, so
these names cannot be shadowed by bindings.
"""

from tlisp import builtins
from tlisp.types import value
from tlisp.evaluation.special_forms.quote_forms import quote_form
from tlisp.evaluation.special_forms.set_form import set_form
from tlisp.evaluation.special_forms.define_form import define_form
from tlisp.evaluation.special_forms.lambda_form import lambda_form
from tlisp.evaluation.special_forms.logic_forms import and_form, or_form
from tlisp.evaluation.special_forms.if_form import if_form
from tlisp.evaluation.special_forms.cond_form import cond_form
from tlisp.evaluation.special_forms.primitive_forms import binary_form, unary_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "set": set_form,
    "define": define_form,
    "lambda": lambda_form,
    "and": and_form,
    "or": or_form,
    "if": if_form,
    "cond": cond_form,
    # structure
    "cons": binary_form(value.cons),
    "car": unary_form(value.car),
    "cdr": unary_form(value.cdr),
    # arithmetic
    "add": binary_form(builtins.add),
    "sub": binary_form(builtins.sub),
    "mul": binary_form(builtins.mul),
    "div": binary_form(builtins.div),
    "mod": binary_form(builtins.mod),
    # comparison
    "lt": binary_form(builtins.lt),
    "gt": binary_form(builtins.gt),
    "lte": binary_form(builtins.lte),
    "gte": binary_form(builtins.gte),
    "eq": binary_form(builtins.eq),
    # logic and predicates
    "not": unary_form(builtins.logical_not),
    "nil?": unary_form(builtins.is_nil),
    "symbol?": unary_form(builtins.is_symbol),
    "number?": unary_form(builtins.is_number),
    "string?": unary_form(builtins.is_string),
    "list?": unary_form(builtins.is_list),
}
