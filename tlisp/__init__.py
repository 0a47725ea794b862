# Core type aliases for the tlisp data model.
# Every runtime value and every piece of code is a tlisp.types.value.Value:
# a tagged union of Long, Double, Symbol, String, Pair, Closure and the Nil
# singleton. There is no separate AST.
#
# LispValue and SExpression are the same class. Signatures use SExpression
# for unevaluated code handed to the reader and special forms, and LispValue
# for results of evaluation.

from typing import Callable

from tlisp.types.value import Value, Nil, Truth

LispValue = Value
SExpression = Value

# Evaluator function type: evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]

# Entry points; imported after the aliases since their modules use them.
from tlisp.types.environment import Environment, new_global_environment  # noqa: E402
from tlisp.reader.parser import parse  # noqa: E402
from tlisp.printer import to_string  # noqa: E402
from tlisp.evaluation.evaluator import evaluate  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "Value",
    "Nil",
    "Truth",
    "Environment",
    "new_global_environment",
    "parse",
    "evaluate",
    "to_string",
]
