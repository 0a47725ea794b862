from __future__ import annotations

from typing import Optional

from tlisp import LispValue
from tlisp.types.environment import Environment


def bind_arguments(
    formals: list[LispValue],
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Optional[Environment]:
    """
    Single source of truth for closure parameter binding.

    Parameters are purely positional and the argument count must match
    exactly. Returns a new Environment whose outer is ``closure_env``, or
    None when the counts differ.
    """
    if len(formals) != len(supplied_args):
        return None
    return Environment.extend(formals, supplied_args, closure_env)
