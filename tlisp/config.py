from __future__ import annotations

import os
from typing import Optional

# Defaults
_DEFAULT_PROMPT = "> "
_DEFAULT_CONTINUATION_PROMPT = "... "
_DEFAULT_EXIT_COMMAND = "exit"
_DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return str_from_env("TLISP_PROMPT", _DEFAULT_PROMPT)


def get_continuation_prompt() -> str:
    return str_from_env("TLISP_CONTINUATION_PROMPT", _DEFAULT_CONTINUATION_PROMPT)


def get_exit_command() -> str:
    return str_from_env("TLISP_EXIT_COMMAND", _DEFAULT_EXIT_COMMAND).strip()


def get_recursion_limit() -> Optional[int]:
    # None leaves the interpreter's own limit alone
    return int_from_env("TLISP_RECURSION_LIMIT")


def get_log_level() -> str:
    return str_from_env("TLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
