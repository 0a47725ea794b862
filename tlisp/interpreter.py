from __future__ import annotations

import logging
import sys
from typing import Iterator, Optional, TextIO

from tlisp import LispValue, config
from tlisp.errors import LispSyntaxError, is_error, sentinel
from tlisp.evaluation.evaluator import evaluate
from tlisp.printer import to_string
from tlisp.reader.parser import Reader
from tlisp.types.environment import Environment, new_global_environment
from tlisp.types.value import Nil

logger = logging.getLogger(__name__)


def _code_chars(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for every character outside string literals.

    As in the reader, a '"' opens a string only where a token starts; inside
    a symbol such as a"b it is an ordinary character.
    """
    in_string = False
    token_start = True
    for i, ch in enumerate(text):
        if in_string:
            if ch == '"':
                in_string = False
                token_start = True
            continue
        if ch == '"' and token_start:
            in_string = True
            continue
        yield i, ch
        token_start = ch.isspace() or ch in "()" or (ch == "'" and token_start)


def strip_comment(line: str) -> str:
    """Drop a ';' comment and everything after it; a ';' inside a string stays."""
    for i, ch in _code_chars(line):
        if ch == ";":
            return line[:i]
    return line


def paren_depth(text: str) -> int:
    """Open minus close parentheses, ignoring those inside strings."""
    depth = 0
    for _, ch in _code_chars(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    return depth


class Interpreter:
    """
    A line-fed interpreter session for tlisp source.
    Accumulates input until parentheses balance, then reads, evaluates and
    prints each complete expression against one global environment.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        recursion_limit: Optional[int] = None,
    ):
        self.env: Environment = env if env is not None else new_global_environment()
        self.pending: list[str] = []

        limit = recursion_limit if recursion_limit is not None else config.get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug("raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

    @property
    def has_pending_input(self) -> bool:
        return bool(self.pending)

    def run(self, source: str) -> list[LispValue]:
        """Read and evaluate every expression in ``source``, in order.

        A syntax error contributes its sentinel and stops reading.
        """
        reader = Reader(source)
        results: list[LispValue] = []
        while not reader.at_end():
            try:
                expr = reader.read_expr()
            except LispSyntaxError as ex:
                logger.info("read failed: %s", ex)
                results.append(sentinel(ex.sentinel))
                break
            logger.debug("eval %s", expr)
            value = evaluate(expr, self.env)
            if is_error(value):
                logger.info("%s evaluated to %s", expr, value)
            results.append(value)
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate source text; returns the last value, or Nil if there was none."""
        source = "\n".join(strip_comment(line) for line in code.splitlines())
        results = self.run(source)
        if not results:
            return Nil
        return results[-1]

    def feed(self, line: str) -> list[str]:
        """Add one line of input; return the printed results it completed."""
        self.pending.append(strip_comment(line.rstrip("\n")))
        buffered = "\n".join(self.pending)
        if not buffered.strip():
            self.pending.clear()
            return []
        if paren_depth(buffered) > 0:
            return []
        self.pending.clear()
        return [to_string(v) for v in self.run(buffered)]

    def flush(self) -> list[str]:
        """Evaluate whatever is still buffered (an unbalanced expression)."""
        if not self.pending:
            return []
        buffered = "\n".join(self.pending)
        self.pending.clear()
        return [to_string(v) for v in self.run(buffered)]

    def run_file(self, path: str) -> list[str]:
        output: list[str] = []
        with open(path, encoding="utf-8") as f:
            for line in f:
                output.extend(self.feed(line))
        output.extend(self.flush())
        return output

    def repl(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        """Interactive loop; ends on the exit command or end of input."""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        exit_command = config.get_exit_command()
        while True:
            prompt = config.get_continuation_prompt() if self.pending else config.get_prompt()
            stdout.write(prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            if not self.pending and line.strip() == exit_command:
                break
            try:
                results = self.feed(line)
            except RecursionError:
                logger.error("evaluation exceeded the recursion limit (%d)", sys.getrecursionlimit())
                continue
            for text in results:
                stdout.write(text + "\n")
