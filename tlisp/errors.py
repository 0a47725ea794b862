"""Error catalogue for tlisp.

Language-level failures are never raised: they are ordinary Symbol values
(sentinels) returned through the normal evaluation path, printed like any
other value and free to flow into further operations. The names below are
the complete set.

The reader is the only place that uses an exception, and only internally:
``LispSyntaxError`` unwinds a half-read expression and ``parse`` turns it
back into the matching sentinel.
"""

# ParseError
UNTERMINATED_STRING = "UnterminatedString"
UNEXPECTED_CLOSE_PAREN = "UnexpectedCloseParen"
UNTERMINATED_LIST = "UnterminatedList"
UNEXPECTED_EOF = "UnexpectedEOF"

# TypeError
NOT_A_NUMBER = "NotANumber"
NOT_A_PAIR = "NotAPair"
NOT_A_SYMBOL = "NotASymbol"
TYPE_MISMATCH = "TypeMismatch"
LIST_EQUALITY = "ListEquality"

# ArityError
ARITY_MISMATCH = "ArityMismatch"

DIVIDE_BY_ZERO = "DivideByZero"
NO_BRANCH_MATCHED = "NoBranchMatched"

PARSE_ERRORS = frozenset(
    {UNTERMINATED_STRING, UNEXPECTED_CLOSE_PAREN, UNTERMINATED_LIST, UNEXPECTED_EOF}
)
TYPE_ERRORS = frozenset(
    {NOT_A_NUMBER, NOT_A_PAIR, NOT_A_SYMBOL, TYPE_MISMATCH, LIST_EQUALITY}
)
SENTINEL_NAMES = PARSE_ERRORS | TYPE_ERRORS | {ARITY_MISMATCH, DIVIDE_BY_ZERO, NO_BRANCH_MATCHED}


class LispError(Exception):
    """Base class for host-level tlisp exceptions."""


class LispSyntaxError(LispError):
    """Raised inside the reader; carries the name of the ParseError sentinel."""

    def __init__(self, sentinel: str, position: int):
        super().__init__(f"{sentinel} at offset {position}")
        self.sentinel = sentinel
        self.position = position


def sentinel(name: str):
    """Build the sentinel value for ``name``."""
    from tlisp.types.value import make_symbol

    return make_symbol(name)


def is_error(value) -> bool:
    """True if ``value`` is one of the sentinel symbols."""
    from tlisp.types.value import Tag

    return value.tag == Tag.SYMBOL and value.data in SENTINEL_NAMES
