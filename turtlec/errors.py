from enum import Enum
from typing import Any, Optional
from turtlec.types import ErrorVal


class ErrorKind(Enum):
    UNEXPECTED_TOKEN = 'UnexpectedToken'  # lookahead differs from the token demanded by match
    UNRECOGNIZED = 'Unrecognized'  # lookahead starts no alternative of the rule
    BAD_CHARACTER = 'BadCharacter'


class TurtleError(Exception):
    """Base class for every error raised by the turtle compiler."""


class TurtleSyntaxError(TurtleError):
    """A parse-time failure.

    ``found`` and ``expected`` hold the offending and demanded token kinds
    where they apply; ``line`` is attached by ``Parser.parse`` (or by the
    scanner for lexical errors).
    """
    def __init__(self, kind: ErrorKind, detail: str, found: Any = None,
                 expected: Any = None, line: Optional[int] = None):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.found = found
        self.expected = expected
        self.line = line

    @classmethod
    def mismatch(cls, found: Any, expected: Any) -> 'TurtleSyntaxError':
        return cls(ErrorKind.UNEXPECTED_TOKEN,
                   f"Unexpected token '{found}', Expecting '{expected}'",
                   found=found, expected=expected)

    def __str__(self) -> str:
        if self.line is None:
            return self.detail
        return f"{self.line}: {self.detail}"


class TurtleRuntimeError(TurtleError):
    """Exception type used to propagate errors raised while executing a program."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"{err.name}: {err.message}")
        self.err = err
