"""Data models for the rpncalc evaluation pipeline.

Op, Number, Symbol, ErrorKind, EvalError, EvalResult — the typed structures
that flow through tokenizer → converter → evaluator → shell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Op(str, Enum):
    """Operator and parenthesis symbols."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    LPAREN = "("
    RPAREN = ")"

    @property
    def is_binary(self) -> bool:
        return self not in (Op.LPAREN, Op.RPAREN)


@dataclass(frozen=True)
class Number:
    """A numeric literal."""

    value: float

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)


@dataclass(frozen=True)
class Symbol:
    """An operator or parenthesis."""

    char: Op

    def __str__(self) -> str:
        return self.char.value


Token = Union[Number, Symbol]


class ErrorKind(str, Enum):
    """Ways an evaluation can fail."""

    INVALID_CHARACTER = "InvalidCharacter"
    MALFORMED_NUMBER = "MalformedNumber"
    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    MALFORMED_EXPRESSION = "MalformedExpression"
    NON_FINITE_RESULT = "NonFiniteResult"


class EvalError(ValueError):
    """Raised by a pipeline stage at the point a failure is detected."""

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value


@dataclass(frozen=True)
class EvalResult:
    """Outcome of one evaluation: exactly one finite number, or one error."""

    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: float) -> EvalResult:
        return cls(value=value)

    @classmethod
    def failure(cls, exc: EvalError) -> EvalResult:
        return cls(error=exc.kind, message=exc.message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value, or raise the EvalError this result carries."""
        if self.error is not None or self.value is None:
            raise EvalError(self.error or ErrorKind.MALFORMED_EXPRESSION, self.message)
        return self.value


def format_tokens(tokens: list[Token]) -> str:
    """Space-separated rendering, e.g. '0 - 3 +' for debugging output."""
    return " ".join(str(t) for t in tokens)
