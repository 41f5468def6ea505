"""Calculator entry points — the evaluation pipeline and the display shell.

Data flow per call:
1. tokenize(text)        → token sequence (unary minus normalized)
2. to_postfix(tokens)    → postfix sequence
3. eval_postfix(postfix) → float
4. finiteness check      → EvalResult

Nothing here keeps state between calls; Display holds the only mutable text
and is owned by its caller.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal

from rpncalc.converter import to_postfix
from rpncalc.evaluator import eval_postfix
from rpncalc.models import ErrorKind, EvalError, EvalResult
from rpncalc.settings import Settings
from rpncalc.tokenizer import tokenize

# Characters a display may submit: digits, operators, parens, dots, whitespace.
ALLOWED_INPUT = re.compile(r"^[0-9+\-*/().\s]+$")


def run_pipeline(text: str) -> float:
    """Evaluate text, raising EvalError on the first failure."""
    value = eval_postfix(to_postfix(tokenize(text)))
    if not math.isfinite(value):
        raise EvalError(ErrorKind.NON_FINITE_RESULT, f"Result is not finite: {value}")
    return value


def evaluate(text: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Returns an EvalResult holding either one finite float or the ErrorKind of
    the first failure. Never raises for bad input.
    """
    try:
        value = run_pipeline(text)
    except EvalError as exc:
        return EvalResult.failure(exc)
    return EvalResult.success(value)


def calculate(text: str) -> EvalResult:
    """Pre-filter raw display text, then evaluate it.

    Text containing anything outside ALLOWED_INPUT (or nothing at all) is
    rejected before the pipeline runs.
    """
    if not ALLOWED_INPUT.fullmatch(text):
        return EvalResult(
            error=ErrorKind.INVALID_CHARACTER,
            message="Input contains characters outside the calculator keypad",
        )
    return evaluate(text)


def format_number(value: float) -> str:
    """Default string form of a result.

    Shortest round-trip digits, no trailing '.0' on integral values, '-0'
    shown as '0', exponent notation only below 1e-6 or from 1e21 up:
    14.0 → '14', 0.1 + 0.2 → '0.30000000000000004', 1e-7 → '1e-7'.
    """
    if value == 0:
        return "0"
    s = repr(value)
    if "e" in s:
        mantissa, exp_str = s.split("e")
        exp = int(exp_str)
        if exp >= 21 or exp <= -7:
            sign = "+" if exp > 0 else "-"
            return f"{mantissa}e{sign}{abs(exp)}"
        return format(Decimal(s), "f")
    if s.endswith(".0"):
        return s[:-2]
    return s


@dataclass
class Display:
    """Text field of a calculator front end.

    append/clear edit the text; calculate replaces it with the formatted
    result or, for every kind of failure, the single configured error text.
    """

    text: str = ""
    settings: Settings = field(default_factory=Settings.from_env)

    def append(self, chunk: str) -> None:
        self.text += chunk

    def clear(self) -> None:
        self.text = ""

    def calculate(self) -> EvalResult:
        result = calculate(self.text)
        if result.ok:
            self.text = format_number(result.unwrap())
        else:
            self.text = self.settings.error_text
        return result
