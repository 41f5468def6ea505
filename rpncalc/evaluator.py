"""Postfix (RPN) evaluation over a value stack."""

from __future__ import annotations

import math
import operator
from typing import Callable

from rpncalc.models import ErrorKind, EvalError, Number, Op, Token


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor gives ±inf or nan instead of raising."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_APPLY: dict[Op, Callable[[float, float], float]] = {
    Op.PLUS: operator.add,
    Op.MINUS: operator.sub,
    Op.TIMES: operator.mul,
    Op.DIVIDE: _divide,
}


def eval_postfix(seq: list[Token]) -> float:
    """Evaluate a postfix sequence and return its single value.

    Finiteness is not checked here; 5/0 returns inf.

    Raises:
        EvalError: MALFORMED_EXPRESSION when an operator lacks an operand or
            the stack does not end with exactly one value.
    """
    stack: list[float] = []

    for tok in seq:
        if isinstance(tok, Number):
            stack.append(tok.value)
            continue

        fn = _APPLY.get(tok.char)
        if fn is None:
            raise EvalError(
                ErrorKind.MALFORMED_EXPRESSION,
                f"Unexpected {tok.char.value!r} in postfix sequence",
            )
        if len(stack) < 2:
            raise EvalError(
                ErrorKind.MALFORMED_EXPRESSION,
                f"Operator {tok.char.value!r} is missing an operand",
            )
        b = stack.pop()
        a = stack.pop()
        stack.append(fn(a, b))

    if len(stack) != 1:
        raise EvalError(
            ErrorKind.MALFORMED_EXPRESSION,
            f"Expected one value after evaluation, found {len(stack)}",
        )
    return stack[0]
