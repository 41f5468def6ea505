"""Tests for postfix evaluation."""

import math

import pytest

from rpncalc.evaluator import eval_postfix
from rpncalc.models import ErrorKind, EvalError, Number, Op, Symbol


def seq(*items):
    """Build a postfix sequence from floats and operator characters."""
    return [Symbol(Op(i)) if isinstance(i, str) else Number(float(i)) for i in items]


def test_single_number():
    assert eval_postfix(seq(42)) == 42.0


@pytest.mark.parametrize("items,expected", [
    ((2, 3, "+"), 5.0),
    ((10, 4, "-"), 6.0),
    ((3, 7, "*"), 21.0),
    ((15, 4, "/"), 3.75),
    ((3, 4, 2, "*", "+"), 11.0),
    ((10, 2, "-", 3, "-"), 5.0),
])
def test_arithmetic(items, expected):
    assert eval_postfix(seq(*items)) == pytest.approx(expected)


def test_right_operand_is_most_recent():
    assert eval_postfix(seq(1, 4, "/")) == 0.25


def test_division_by_zero_is_infinite_not_an_exception():
    assert eval_postfix(seq(5, 0, "/")) == math.inf
    assert eval_postfix(seq(-5, 0, "/")) == -math.inf
    assert math.isnan(eval_postfix(seq(0, 0, "/")))


def test_overflow_is_infinite():
    assert eval_postfix(seq(1e308, 10, "*")) == math.inf


@pytest.mark.parametrize("items", [
    ("+",),
    (1, "+"),
    (1, 2, "+", "*"),
])
def test_missing_operand(items):
    with pytest.raises(EvalError) as exc_info:
        eval_postfix(seq(*items))
    assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION
    assert "missing an operand" in exc_info.value.message


def test_empty_sequence():
    with pytest.raises(EvalError) as exc_info:
        eval_postfix([])
    assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION


def test_leftover_values():
    with pytest.raises(EvalError) as exc_info:
        eval_postfix(seq(1, 2))
    assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION
    assert "found 2" in exc_info.value.message


def test_parenthesis_in_postfix_is_rejected():
    with pytest.raises(EvalError) as exc_info:
        eval_postfix([Number(1.0), Symbol(Op.LPAREN)])
    assert exc_info.value.kind is ErrorKind.MALFORMED_EXPRESSION
