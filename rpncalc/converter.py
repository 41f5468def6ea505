"""Infix → postfix conversion (shunting-yard)."""

from __future__ import annotations

from rpncalc.models import ErrorKind, EvalError, Number, Op, Symbol, Token

# Binding strength; equal precedence pops first (left-associative).
PRECEDENCE: dict[Op, int] = {
    Op.PLUS: 1,
    Op.MINUS: 1,
    Op.TIMES: 2,
    Op.DIVIDE: 2,
}


def _mismatched(detail: str) -> EvalError:
    return EvalError(ErrorKind.MISMATCHED_PARENTHESES, f"Mismatched parentheses: {detail}")


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder an infix token sequence into postfix (RPN) order.

    Args:
        tokens: Output of tokenize() — numbers and symbols in source order.

    Returns:
        The same numbers and binary operators in postfix order; parentheses
        are consumed.

    Raises:
        EvalError: MISMATCHED_PARENTHESES for an unmatched ')' or an
            unclosed '('.
    """
    output: list[Token] = []
    ops: list[Op] = []

    for tok in tokens:
        if isinstance(tok, Number):
            output.append(tok)
            continue

        v = tok.char

        if v is Op.LPAREN:
            ops.append(v)
            continue

        if v is Op.RPAREN:
            while ops and ops[-1] is not Op.LPAREN:
                output.append(Symbol(ops.pop()))
            if not ops:
                raise _mismatched("unexpected ')'")
            ops.pop()  # discard '('
            continue

        while ops and ops[-1].is_binary and PRECEDENCE[ops[-1]] >= PRECEDENCE[v]:
            output.append(Symbol(ops.pop()))
        ops.append(v)

    while ops:
        op = ops.pop()
        if op is Op.LPAREN:
            raise _mismatched("unclosed '('")
        output.append(Symbol(op))

    return output
