"""Tokenizer — turn raw expression text into typed tokens.

One left-to-right pass collects numeric literals and operator symbols, then a
second pass rewrites unary minus as subtraction from an inserted zero so the
later stages only ever see binary operators.
"""

from __future__ import annotations

from rpncalc.models import ErrorKind, EvalError, Number, Op, Symbol, Token

_DIGITS = frozenset("0123456789")
_NUMERIC = _DIGITS | {"."}
_SYMBOLS = {op.value: op for op in Op}


def _parse_number(literal: str, start: int) -> Number:
    """Parse a run of digits and dots collected from position `start`.

    A single leading or trailing dot is fine ('.5', '5.'); more than one dot
    or no digit at all is not.
    """
    if literal.count(".") > 1:
        raise EvalError(
            ErrorKind.MALFORMED_NUMBER,
            f"Bad number {literal!r} at position {start}",
        )
    if not any(ch in _DIGITS for ch in literal):
        raise EvalError(
            ErrorKind.MALFORMED_NUMBER,
            f"Number {literal!r} at position {start} has no digits",
        )
    return Number(float(literal))


def _scan(text: str) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch in _NUMERIC:
            start = i
            while i < n and text[i] in _NUMERIC:
                i += 1
            tokens.append(_parse_number(text[start:i], start))
            continue

        op = _SYMBOLS.get(ch)
        if op is None:
            raise EvalError(
                ErrorKind.INVALID_CHARACTER,
                f"Invalid character {ch!r} at position {i}",
            )
        tokens.append(Symbol(op))
        i += 1

    return tokens


def _is_symbol(tok: Token, op: Op) -> bool:
    return isinstance(tok, Symbol) and tok.char is op


def _is_unary_minus(tokens: list[Token], j: int) -> bool:
    """True when tokens[j] is a '-' with no left operand."""
    if not _is_symbol(tokens[j], Op.MINUS):
        return False
    if j == 0:
        return True
    prev = tokens[j - 1]
    return isinstance(prev, Symbol) and prev.char is not Op.RPAREN


def _missing_operand(position: int) -> EvalError:
    return EvalError(
        ErrorKind.MALFORMED_EXPRESSION,
        f"Nothing to negate after '-' at token {position}",
    )


def normalize_unary_minus(tokens: list[Token]) -> list[Token]:
    """Insert Number(0) before each unary '-' so it becomes binary subtraction.

    At the start of the expression or after '(' the zero is enough:
    '-3+4' → [0, -, 3, +, 4].  After a binary operator the negated operand is
    also bracketed so it binds tighter than that operator:
    '3*-2' → [3, *, (, 0, -, 2, )] and '2--3' → [2, -, (, 0, -, 3, )].
    The inserted ')' follows the first complete operand, a number or a whole
    parenthesized group: '2*-(1+1)' → [2, *, (, 0, -, (, 1, +, 1, ), )].

    Raises:
        EvalError: MALFORMED_EXPRESSION when a bracketed negation has no
            operand, i.e. a ')' or the end of input comes first ('3*-',
            '(2*-)3').
    """
    fixed: list[Token] = []
    # Paren depths at which a synthetic ')' closes a bracketed negation
    pending: list[int] = []
    # Token index of the '-' behind each pending entry
    origins: list[int] = []
    depth = 0

    for j, tok in enumerate(tokens):
        if _is_unary_minus(tokens, j):
            prev = tokens[j - 1] if j > 0 else None
            if isinstance(prev, Symbol) and prev.char.is_binary:
                fixed.append(Symbol(Op.LPAREN))
                depth += 1
                pending.append(depth)
                origins.append(j)
            fixed.append(Number(0.0))
            fixed.append(tok)
            continue

        if _is_symbol(tok, Op.RPAREN) and pending and pending[-1] == depth:
            raise _missing_operand(origins[-1])

        fixed.append(tok)
        if _is_symbol(tok, Op.LPAREN):
            depth += 1
        elif _is_symbol(tok, Op.RPAREN):
            depth -= 1

        # An operand just finished: close every negation waiting on this depth
        if isinstance(tok, Number) or _is_symbol(tok, Op.RPAREN):
            while pending and pending[-1] == depth:
                fixed.append(Symbol(Op.RPAREN))
                depth -= 1
                pending.pop()
                origins.pop()

    if pending and pending[-1] == depth:
        raise _missing_operand(origins[-1])
    # Anything still pending waits on a '(' the input never closes; the
    # converter reports that as mismatched parentheses.
    return fixed


def tokenize(text: str) -> list[Token]:
    """Convert expression text into a normalized token sequence.

    Raises:
        EvalError: INVALID_CHARACTER for anything outside digits, '.',
            '+-*/()' and whitespace; MALFORMED_NUMBER for literals such as
            '1..2' or '1.2.3'; MALFORMED_EXPRESSION for a '-' after an
            operator with nothing to negate.
    """
    return normalize_unary_minus(_scan(text))
