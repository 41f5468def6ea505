"""rpncalc — safe arithmetic expression evaluation for calculator front ends.

Evaluates text such as '(2 + 3) * -4' without eval. Tokenizer → shunting-yard
→ postfix evaluator, returning an EvalResult that holds either one finite
number or the kind of failure.

Usage:
    python -m rpncalc eval "2 + 3 * 4"           # Print the result
    python -m rpncalc eval "1 / 0" --explain     # Show tokens, RPN and error kind
    python -m rpncalc tokens -- "-3 + 4"         # Show normalized tokens
    python -m rpncalc rpn "(2 + 3) * 4"          # Show postfix form
    python -m rpncalc repl                       # Interactive keypad session
"""

from rpncalc.calculator import Display, calculate, evaluate, format_number
from rpncalc.models import ErrorKind, EvalError, EvalResult, Number, Op, Symbol, Token

__all__ = [
    "Display",
    "ErrorKind",
    "EvalError",
    "EvalResult",
    "Number",
    "Op",
    "Symbol",
    "Token",
    "calculate",
    "evaluate",
    "format_number",
]
