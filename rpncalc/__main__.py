"""CLI for the rpncalc expression evaluator.

Usage:
    python -m rpncalc eval "2 + 3 * 4"           # Print the result
    python -m rpncalc eval "1 / 0" --explain     # Show tokens, RPN and error kind
    python -m rpncalc tokens -- "-3 + 4"         # Show normalized tokens
    python -m rpncalc rpn "(2 + 3) * 4"          # Show postfix form
    python -m rpncalc repl                       # Interactive keypad session
"""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rpncalc.calculator import ALLOWED_INPUT, Display, calculate, format_number
from rpncalc.converter import to_postfix
from rpncalc.models import EvalError, EvalResult, Number, format_tokens
from rpncalc.settings import Settings
from rpncalc.tokenizer import tokenize

app = typer.Typer(
    name="rpncalc",
    help="Safe arithmetic expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _explain(expr: str, result: EvalResult) -> None:
    """Print each pipeline stage to stderr, stopping at the first failure."""
    if not ALLOWED_INPUT.fullmatch(expr):
        console.print("  [dim]filter:[/dim]  [red]rejected[/red]")
    else:
        try:
            tokens = tokenize(expr)
            console.print(f"  [dim]tokens:[/dim]  {escape(format_tokens(tokens))}")
            postfix = to_postfix(tokens)
            console.print(f"  [dim]postfix:[/dim] {escape(format_tokens(postfix))}")
        except EvalError:
            pass

    if result.ok:
        console.print(f"  [dim]result:[/dim]  [green]{result.unwrap()!r}[/green]")
    else:
        console.print(
            f"  [dim]error:[/dim]   [red]{result.error.value}[/red]: {escape(result.message)}"
        )


def _fail(exc: EvalError) -> NoReturn:
    console.print(f"[red]{exc.kind.value}[/red]: {escape(exc.message)}")
    raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    expr: str = typer.Argument(help="Expression to evaluate, e.g. '(2 + 3) * 4'"),
    explain: bool = typer.Option(False, "--explain", "-x", help="Show tokens, postfix form and error kind"),
) -> None:
    """Evaluate an expression and print the result."""
    settings = Settings.from_env()
    result = calculate(expr)
    if explain:
        _explain(expr, result)

    if not result.ok:
        typer.echo(settings.error_text)
        raise typer.Exit(1)
    typer.echo(format_number(result.unwrap()))


@app.command("tokens")
def cmd_tokens(
    expr: str = typer.Argument(help="Expression to tokenize"),
) -> None:
    """Show the normalized token sequence."""
    try:
        tokens = tokenize(expr)
    except EvalError as exc:
        _fail(exc)

    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Value", justify="right")

    for i, tok in enumerate(tokens):
        kind = "number" if isinstance(tok, Number) else "symbol"
        table.add_row(str(i), kind, escape(str(tok)))

    console.print(table)


@app.command("rpn")
def cmd_rpn(
    expr: str = typer.Argument(help="Expression to convert"),
) -> None:
    """Print the postfix (RPN) form of an expression."""
    try:
        postfix = to_postfix(tokenize(expr))
    except EvalError as exc:
        _fail(exc)
    typer.echo(format_tokens(postfix))


@app.command("repl")
def cmd_repl() -> None:
    """Interactive keypad: '=' calculates, 'C' clears, 'q' quits, anything else is typed."""
    settings = Settings.from_env()
    display = Display(settings=settings)
    console.print("[dim]'=' calculate · 'C' clear · 'q' quit[/dim]")

    while True:
        try:
            line = console.input(escape(settings.prompt))
        except EOFError:
            break

        key = line.strip()
        if key == "q":
            break
        if key == "C":
            display.clear()
        elif key == "=":
            result = display.calculate()
            if not result.ok:
                console.print(f"  [dim]{result.error.value}[/dim]")
        else:
            display.append(line)

        typer.echo(display.text)


if __name__ == "__main__":
    app()
