"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from rpncalc.__main__ import app


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("RPNCALC_ERROR_TEXT", raising=False)
    monkeypatch.delenv("RPNCALC_PROMPT", raising=False)
    return CliRunner()


# --- eval ---

def test_eval_prints_result(runner):
    result = runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "14"


def test_eval_leading_minus(runner):
    result = runner.invoke(app, ["eval", "--", "-5 + 3"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "-2"


def test_eval_error_prints_indicator(runner):
    result = runner.invoke(app, ["eval", "5 / 0"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "Error"


def test_eval_error_text_from_env(runner, monkeypatch):
    monkeypatch.setenv("RPNCALC_ERROR_TEXT", "Syntax?")
    result = runner.invoke(app, ["eval", "1..2"])
    assert result.exit_code == 1
    assert "Syntax?" in result.stdout


def test_eval_explain_shows_stages(runner):
    result = runner.invoke(app, ["eval", "(2+3)*4", "--explain"])
    assert result.exit_code == 0
    assert "2 3 + 4 *" in result.output
    assert "20" in result.stdout


def test_eval_explain_shows_error_kind(runner):
    result = runner.invoke(app, ["eval", "(1+2", "-x"])
    assert result.exit_code == 1
    assert "MismatchedParentheses" in result.output


# --- tokens / rpn ---

def test_tokens_table(runner):
    result = runner.invoke(app, ["tokens", "--", "-3+4"])
    assert result.exit_code == 0
    assert "number" in result.output
    assert "symbol" in result.output


def test_tokens_invalid_character(runner):
    result = runner.invoke(app, ["tokens", "2x"])
    assert result.exit_code == 1
    assert "InvalidCharacter" in result.output


def test_rpn(runner):
    result = runner.invoke(app, ["rpn", "3 + 4 * 2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3 4 2 * +"


def test_rpn_mismatched(runner):
    result = runner.invoke(app, ["rpn", "1+2)"])
    assert result.exit_code == 1
    assert "MismatchedParentheses" in result.output


# --- repl ---

def displays(output: str) -> list[str]:
    """Display texts echoed by the repl, with any interleaved prompt removed."""
    return [line.rsplit("> ", 1)[-1] for line in output.splitlines()]


def test_repl_keypad_session(runner):
    result = runner.invoke(app, ["repl"], input="2*\n-3\n=\n+1\n=\nC\nq\n")
    assert result.exit_code == 0
    lines = displays(result.stdout)
    assert "2*-3" in lines
    assert "-6" in lines
    assert "-6+1" in lines
    assert "-5" in lines
    assert "" in lines


def test_repl_error_and_eof(runner):
    result = runner.invoke(app, ["repl"], input="1/0\n=\n")
    assert result.exit_code == 0
    assert "Error" in displays(result.stdout)
