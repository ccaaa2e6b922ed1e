import io

from config.config import REPL_CONFIG
from interpreter import LineEvaluator
from main import handle_line, run


def run_lines(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue().splitlines()


def test_session():
    lines = run_lines(
        "x = 4 + 1\n"
        "x * 2\n"
        "/help\n"
        "/foo\n"
        "\n"
        "y + 1\n"
        "0.1 + 0.2\n"
        "10 / 4\n"
        "/exit\n"
        "5 + 5\n"
    )
    assert lines == (
        ["10"]
        + REPL_CONFIG["help_text"].splitlines()
        + ["Unknown command", "Unknown variable: y", "0.3", "2.5", "Bye!"]
    )


def test_eof_without_exit():
    assert run_lines("1 + 1\n2 3") == ["2", "Invalid expression"]


def test_handle_line_outputs():
    evaluator = LineEvaluator()
    assert handle_line("   ", evaluator) is None
    assert handle_line("a = 2", evaluator) is None
    assert handle_line("a * 21", evaluator) == "42"
    assert handle_line("a = 1 +", evaluator) == "invalid postfix expression"
    assert handle_line("1 / 0", evaluator) == "Division by zero"
    assert handle_line("4b = 1", evaluator) == "Invalid identifier"
    assert handle_line("x1 + 2", evaluator) == "Invalid Identifier: x1"
    assert handle_line("a = b1", evaluator) == "Invalid Identifier: b1"


def test_prompt_is_written():
    out = io.StringIO()
    run(io.StringIO("1 + 2\n"), out, prompt="> ")
    assert out.getvalue() == "> 3\n> "
