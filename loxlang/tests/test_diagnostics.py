import io

from loxlang.diagnostics import Reporter
from loxlang.exceptions import RuntimeException
from loxlang.lexer import Token, TokenType


def test_error_formats():
    stream = io.StringIO()
    reporter = Reporter(stream)
    reporter.error(3, "Unexpected character: $")
    reporter.error_at(Token(TokenType.SEMICOLON, ";", None, 4), "Expect expression.")
    reporter.error_at(Token.end_of_file(5), "Expect ';' after value.")
    assert stream.getvalue().splitlines() == [
        "[line 3] Error: Unexpected character: $",
        "[line 4] Error at ';': Expect expression.",
        "[line 5] Error at end: Expect ';' after value.",
    ]
    assert reporter.had_error
    assert reporter.error_count == 3
    assert not reporter.had_runtime_error


def test_runtime_error_format():
    stream = io.StringIO()
    reporter = Reporter(stream)
    token = Token(TokenType.SLASH, "/", None, 7)
    reporter.runtime_error(RuntimeException(token, "Attempted to divide by zero."))
    assert stream.getvalue() == "Attempted to divide by zero.\n[line 7]\n"
    assert reporter.had_runtime_error
    assert not reporter.had_error


def test_reset_clears_state():
    reporter = Reporter(io.StringIO())
    reporter.error(1, "boom")
    reporter.runtime_error(RuntimeException(Token.end_of_file(1), "bang"))
    reporter.reset()
    assert not reporter.had_error
    assert not reporter.had_runtime_error
    assert reporter.error_count == 0


def test_defaults_to_stderr(capsys):
    Reporter().error(1, "to stderr")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[line 1] Error: to stderr\n"
