"""Diagnostics reporter.

A :class:`Reporter` is passed to the scanner, parser and interpreter of a run
and records whether a lexical/syntax error or a runtime error occurred. The
driver inspects it after each run to decide what to do next, and resets it
between independent inputs (e.g. REPL lines).


File: diagnostics.py
Version: 0.1.0
License: MIT
"""

import sys
from typing import Optional, TextIO

from loxlang.exceptions import RuntimeException
from loxlang.lexer import Token, TokenType


class Reporter:
    """
    Collects error state for one run of the pipeline.
    """
    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the reporter.

        Parameters:
            stream (TextIO): Where diagnostics are written. Defaults to
                ``sys.stderr`` looked up at report time.
        """
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.error_count = 0

    def reset(self) -> None:
        """
        Clear all error state.
        """
        self.had_error = False
        self.had_runtime_error = False
        self.error_count = 0

    def error(self, line: int, message: str) -> None:
        """
        Report a lexical error on ``line``.
        """
        self.report(line, "", message)

    def error_at(self, token: Token, message: str) -> None:
        """
        Report a syntax error located at ``token``.
        """
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str) -> None:
        self._write(f"[line {line}] Error{where}: {message}")
        self.had_error = True
        self.error_count += 1

    def runtime_error(self, error: RuntimeException) -> None:
        """
        Report a runtime error raised by the interpreter.
        """
        self._write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def _write(self, text: str) -> None:
        print(text, file=self.stream or sys.stderr)
