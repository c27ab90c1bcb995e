"""Errors.

Syntax errors are raised by the parser as :class:`ParseException` and caught
at the declaration level, where the parser synchronizes. Runtime errors all
derive from :class:`RuntimeException` and carry the offending token so they can
be reported with a line number without re-scanning.


File: exceptions.py
Version: 0.1.0
License: MIT
"""

from enum import Enum

from loxlang.lexer import Token


class ParseErrorKind(Enum):
    """
    Classes of syntax error that need different recovery.
    """
    REGULAR = "regular"
    BINARY_WITHOUT_LEFT_OPERAND = "binary_without_left_operand"


class ParseException(Exception):
    """
    Error for a failed sub-parse.
    """
    def __init__(self, token: Token, message: str, kind: ParseErrorKind = ParseErrorKind.REGULAR):
        self.token = token
        self.message = message
        self.kind = kind
        super().__init__(message)


class RuntimeException(Exception):
    """
    Error raised while evaluating statements.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        self.message = message
        super().__init__(message)

    @property
    def line(self) -> int:
        return self.token.line


class UndefinedVariableException(RuntimeException):
    """
    Error for undefined variables.
    """
    def __init__(self, token: Token):
        self.varname = token.lexeme
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class OperandTypeException(RuntimeException):
    """
    Error for operands of the wrong type.
    """
    pass


class DivisionByZeroException(RuntimeException):
    """
    Error for division by a zero right operand.
    """
    def __init__(self, token: Token):
        super().__init__(token, "Attempted to divide by zero.")
