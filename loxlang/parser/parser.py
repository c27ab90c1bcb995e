"""Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

Syntax errors are reported to the diagnostics reporter as soon as they are
found. A failing sub-parse raises `ParseException`, which is caught at the
declaration level; the parser then synchronizes by discarding tokens up to
the next statement boundary and keeps going, so one mistake yields one
report. If any error was reported during the run, `parse()` returns an empty
statement list so nothing malformed reaches the interpreter.


File: parser.py
Version: 0.1.0
License: MIT
"""

from typing import Optional

from loxlang.diagnostics import Reporter
from loxlang.exceptions import ParseErrorKind, ParseException
from loxlang.lexer import Token, TokenType
from loxlang.nodes import Expr, Expression, Print, Stmt, Var

from . import expressions as _expr
from . import statements as _stmt


# Tokens that start a new statement; synchronization stops in front of them.
STATEMENT_BOUNDARIES = (
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
)


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], reporter: Reporter):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            reporter (Reporter): Receives syntax errors.
        """
        self.tokens = tokens
        self.reporter = reporter
        self.position = 0

    # Token stream helpers
    def peek(self) -> Token:
        """
        Return the current token without consuming it.
        """
        return self.tokens[self.position]

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        if not self.is_at_end():
            self.position += 1
        return self.previous()

    def check(self, *token_types: TokenType) -> bool:
        """
        Return True if the current token has one of the given types.
        """
        if self.is_at_end():
            return False
        return self.peek().type in token_types

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it has one of the given types.
        """
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): Error message used when the token does not match.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(
        self,
        token: Token,
        message: str,
        kind: ParseErrorKind = ParseErrorKind.REGULAR,
    ) -> ParseException:
        """
        Report a syntax error and return the exception for the caller to
        raise (or drop, when the parser is still in a good state).
        """
        self.reporter.error_at(token, message)
        return ParseException(token, message, kind)

    def synchronize(self) -> None:
        """
        Discard tokens until just after a semicolon or just before a token
        that starts a new statement.
        """
        self.advance()

        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_BOUNDARIES:
                return
            self.advance()


    # Expression wrappers
    def primary(self) -> Expr:
        """
        Parse a literal, variable reference, or parenthesized group.
        """
        return _expr.parse_primary(self)

    def unary(self) -> Expr:
        """
        Parse a prefix unary expression.
        """
        return _expr.parse_unary(self)

    def factor(self) -> Expr:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def term(self) -> Expr:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def comparison(self) -> Expr:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def equality(self) -> Expr:
        """
        Parse an equality expression.
        """
        return _expr.parse_equality(self)

    def assignment(self) -> Expr:
        """
        Parse an assignment expression.
        """
        return _expr.parse_assignment(self)

    def expression(self) -> Expr:
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)


    # Statement wrappers
    def declaration(self) -> Optional[Stmt]:
        """
        Parse a declaration, synchronizing on error.
        """
        return _stmt.parse_declaration(self)

    def var_declaration(self) -> Var:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def statement(self) -> Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def print_statement(self) -> Print:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def expression_statement(self) -> Expression:
        """
        Parse an expression statement.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list[Stmt]:
        """
        Parse the full input into a list of statements.

        Returns:
            list: The parsed statements, or an empty list if any lexical or
            syntax error has been reported for this run.
        """
        statements = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)

        if self.reporter.had_error:
            return []
        return statements
