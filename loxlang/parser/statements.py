"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle declarations, print statements and expression statements.

Grammar:

    program     -> declaration* EOF
    declaration -> "var" IDENTIFIER ( "=" expression )? ";" | statement
    statement   -> "print" expression ";" | expression ";"


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from loxlang.exceptions import ParseException
from loxlang.lexer import TokenType
from loxlang.nodes import Expression, Print, Stmt, Var

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> Optional[Stmt]:
    """
    Parse a declaration, recovering from syntax errors.

    Syntax:
        var <identifier> [= <expression>] ; | <statement>

    Args:
        parser: The parser instance.

    Returns:
        The statement node, or None when the declaration was malformed and
        the parser skipped ahead to the next statement boundary.
    """
    try:
        if parser.match(TokenType.VAR):
            return parser.var_declaration()
        return parser.statement()
    except ParseException:
        parser.synchronize()
        return None


def parse_var_declaration(parser: 'Parser') -> Var:
    """
    Parse the remainder of a 'var' declaration.

    Syntax:
        var <identifier> [= <expression>] ;

    Args:
        parser: The parser instance, positioned after the 'var' keyword.

    Returns:
        Var: the declaration node; ``initializer`` is None when omitted.
    """
    name = parser.consume(TokenType.IDENTIFIER, "Expect variable name.")

    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parser.expression()

    parser.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return Var(name, initializer)


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Syntax:
        print <expression> ; | <expression> ;
    """
    if parser.match(TokenType.PRINT):
        return parser.print_statement()
    return parser.expression_statement()


def parse_print(parser: 'Parser') -> Print:
    """Parse the remainder of a 'print' statement."""
    value = parser.expression()
    parser.consume(TokenType.SEMICOLON, "Expect ';' after value.")
    return Print(value)


def parse_expression_statement(parser: 'Parser') -> Expression:
    """Parse an expression followed by a semicolon."""
    value = parser.expression()
    parser.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
    return Expression(value)
