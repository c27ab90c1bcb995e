"""Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity.

Grammar, lowest to highest precedence:

    expression  -> assignment
    assignment  -> IDENTIFIER "=" assignment | equality
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> NUMBER | STRING | "true" | "false" | "nil"
                 | IDENTIFIER | "(" expression ")"


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Callable

from loxlang.exceptions import ParseErrorKind, ParseException
from loxlang.lexer import TokenType
from loxlang.nodes import (
    Assign,
    Binary,
    Expr,
    Grouping,
    Invalid,
    Literal,
    Unary,
    Variable,
)

if TYPE_CHECKING:
    from loxlang.parser import Parser


EQUALITY_OPERATORS = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
COMPARISON_OPERATORS = (
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
)
TERM_OPERATORS = (TokenType.MINUS, TokenType.PLUS)
FACTOR_OPERATORS = (TokenType.SLASH, TokenType.STAR)

BINARY_OPERATORS = EQUALITY_OPERATORS + COMPARISON_OPERATORS + TERM_OPERATORS + FACTOR_OPERATORS


def _parse_operand(parser: 'Parser', operand: Callable[[], Expr]) -> Expr:
    """
    Parse one operand, recovering when it starts with a stray binary operator.

    Recovery only applies when the stray operator is the very token this
    operand started at; errors raised deeper (e.g. inside a parenthesized
    group) have already been handled there or belong to a regular failure.
    The operator and the operand following it are skipped and an ``Invalid``
    node stands in for them. The error has already been reported, so the
    enclosing statement carries on.
    """
    start = parser.position
    try:
        return operand()
    except ParseException as exc:
        if exc.kind is not ParseErrorKind.BINARY_WITHOUT_LEFT_OPERAND:
            raise
        if parser.position != start:
            raise
        parser.advance()
        _parse_operand(parser, operand)
        return Invalid()


def _parse_left_associative(
    parser: 'Parser',
    operators: tuple[TokenType, ...],
    operand: Callable[[], Expr],
) -> Expr:
    """
    Parse ``operand ( <operator> operand )*`` into a left-leaning tree.
    """
    expr = _parse_operand(parser, operand)

    while parser.match(*operators):
        operator = parser.previous()
        right = _parse_operand(parser, operand)
        expr = Binary(expr, operator, right)
    return expr


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expr:
    """Parse a literal, variable reference, or parenthesized expression."""
    if parser.match(TokenType.FALSE):
        return Literal(False)
    if parser.match(TokenType.TRUE):
        return Literal(True)
    if parser.match(TokenType.NIL):
        return Literal(None)

    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return Literal(parser.previous().literal)

    if parser.match(TokenType.IDENTIFIER):
        return Variable(parser.previous())

    if parser.match(TokenType.LEFT_PAREN):
        expr = parser.expression()
        parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
        return Grouping(expr)

    if parser.check(*BINARY_OPERATORS):
        raise parser.error(
            parser.peek(),
            "Binary operator without left-hand operand.",
            ParseErrorKind.BINARY_WITHOUT_LEFT_OPERAND,
        )

    raise parser.error(parser.peek(), "Expect expression.")


def parse_unary(parser: 'Parser') -> Expr:
    """Parse a prefix '!' or '-' expression."""
    if parser.match(TokenType.BANG, TokenType.MINUS):
        operator = parser.previous()
        right = _parse_operand(parser, parser.unary)
        return Unary(operator, right)
    return parser.primary()


def parse_factor(parser: 'Parser') -> Expr:
    """Parse multiplication and division expressions."""
    return _parse_left_associative(parser, FACTOR_OPERATORS, parser.unary)


def parse_term(parser: 'Parser') -> Expr:
    """Parse addition and subtraction expressions."""
    return _parse_left_associative(parser, TERM_OPERATORS, parser.factor)


def parse_comparison(parser: 'Parser') -> Expr:
    """Parse comparison expressions (<, <=, >, >=)."""
    return _parse_left_associative(parser, COMPARISON_OPERATORS, parser.term)


def parse_equality(parser: 'Parser') -> Expr:
    """Parse equality expressions (==, !=)."""
    return _parse_left_associative(parser, EQUALITY_OPERATORS, parser.comparison)


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse a right-associative assignment.

    Only a bare variable reference is a valid target. Any other left-hand
    side is reported without raising, and the left expression is returned
    so the statement can still be completed.
    """
    expr = parser.equality()

    if parser.match(TokenType.EQUAL):
        equals = parser.previous()
        value = parser.assignment()

        if isinstance(expr, Variable):
            return Assign(expr.name, value)

        parser.error(equals, "Invalid assignment target.")

    return expr


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> Expr:
    """Parse an expression starting from the lowest-precedence rule."""
    return parser.assignment()
