"""AST printer.

Renders expressions and statements as parenthesized prefix forms, which is
handy when debugging the parser:

    (* (group (+ 1 2)) 3)


File: printer.py
Version: 0.1.0
License: MIT
"""

from loxlang.interpreter import stringify
from loxlang.nodes import (
    Assign,
    Binary,
    Expr,
    Expression,
    Grouping,
    Invalid,
    Literal,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
)


def _parenthesize(name: str, *parts: Expr) -> str:
    return "(" + name + "".join(" " + format_expression(part) for part in parts) + ")"


def format_expression(expr: Expr) -> str:
    """
    Convert an expression back to a readable string for debugging.
    """
    match expr:
        case Literal(value):
            return stringify(value)
        case Grouping(inner):
            return _parenthesize("group", inner)
        case Unary(operator, right):
            return _parenthesize(operator.lexeme, right)
        case Binary(left, operator, right):
            return _parenthesize(operator.lexeme, left, right)
        case Variable(name):
            return name.lexeme
        case Assign(name, value):
            return _parenthesize(f"= {name.lexeme}", value)
        case Invalid():
            return "<invalid>"
    raise TypeError(f"Unknown expression type: {expr!r}")


def format_statement(stmt: Stmt) -> str:
    """
    Convert a statement to a readable string for debugging.
    """
    match stmt:
        case Expression(expression):
            return _parenthesize(";", expression)
        case Print(expression):
            return _parenthesize("print", expression)
        case Var(name, None):
            return f"(var {name.lexeme})"
        case Var(name, initializer):
            return _parenthesize(f"var {name.lexeme}", initializer)
    raise TypeError(f"Unknown statement type: {stmt!r}")
