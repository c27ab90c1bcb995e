"""AST node definitions for Lox.

Expressions and statements are frozen dataclasses. The parser builds them and
the interpreter and printer consume them with ``match`` over the node class.
Each node owns its children; there is no sharing between subtrees.

``Invalid`` is only produced while recovering from a syntax error. A parse
that produced one has reported an error, so it is never executed.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from loxlang.lexer import LiteralValue, Token


# ---- Expressions ----

@dataclass(frozen=True)
class Literal:
    value: Optional[LiteralValue]


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary:
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping:
    expression: Expr


@dataclass(frozen=True)
class Variable:
    name: Token


@dataclass(frozen=True)
class Assign:
    name: Token
    value: Expr


@dataclass(frozen=True)
class Invalid:
    pass


Expr = Union[Literal, Unary, Binary, Grouping, Variable, Assign, Invalid]


# ---- Statements ----

@dataclass(frozen=True)
class Expression:
    expression: Expr


@dataclass(frozen=True)
class Print:
    expression: Expr


@dataclass(frozen=True)
class Var:
    name: Token
    initializer: Optional[Expr]


Stmt = Union[Expression, Print, Var]


__all__ = [
    "Literal",
    "Unary",
    "Binary",
    "Grouping",
    "Variable",
    "Assign",
    "Invalid",
    "Expr",
    "Expression",
    "Print",
    "Var",
    "Stmt",
]
