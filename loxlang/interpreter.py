"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
literals, arithmetic, comparison and equality, string concatenation, variables and output
statements.

1. Execution Model
The interpreter evaluates the AST in a post-order manner: the children of a node are evaluated
before the node itself. Statements are executed via `execute()` and expressions are evaluated
using `evaluate()`. Both dispatch with `match` over the node dataclasses.

2. Environment
Variables live in a single flat `Environment`. The same environment may be reused across
several calls to `interpret()`, which is how REPL lines share variables.

3. Values
Values are Python floats (numbers), strings and booleans; ``None`` stands for nil. Truthiness
follows Lox: nil and false are falsey, everything else is truthy. Equality never raises; values
of different types are simply unequal.

4. Error Handling
Runtime errors (undefined variables, bad operand types, division by zero) are raised as
`RuntimeException` subclasses. `interpret()` stops at the first one, reports it and returns;
output already printed by earlier statements stands. Any other exception is not a Lox error
and is left to propagate to the caller.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

from typing import Optional, TextIO

from loxlang.diagnostics import Reporter
from loxlang.environment import Environment
from loxlang.exceptions import (
    DivisionByZeroException,
    OperandTypeException,
    RuntimeException,
)
from loxlang.lexer import LiteralValue, Token, TokenType
from loxlang.nodes import (
    Assign,
    Binary,
    Expr,
    Expression,
    Grouping,
    Literal,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
)


Value = Optional[LiteralValue]


def is_number(value: Value) -> bool:
    # bool is not a float subclass, so True/False are excluded here
    return isinstance(value, float)


def is_truthy(value: Value) -> bool:
    """
    Return the Lox truthiness of a value.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Value, right: Value) -> bool:
    """
    Compare two values. Values of different types are never equal.
    """
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value: Value) -> str:
    """
    Convert a value to the text ``print`` writes.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return value


class Interpreter:
    """
    Tree-walk interpreter for Lox.
    """
    def __init__(
        self,
        reporter: Reporter,
        environment: Optional[Environment] = None,
        output: Optional[TextIO] = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            reporter (Reporter): Receives runtime errors.
            environment (Environment): Variable bindings; a fresh one is
                created when omitted.
            output (TextIO): Sink for ``print`` output. Defaults to stdout.
        """
        self.reporter = reporter
        self.environment = environment if environment is not None else Environment()
        self.output = output

    def interpret(self, statements: list[Stmt], echo: bool = False) -> None:
        """
        Execute statements in order, stopping at the first runtime error.

        Parameters:
            statements (list): The statements to execute.
            echo (bool): Also print the value of expression statements, as the
                REPL does for a bare expression.
        """
        try:
            for stmt in statements:
                self.execute(stmt, echo)
        except RuntimeException as exc:
            self.reporter.runtime_error(exc)

    def execute(self, stmt: Stmt, echo: bool = False) -> None:
        """
        Execute a single statement.

        Raises:
            RuntimeException: On any Lox runtime error.
            TypeError: For nodes that are not statements.
        """
        match stmt:
            case Expression(expression):
                value = self.evaluate(expression)
                if echo:
                    self._write(stringify(value))
            case Print(expression):
                self._write(stringify(self.evaluate(expression)))
            case Var(name, initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case _:
                raise TypeError(f"Unknown statement type: {stmt!r}")

    def evaluate(self, expr: Expr) -> Value:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            RuntimeException: On any Lox runtime error.
            RuntimeError: If the node is not a valid expression (for example an
                ``Invalid`` node left behind by error recovery).
        """
        match expr:
            case Literal(value):
                return value
            case Grouping(inner):
                return self.evaluate(inner)
            case Variable(name):
                return self.environment.get(name)
            case Assign(name, value_expr):
                value = self.evaluate(value_expr)
                self.environment.define(name.lexeme, value)
                return value
            case Unary(operator, right):
                return self._eval_unary(operator, self.evaluate(right))
            case Binary(left, operator, right):
                lhs = self.evaluate(left)
                rhs = self.evaluate(right)
                return self._eval_binary(operator, lhs, rhs)
        raise RuntimeError(f"Invalid expression node: {expr!r}")

    def _eval_unary(self, operator: Token, operand: Value) -> Value:
        match operator.type:
            case TokenType.BANG:
                return not is_truthy(operand)
            case TokenType.MINUS:
                if not is_number(operand):
                    raise OperandTypeException(operator, "Operand must be a number.")
                return -operand
        raise RuntimeError(f"Unknown unary operator '{operator.lexeme}'")

    def _eval_binary(self, operator: Token, lhs: Value, rhs: Value) -> Value:
        match operator.type:
            # Arithmetic
            case TokenType.PLUS:
                return self._add(operator, lhs, rhs)
            case TokenType.MINUS:
                self._check_number_operands(operator, lhs, rhs)
                return lhs - rhs
            case TokenType.STAR:
                self._check_number_operands(operator, lhs, rhs)
                return lhs * rhs
            case TokenType.SLASH:
                self._check_number_operands(operator, lhs, rhs)
                if rhs == 0.0:
                    raise DivisionByZeroException(operator)
                return lhs / rhs
            # Comparison
            case TokenType.GREATER:
                self._check_number_operands(operator, lhs, rhs)
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                self._check_number_operands(operator, lhs, rhs)
                return lhs >= rhs
            case TokenType.LESS:
                self._check_number_operands(operator, lhs, rhs)
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                self._check_number_operands(operator, lhs, rhs)
                return lhs <= rhs
            # Equality
            case TokenType.EQUAL_EQUAL:
                return is_equal(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not is_equal(lhs, rhs)
        raise RuntimeError(f"Unknown binary operator '{operator.lexeme}'")

    @staticmethod
    def _add(operator: Token, lhs: Value, rhs: Value) -> Value:
        if is_number(lhs) and is_number(rhs):
            return lhs + rhs
        if isinstance(lhs, str) or isinstance(rhs, str):
            return stringify(lhs) + stringify(rhs)
        raise OperandTypeException(
            operator,
            "Operands must be two numbers, two strings, or convertible to string.",
        )

    @staticmethod
    def _check_number_operands(operator: Token, lhs: Value, rhs: Value) -> None:
        if not (is_number(lhs) and is_number(rhs)):
            raise OperandTypeException(operator, "Operands must be numbers.")

    def _write(self, text: str) -> None:
        print(text, file=self.output)
