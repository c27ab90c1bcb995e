"""
Utility functions shared across Lox Language tests.
"""
from loxlang.diagnostics import Reporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.runner import run_source


def scan(source: str, reporter: Reporter | None = None):
    """
    Scan source code and return the tokens.
    """
    return tokenize(source, reporter or Reporter())


def parse_source(source: str, reporter: Reporter | None = None):
    """
    Parse source code and return the AST.
    """
    reporter = reporter or Reporter()
    tokens = tokenize(source, reporter)
    return Parser(tokens, reporter).parse()


def parse_expression(source: str):
    """
    Parse a single expression statement and return its expression node.
    """
    statements = parse_source(source if source.rstrip().endswith(";") else source + ";")
    assert len(statements) == 1
    return statements[0].expression


def run(source: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = interpreter or Interpreter(Reporter())
    run_source(source, interpreter)
    return interpreter
