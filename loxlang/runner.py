"""Pipeline glue.

Workflow:
1. The scanner turns source text into tokens.
2. The parser turns tokens into statements.
3. If no lexical or syntax error was reported, the interpreter executes the
   statements against its environment.

The reporter attached to the interpreter is threaded through every stage and
returned, so the caller can decide what the outcome of the run was.


File: runner.py
Version: 0.1.0
License: MIT
"""

from loxlang.diagnostics import Reporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.nodes import Expression
from loxlang.parser import Parser
from loxlang.printer import format_statement


def debug_print_tokens(tokens) -> None:
    """
    Print tokenized source.
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print(" ")


def debug_print_ast(statements) -> None:
    """
    Print the parsed AST.
    """
    print("\nAST:\n")
    for stmt in statements:
        print(format_statement(stmt))
    print(" ")


def run_source(
    source: str,
    interpreter: Interpreter,
    echo: bool = False,
    debug_tokens: bool = False,
    debug_ast: bool = False,
) -> Reporter:
    """
    Scan, parse and execute one unit of source text.

    Parameters:
        source (str): The source text.
        interpreter (Interpreter): Executes the statements; its reporter and
            environment are used for this run.
        echo (bool): Print the value of a lone expression statement.
        debug_tokens (bool): Dump the scanned tokens before parsing.
        debug_ast (bool): Dump the parsed statements before execution.

    Returns:
        Reporter: The interpreter's reporter, holding this run's error state.
    """
    reporter = interpreter.reporter

    tokens = tokenize(source, reporter)
    if debug_tokens:
        debug_print_tokens(tokens)

    statements = Parser(tokens, reporter).parse()

    # stop if there are lexical or syntax errors
    if reporter.had_error:
        return reporter

    if debug_ast:
        debug_print_ast(statements)

    echo = echo and len(statements) == 1 and isinstance(statements[0], Expression)
    interpreter.interpret(statements, echo=echo)
    return reporter
