"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file given on the command line.
2. The Scanner tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Run with no script to enter interactive mode (REPL). Set ``LOXDEBUG`` in the
environment to dump tokens and the AST for every run.
"""
import argparse
import os
import sys

from loxlang.diagnostics import Reporter
from loxlang.interpreter import Interpreter
from loxlang.runner import run_source

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.
    """
    parser = argparse.ArgumentParser(
        prog="lox",
        description="Lox Language Interpreter. Run with no script to enter the REPL.",
    )
    parser.add_argument(
        "script",
        nargs="?",
        help="Path to a Lox source file to execute.",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the scanned tokens before parsing.",
    )
    parser.add_argument(
        "--ast",
        action="store_true",
        help="Print the parsed AST before evaluation.",
    )
    return parser


def run_script(script_name: str, debug_tokens: bool, debug_ast: bool) -> int:
    """
    Run a Lox script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Could not read {script_name}: {e.strerror}", file=sys.stderr)
        return EXIT_NO_INPUT

    interpreter = Interpreter(Reporter())
    reporter = run_source(
        code,
        interpreter,
        debug_tokens=debug_tokens,
        debug_ast=debug_ast,
    )

    if reporter.had_error:
        return EXIT_DATA_ERROR
    if reporter.had_runtime_error:
        return EXIT_SOFTWARE
    return 0


def run_repl(debug_tokens: bool, debug_ast: bool) -> int:
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    reporter = Reporter()
    interpreter = Interpreter(reporter)
    while True:
        try:
            line = input("> ")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break

        if line.strip() in {"exit", "quit"}:
            break
        if not line.strip():
            continue

        # Errors on one line must not leak into the next.
        reporter.reset()
        run_source(
            line,
            interpreter,
            echo=True,
            debug_tokens=debug_tokens,
            debug_ast=debug_ast,
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script path: run it; exit with 65 on a syntax error and 70 on a
      runtime error.
    - Bad arguments: print usage and exit with 64.
    """
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_USAGE if e.code else 0

    debug = bool(os.environ.get("LOXDEBUG"))
    debug_tokens = args.tokens or debug
    debug_ast = args.ast or debug

    if args.script is None:
        return run_repl(debug_tokens, debug_ast)
    return run_script(args.script, debug_tokens, debug_ast)


if __name__ == "__main__":
    sys.exit(main())
