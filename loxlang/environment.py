"""Variable environment for Lox.

A single flat mapping from variable name to value. Looking up a name that was
never defined is a runtime error rather than a parse-time one, since programs
are checked in a single pass. Defining a name that already exists simply
overwrites it, as at a Scheme top level.


File: environment.py
Version: 0.1.0
License: MIT
"""

from typing import Optional

from loxlang.exceptions import UndefinedVariableException
from loxlang.lexer import LiteralValue, Token


class Environment:
    """
    Name-to-value bindings for one program run (or one REPL session).
    """
    def __init__(self):
        self.values: dict[str, Optional[LiteralValue]] = {}

    def define(self, name: str, value: Optional[LiteralValue]) -> None:
        """
        Bind ``name`` to ``value``, replacing any existing binding.
        """
        self.values[name] = value

    def get(self, name: Token) -> Optional[LiteralValue]:
        """
        Return the value bound to the token's lexeme.

        Raises:
            UndefinedVariableException: If the name has never been defined.
        """
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        raise UndefinedVariableException(name)

    def __contains__(self, name: str) -> bool:
        """
        Return True if ``name`` has a binding, even one holding nil.
        """
        return name in self.values
