"""Lexer for Lox.

The scanner walks the source text one character at a time and produces a flat
list of :class:`Token` objects terminated by a single ``EOF`` token.

1. Token Definitions
Token types are members of :class:`TokenType`. They cover single-character
punctuation, one-or-two character operators (``!=``, ``==``, ``<=``, ``>=``),
literals (identifiers, strings, numbers) and the reserved keywords.

2. Scanning
Each lexeme starts at ``start`` and grows by advancing ``current``. Operators
that may be followed by ``=`` are extended greedily using a single character
of lookahead. Whitespace is discarded and newlines bump the line counter.

3. Comments
``//`` starts a line comment. ``/*`` starts a block comment which may nest, so
``/* /* */ */`` only closes once both closers have been seen.

4. Errors
Lexical errors (unexpected characters, unterminated strings, malformed
numbers) are handed to the diagnostics reporter and scanning carries on. The
token list is always terminated normally.


File: lexer.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from loxlang.diagnostics import Reporter


LiteralValue = Union[float, str, bool]


class TokenType(str, Enum):
    """
    Enumeration of lexeme categories.
    """

    # Single-character tokens
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"
    STAR = "STAR"

    # One or two character tokens
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "AND"
    CLASS = "CLASS"
    ELSE = "ELSE"
    FALSE = "FALSE"
    FOR = "FOR"
    FUN = "FUN"
    IF = "IF"
    NIL = "NIL"
    OR = "OR"
    PRINT = "PRINT"
    RETURN = "RETURN"
    SUPER = "SUPER"
    THIS = "THIS"
    TRUE = "TRUE"
    VAR = "VAR"
    WHILE = "WHILE"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHARACTER_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# character -> (type without '=', type with '=')
ONE_OR_TWO_CHARACTER_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token: its type, the source lexeme, an optional
    literal value and the 1-based line it was found on.
    """
    type: TokenType
    lexeme: str
    literal: Optional[LiteralValue]
    line: int

    def __str__(self) -> str:
        """
        Return the debug form used when dumping scanned tokens.
        """
        literal = "nil" if self.literal is None else self.literal
        return f"{self.type.value} {self.lexeme} {literal}"

    @classmethod
    def end_of_file(cls, line: int) -> Token:
        """
        Build the terminating EOF token.
        """
        return cls(TokenType.EOF, "", None, line)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    Converts Lox source text into a list of tokens.
    """

    def __init__(self, source: str, reporter: Reporter):
        """
        Initialize the scanner.

        Parameters:
            source (str): The source text to scan.
            reporter (Reporter): Receives lexical errors.
        """
        self.source = source
        self.reporter = reporter
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source and return the token list.

        Returns:
            list[Token]: The scanned tokens, always ending with one EOF token.
        """
        while not self.is_at_end():
            # We are at the beginning of the next lexeme.
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token.end_of_file(self.line))
        return self.tokens

    def scan_token(self) -> None:
        """
        Scan a single lexeme starting at ``self.start``.
        """
        char = self.advance()

        if char in SINGLE_CHARACTER_TOKENS:
            self.add_token(SINGLE_CHARACTER_TOKENS[char])
        elif char in ONE_OR_TWO_CHARACTER_TOKENS:
            single, double = ONE_OR_TWO_CHARACTER_TOKENS[char]
            self.add_token(double if self.match("=") else single)
        elif char == "/":
            if self.match("/"):
                # A comment goes until the end of the line.
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            elif self.match("*"):
                self.block_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self.string()
        elif _is_digit(char):
            self.number()
        elif _is_alpha(char):
            self.identifier()
        else:
            self.reporter.error(self.line, f"Unexpected character: {char}")

    def block_comment(self) -> None:
        """
        Skip a (possibly nested) block comment. The opening ``/*`` has
        already been consumed.
        """
        depth = 1
        while depth > 0 and not self.is_at_end():
            char = self.peek()
            following = self.peek_next()
            if char == "/" and following == "*":
                depth += 1
                self.advance()
                self.advance()
            elif char == "*" and following == "/":
                depth -= 1
                self.advance()
                self.advance()
            else:
                if char == "\n":
                    self.line += 1
                self.advance()

    def string(self) -> None:
        """
        Scan a string literal. The opening quote has already been consumed.
        """
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.reporter.error(self.line, "Unterminated string.")
            return

        # The closing ".
        self.advance()

        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, value)

    def number(self) -> None:
        """
        Scan a number literal: digits with an optional fractional part.
        """
        while _is_digit(self.peek()):
            self.advance()

        # Look for a fractional part.
        if self.peek() == "." and _is_digit(self.peek_next()):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()

        text = self.source[self.start:self.current]
        try:
            value = float(text)
        except ValueError:
            self.reporter.error(self.line, "Unexpected invalid number.")
            return
        self.add_token(TokenType.NUMBER, value)

    def identifier(self) -> None:
        """
        Scan an identifier and classify it as a keyword when reserved.
        """
        while _is_alphanumeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def match(self, expected: str) -> bool:
        """
        Consume the next character only if it equals ``expected``.
        """
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        """
        Return the current character without consuming it.
        """
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        """
        Return the character after the current one without consuming it.
        """
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def add_token(self, type_: TokenType, literal: Optional[LiteralValue] = None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type_, lexeme, literal, self.line))


def tokenize(source: str, reporter: Reporter) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.
        reporter (Reporter): Receives lexical errors.

    Returns:
        list[Token]: A list of Token instances ending with an EOF token.
    """
    return Scanner(source, reporter).scan_tokens()
