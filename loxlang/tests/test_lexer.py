from loxlang.diagnostics import Reporter
from loxlang.lexer import Token, TokenType
from loxlang.tests.utils import scan


def types_of(tokens):
    return [tok.type for tok in tokens]


def test_single_and_double_character_tokens():
    tokens = scan("(){},.-+;*/ ! != = == < <= > >=")
    assert types_of(tokens) == [
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.LEFT_BRACE,
        TokenType.RIGHT_BRACE,
        TokenType.COMMA,
        TokenType.DOT,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SEMICOLON,
        TokenType.STAR,
        TokenType.SLASH,
        TokenType.BANG,
        TokenType.BANG_EQUAL,
        TokenType.EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.EOF,
    ]
    assert tokens[12].lexeme == "!="


def test_numbers_are_parsed_as_floats():
    for text, expected in (("0", 0.0), ("42", 42.0), ("3.25", 3.25), ("1.0", 1.0)):
        tokens = scan(text)
        assert types_of(tokens) == [TokenType.NUMBER, TokenType.EOF]
        assert tokens[0].literal == expected
        assert isinstance(tokens[0].literal, float)
        assert tokens[0].lexeme == text


def test_trailing_dot_is_not_part_of_number():
    tokens = scan("12.")
    assert types_of(tokens) == [TokenType.NUMBER, TokenType.DOT, TokenType.EOF]
    assert tokens[0].literal == 12.0


def test_leading_dot_is_not_part_of_number():
    tokens = scan(".5")
    assert types_of(tokens) == [TokenType.DOT, TokenType.NUMBER, TokenType.EOF]


def test_string_literal_and_multiline_line_count():
    tokens = scan('"hello"\n"a\nb" x')
    assert tokens[0].type == TokenType.STRING
    assert tokens[0].literal == "hello"
    assert tokens[0].lexeme == '"hello"'
    assert tokens[1].literal == "a\nb"
    assert tokens[1].line == 3
    assert tokens[2].line == 3


def test_unterminated_string_reports_error(capsys):
    reporter = Reporter()
    tokens = scan('"never closed', reporter)
    assert types_of(tokens) == [TokenType.EOF]
    assert reporter.had_error
    assert capsys.readouterr().err.strip() == "[line 1] Error: Unterminated string."


def test_identifiers_and_keywords():
    source = "and class else false for fun if nil or print return super this true var while _x y1"
    tokens = scan(source)
    assert types_of(tokens) == [
        TokenType.AND,
        TokenType.CLASS,
        TokenType.ELSE,
        TokenType.FALSE,
        TokenType.FOR,
        TokenType.FUN,
        TokenType.IF,
        TokenType.NIL,
        TokenType.OR,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.SUPER,
        TokenType.THIS,
        TokenType.TRUE,
        TokenType.VAR,
        TokenType.WHILE,
        TokenType.IDENTIFIER,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]
    assert tokens[-2].lexeme == "y1"


def test_keyword_prefix_is_identifier():
    tokens = scan("variable orchid")
    assert types_of(tokens) == [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.EOF]


def test_line_comment_is_skipped():
    tokens = scan("1 // ignored + 2\n3")
    assert [tok.literal for tok in tokens[:-1]] == [1.0, 3.0]
    assert tokens[1].line == 2


def test_nested_block_comment_closes_after_both_closers():
    tokens = scan("1 /* outer /* inner */ still comment */ 2")
    assert types_of(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert tokens[1].literal == 2.0


def test_block_comment_counts_lines():
    tokens = scan("/* a\nb\n*/ x")
    assert tokens[0].line == 3


def test_unterminated_block_comment_consumes_rest():
    reporter = Reporter()
    tokens = scan("1 /* open", reporter)
    assert types_of(tokens) == [TokenType.NUMBER, TokenType.EOF]
    assert not reporter.had_error


def test_unexpected_characters_are_reported_and_scanning_continues(capsys):
    reporter = Reporter()
    tokens = scan("1 @ 2\n#", reporter)
    assert types_of(tokens) == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert reporter.had_error
    assert reporter.error_count == 2
    err = capsys.readouterr().err.strip().splitlines()
    assert err == [
        "[line 1] Error: Unexpected character: @",
        "[line 2] Error: Unexpected character: #",
    ]


def test_whitespace_and_lines():
    tokens = scan(" \t\r1\n\n2")
    assert [tok.line for tok in tokens] == [1, 3, 3]


def test_exactly_one_eof_token():
    for source in ("", "print 1;", "@", '"open'):
        tokens = scan(source)
        assert [tok.type for tok in tokens].count(TokenType.EOF) == 1
        assert tokens[-1].type == TokenType.EOF


def test_token_debug_string():
    assert str(Token(TokenType.NUMBER, "1.5", 1.5, 1)) == "NUMBER 1.5 1.5"
    assert str(Token.end_of_file(3)) == "EOF  nil"
