from loxlang.nodes import Invalid
from loxlang.printer import format_expression, format_statement
from loxlang.tests.utils import parse_expression, parse_source


def test_format_expression():
    assert format_expression(parse_expression("(1 + 2) * 3")) == "(* (group (+ 1 2)) 3)"
    assert format_expression(parse_expression('-x == "s"')) == "(== (- x) s)"
    assert format_expression(parse_expression("a = !nil")) == "(= a (! nil))"
    assert format_expression(Invalid()) == "<invalid>"


def test_format_statement():
    statements = parse_source("var a; var b = 1.5; print a; b;")
    assert [format_statement(stmt) for stmt in statements] == [
        "(var a)",
        "(var b 1.5)",
        "(print a)",
        "(; b)",
    ]
