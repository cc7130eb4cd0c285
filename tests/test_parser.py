"""
Parser Test Suite
=================

Tests for the recursive descent parser: AST shape for valid programs and
fail-fast errors for malformed token streams.
"""

import pytest
from sexpc.lexer import Token, TokenType, lex
from sexpc.parser import MAX_NESTING_DEPTH, Parser, parse, parse_source
from sexpc.ast import Program, CallExpression, NumberLiteral, StringLiteral
from sexpc.errors import (
    ParseError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    NestingTooDeepError,
)


# =============================================================================
# Valid Program Tests
# =============================================================================

class TestParser:
    """Tests for AST construction."""

    def test_empty_program(self):
        assert parse([]) == Program(body=())

    def test_simple_call(self):
        program = parse_source("(add 2 3)")
        assert program == Program(body=(
            CallExpression(
                name="add",
                params=(NumberLiteral(text="2"), NumberLiteral(text="3")),
            ),
        ))

    def test_nested_call(self):
        program = parse_source("(multiply 3 (multiply 4 5))")
        outer = program.body[0]
        assert outer.name == "multiply"
        assert outer.params[0] == NumberLiteral(text="3")
        inner = outer.params[1]
        assert isinstance(inner, CallExpression)
        assert inner.name == "multiply"
        assert inner.params == (NumberLiteral(text="4"), NumberLiteral(text="5"))

    def test_string_params(self):
        program = parse_source('(concat "a" "b")')
        assert program.body[0].params == (StringLiteral(text="a"), StringLiteral(text="b"))

    def test_call_without_params(self):
        program = parse_source("(now)")
        assert program.body == (CallExpression(name="now", params=()),)

    def test_multiple_top_level_calls(self):
        program = parse_source("(add 2 3)(subtract 4 2)")
        assert [call.name for call in program.body] == ["add", "subtract"]

    def test_top_level_literals(self):
        """The grammar allows bare literals at the top level."""
        program = parse_source('1 "two"')
        assert program.body == (NumberLiteral(text="1"), StringLiteral(text="two"))

    def test_deep_nesting(self):
        program = parse_source("(a (b (c (d 1))))")
        node = program.body[0]
        names = []
        while isinstance(node, CallExpression):
            names.append(node.name)
            node = node.params[0]
        assert names == ["a", "b", "c", "d"]
        assert node == NumberLiteral(text="1")

    def test_param_order_preserved(self):
        program = parse_source('(f 1 "x" (g) 2)')
        params = program.body[0].params
        assert [type(p) for p in params] == [
            NumberLiteral, StringLiteral, CallExpression, NumberLiteral,
        ]

    def test_ast_is_immutable(self):
        program = parse_source("(add 1)")
        with pytest.raises(Exception):
            program.body[0].name = "sub"

    def test_parser_class(self):
        program = Parser(lex("(x 1)")).parse()
        assert program.body[0].name == "x"

    def test_node_kinds(self):
        program = parse_source('(f 1 "s")')
        assert program.kind == "Program"
        call = program.body[0]
        assert call.kind == "CallExpression"
        assert [p.kind for p in call.params] == ["NumberLiteral", "StringLiteral"]


# =============================================================================
# Error Tests
# =============================================================================

class TestParserErrors:
    """Tests for fail-fast parse errors."""

    def test_paren_not_followed_by_name(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_source("(2 3)")
        assert exc_info.value.token == Token(TokenType.NUMBER, "2")
        assert exc_info.value.index == 1

    def test_string_in_name_position(self):
        with pytest.raises(UnexpectedTokenError):
            parse_source('("f" 1)')

    def test_empty_call(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_source("()")
        assert exc_info.value.token.text == ")"

    def test_stray_close_paren(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_source("(add 1))")
        assert exc_info.value.token.text == ")"
        assert exc_info.value.index == 4

    def test_bare_name_in_expression_position(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_source("(add x 1)")
        assert exc_info.value.token == Token(TokenType.NAME, "x")

    def test_bare_name_at_top_level(self):
        with pytest.raises(UnexpectedTokenError):
            parse_source("add")

    def test_unclosed_call(self):
        with pytest.raises(UnexpectedEndOfInputError):
            parse_source("(add 2 3")

    def test_unclosed_nested_call(self):
        with pytest.raises(UnexpectedEndOfInputError):
            parse_source("(add 2 (sub 3 1)")

    def test_lone_open_paren(self):
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            parse_source("(")
        assert "function name" in exc_info.value.expected

    def test_errors_are_parse_errors(self):
        for source in ["(", ")", "(1)", "(a"]:
            with pytest.raises(ParseError):
                parse_source(source)

    def test_error_message_names_token(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse_source(")")
        message = str(exc_info.value)
        assert "unexpected token ')' at index 0" in message
        assert "hint: expected" in message

    def test_error_after_valid_expression(self):
        """A valid first expression does not hide a later error."""
        with pytest.raises(UnexpectedEndOfInputError):
            parse_source("(ok 1) (broken")


# =============================================================================
# Nesting Limit Tests
# =============================================================================

def nested(depth: int) -> str:
    """Source with `depth` calls nested inside each other."""
    return "(f " * depth + "1" + ")" * depth


class TestNestingLimit:
    """Tests for the maximum call nesting depth."""

    def test_nesting_at_limit(self):
        program = parse_source(nested(MAX_NESTING_DEPTH))
        node = program.body[0]
        depth = 0
        while isinstance(node, CallExpression):
            depth += 1
            node = node.params[0]
        assert depth == MAX_NESTING_DEPTH

    def test_nesting_past_limit(self):
        with pytest.raises(NestingTooDeepError) as exc_info:
            parse_source(nested(MAX_NESTING_DEPTH + 1))
        assert exc_info.value.limit == MAX_NESTING_DEPTH
        # Each level is '(' 'f', so the extra '(' sits at 2 * limit
        assert exc_info.value.index == 2 * MAX_NESTING_DEPTH

    def test_very_deep_input(self):
        """Input far past the interpreter's recursion limit still fails cleanly."""
        with pytest.raises(NestingTooDeepError):
            parse_source(nested(5000))

    def test_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_source(nested(MAX_NESTING_DEPTH + 1))

    def test_custom_limit(self):
        tokens = lex(nested(3))
        assert Parser(tokens, max_depth=3).parse().body[0].name == "f"
        with pytest.raises(NestingTooDeepError):
            parse(tokens, max_depth=2)

    def test_siblings_do_not_add_depth(self):
        """Depth counts open calls, not calls seen so far."""
        source = "(f " + "(g 1) " * (MAX_NESTING_DEPTH + 5) + ")"
        assert len(parse_source(source).body[0].params) == MAX_NESTING_DEPTH + 5

    def test_error_message(self):
        with pytest.raises(NestingTooDeepError) as exc_info:
            parse(lex(nested(2)), max_depth=1)
        message = str(exc_info.value)
        assert message.startswith("error: calls nested more than 1 levels deep at index 2")
        assert "hint:" in message
