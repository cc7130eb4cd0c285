"""
Transformer Test Suite
======================

Tests for the source-to-target AST transformation, including statement
wrapping of top-level calls and destination binding for nested calls.
"""

from sexpc.parser import parse_source
from sexpc.transformer import Transformer, transform
from sexpc import target_ast as target


def call(name, *arguments):
    """Build a target call expression."""
    return target.CallExpression(
        callee=target.Identifier(name=name),
        arguments=list(arguments),
    )


def num(value):
    return target.NumberLiteral(value=value)


def string(value):
    return target.StringLiteral(value=value)


class TestTransformer:
    """Tests for target AST construction."""

    def test_empty_program(self):
        assert transform(parse_source("")) == target.Program(body=[])

    def test_simple_call(self):
        result = transform(parse_source("(add 2 3)"))
        assert result == target.Program(body=[
            target.ExpressionStatement(expression=call("add", num("2"), num("3"))),
        ])

    def test_nested_call_is_bare_argument(self):
        result = transform(parse_source("(multiply 3 (multiply 4 5))"))
        assert result == target.Program(body=[
            target.ExpressionStatement(expression=call(
                "multiply", num("3"), call("multiply", num("4"), num("5")),
            )),
        ])

    def test_strings(self):
        result = transform(parse_source('(concat "a" "b")'))
        statement = result.body[0]
        assert statement.expression.arguments == [string("a"), string("b")]

    def test_each_top_level_call_is_a_statement(self):
        result = transform(parse_source("(a)(b (c))(d)"))
        assert all(isinstance(s, target.ExpressionStatement) for s in result.body)
        assert [s.expression.callee.name for s in result.body] == ["a", "b", "d"]

    def test_top_level_literal_is_not_wrapped(self):
        result = transform(parse_source('7 "x" (f)'))
        assert result.body[0] == num("7")
        assert result.body[1] == string("x")
        assert isinstance(result.body[2], target.ExpressionStatement)

    def test_argument_order_and_count(self):
        result = transform(parse_source('(f 1 "two" (g 3) 4)'))
        args = result.body[0].expression.arguments
        assert args == [num("1"), string("two"), call("g", num("3")), num("4")]

    def test_equal_sibling_calls_get_separate_destinations(self):
        """Structurally equal subtrees must not share an argument list."""
        result = transform(parse_source("(f (g 1) (g 1)) (f (g 1) (g 1))"))
        expected = call("f", call("g", num("1")), call("g", num("1")))
        assert [s.expression for s in result.body] == [expected, expected]
        first, second = result.body[0].expression.arguments
        assert first.arguments is not second.arguments

    def test_deep_nesting(self):
        result = transform(parse_source("(a (b (c 1)))"))
        assert result.body[0].expression == call("a", call("b", call("c", num("1"))))


class TestTransformerState:
    """Tests for isolation between transform calls."""

    def test_source_tree_unchanged(self):
        program = parse_source("(add 1 (neg 2))")
        snapshot = parse_source("(add 1 (neg 2))")
        transform(program)
        assert program == snapshot
        assert not hasattr(program, "_context")

    def test_transformer_reuse(self):
        transformer = Transformer()
        first = transformer.transform(parse_source("(a 1)"))
        second = transformer.transform(parse_source("(b 2)"))
        assert [s.expression.callee.name for s in first.body] == ["a"]
        assert [s.expression.callee.name for s in second.body] == ["b"]

    def test_same_source_transformed_twice(self):
        program = parse_source("(a (b))")
        assert transform(program) == transform(program)
        assert transform(program) is not transform(program)

    def test_bindings_cleared_after_transform(self):
        transformer = Transformer()
        transformer.transform(parse_source("(a (b (c)))"))
        assert transformer._destinations == {}
