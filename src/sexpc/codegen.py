"""
sexpc Code Generator
====================

This module renders a target AST as C-like call syntax. Rendering is
plain recursion over the target tree; no traverser is needed because
every node simply concatenates the text of its children.

Rendering Rules
---------------
| Node                | Output                               |
|---------------------|--------------------------------------|
| Program             | body items joined by line separator  |
| ExpressionStatement | expression + ';'                     |
| CallExpression      | callee '(' args joined by ', ' ')'   |
| Identifier          | name                                 |
| NumberLiteral       | value, verbatim                      |
| StringLiteral       | '"' + value + '"' (no escaping)      |

Usage
-----
>>> from sexpc import target_ast as target
>>> from sexpc.codegen import CodeGenerator
>>> call = target.CallExpression(
...     callee=target.Identifier(name="add"),
...     arguments=[target.NumberLiteral(value="2"), target.NumberLiteral(value="3")],
... )
>>> CodeGenerator().generate(target.ExpressionStatement(expression=call))
'add(2, 3);'
"""

from typing import Callable
import logging

from sexpc import target_ast as target
from sexpc.errors import UnknownNodeKindError

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Renders target AST nodes to text.

    Attributes:
        line_separator: Text placed between top-level statements
    """

    def __init__(self, line_separator: str = "\n"):
        self.line_separator = line_separator

        # The closed set of renderable node types
        self._renderers: dict[type, Callable[[target.TargetNode], str]] = {
            target.Program: self._generate_program,
            target.ExpressionStatement: self._generate_expression_statement,
            target.CallExpression: self._generate_call,
            target.Identifier: self._generate_identifier,
            target.NumberLiteral: self._generate_number,
            target.StringLiteral: self._generate_string,
        }

    def generate(self, node: target.TargetNode) -> str:
        """
        Render a node and everything below it.

        Args:
            node: Any target AST node

        Returns:
            Generated source text

        Raises:
            UnknownNodeKindError: If the node is not a target AST node
        """
        renderer = self._renderers.get(type(node))
        if renderer is None:
            raise UnknownNodeKindError(type(node).__name__)
        return renderer(node)

    # =========================================================================
    # Node Renderers
    # =========================================================================

    def _generate_program(self, node: target.Program) -> str:
        output = self.line_separator.join(self.generate(item) for item in node.body)
        logger.debug(f"Generated {len(node.body)} top-level items ({len(output)} characters)")
        return output

    def _generate_expression_statement(self, node: target.ExpressionStatement) -> str:
        return self.generate(node.expression) + ";"

    def _generate_call(self, node: target.CallExpression) -> str:
        args = ", ".join(self.generate(arg) for arg in node.arguments)
        return f"{self.generate(node.callee)}({args})"

    def _generate_identifier(self, node: target.Identifier) -> str:
        return node.name

    def _generate_number(self, node: target.NumberLiteral) -> str:
        return node.value

    def _generate_string(self, node: target.StringLiteral) -> str:
        return f'"{node.value}"'


def generate(node: target.TargetNode) -> str:
    """
    Render a target AST node with default settings.

    Args:
        node: Any target AST node

    Returns:
        Generated source text
    """
    return CodeGenerator().generate(node)
