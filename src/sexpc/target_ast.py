"""
sexpc Target Abstract Syntax Tree
=================================

This module defines the AST node types produced by the transformer and
consumed by the code generator. The tree follows the shape of C-like
call syntax: calls carry a callee and an argument list, and top-level
calls are wrapped in statements.

Node Hierarchy
--------------
TargetNode (base)
├── Program - root node, body of statements
├── ExpressionStatement - expression followed by ';'
├── CallExpression - callee(arguments)
├── Identifier - a callee name
├── NumberLiteral - digits, verbatim
└── StringLiteral - text, rendered in double quotes

Unlike the source tree these nodes are mutable: the transformer creates
each container empty and appends children to it while it walks the
source tree.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class TargetNode:
    """Base class for all target AST nodes."""

    @property
    def kind(self) -> str:
        """Node kind used for code generator dispatch."""
        return self.__class__.__name__


@dataclass
class Identifier(TargetNode):
    """Callee name."""
    name: str = ""


@dataclass
class NumberLiteral(TargetNode):
    """Numeric literal; value is the source digits."""
    value: str = ""


@dataclass
class StringLiteral(TargetNode):
    """String literal; value excludes the quotes."""
    value: str = ""


@dataclass
class CallExpression(TargetNode):
    """
    Call expression.

    Attributes:
        callee: The called function
        arguments: Argument expressions in order
    """
    callee: Identifier = field(default_factory=Identifier)
    arguments: list["TargetExpression"] = field(default_factory=list)


@dataclass
class ExpressionStatement(TargetNode):
    """Top-level expression used as a statement."""
    expression: "TargetExpression" = None


@dataclass
class Program(TargetNode):
    """
    Root node holding the generated statements.

    A literal written at the top level of the source has no call to wrap,
    so it lands in the body bare, next to the statements.
    """
    body: list[Union[ExpressionStatement, "TargetExpression"]] = field(default_factory=list)


TargetExpression = Union[CallExpression, NumberLiteral, StringLiteral]
