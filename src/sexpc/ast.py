"""
sexpc Source Abstract Syntax Tree
=================================

This module defines the AST node types produced by the parser. The tree
mirrors the shape of the input language: calls carry a name and a list
of parameters.

Node Hierarchy
--------------
ASTNode (base)
├── Program - root node, one per compilation
└── Expression
    ├── CallExpression - (name param*)
    ├── NumberLiteral - digit run, kept verbatim
    └── StringLiteral - quoted text, without the quotes

Design Notes
------------
- All nodes are frozen dataclasses; children are held in tuples, so the
  tree cannot be changed once the parser has built it
- Each node owns its children outright: no subtree is shared
- The node set is closed; the traverser rejects anything else
"""

from dataclasses import dataclass, field
from typing import Union


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass(frozen=True)
class ASTNode:
    """
    Base class for all source AST nodes.

    The node kind is the class name; visitors are keyed on it.
    """

    @property
    def kind(self) -> str:
        """Node kind used for visitor dispatch."""
        return self.__class__.__name__


@dataclass(frozen=True)
class Expression(ASTNode):
    """Base class for nodes that can appear in a body or parameter list."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class NumberLiteral(Expression):
    """
    Numeric literal.

    Attributes:
        text: The digits exactly as written in the source
    """
    text: str = ""


@dataclass(frozen=True)
class StringLiteral(Expression):
    """
    String literal.

    Attributes:
        text: The characters between the quotes
    """
    text: str = ""


@dataclass(frozen=True)
class CallExpression(Expression):
    """
    Call expression (name param*).

    Attributes:
        name: The identifier immediately following '('
        params: Argument expressions in source order
    """
    name: str = ""
    params: tuple[Expression, ...] = field(default_factory=tuple)


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """
    Root node of the source AST.

    Attributes:
        body: Top-level expressions in source order
    """
    body: tuple[Expression, ...] = field(default_factory=tuple)


# Any node that can occur in a source tree
Node = Union[Program, CallExpression, NumberLiteral, StringLiteral]
