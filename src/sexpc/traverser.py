"""
sexpc AST Traverser
===================

This module implements the generic depth-first walk over a source AST.
The traverser knows the shape of the tree and nothing else: what
happens at each node is decided by the visitor passed in.

Visitors
--------
A visitor maps a node kind ("Program", "CallExpression",
"NumberLiteral", "StringLiteral") to a NodeHandlers pair. Either
callback may be omitted, and kinds missing from the mapping are walked
without any callback. Each callback receives (node, parent); parent is
None for the Program root.

Walk Order
----------
For every node: enter, then each child left to right in stored order
(Program.body, CallExpression.params), then exit. Literals have no
children, so their exit directly follows their enter.

Example Usage
-------------
>>> from sexpc.parser import parse_source
>>> from sexpc.traverser import NodeHandlers, traverse
>>> names = []
>>> traverse(parse_source('(add 1 (neg 2))'), {
...     "CallExpression": NodeHandlers(enter=lambda node, parent: names.append(node.name)),
... })
>>> names
['add', 'neg']
"""

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from sexpc.ast import (
    Node,
    Program,
    CallExpression,
    NumberLiteral,
    StringLiteral,
)
from sexpc.errors import TraversalError


# Callback invoked with (node, parent)
VisitorMethod = Callable[[Node, Optional[Node]], None]


@dataclass(frozen=True)
class NodeHandlers:
    """
    Enter/exit callbacks registered for one node kind.

    Attributes:
        enter: Called before the node's children are walked
        exit: Called after the node's children are walked
    """
    enter: Optional[VisitorMethod] = None
    exit: Optional[VisitorMethod] = None


# Node kind -> callbacks
Visitor = Mapping[str, NodeHandlers]


class Traverser:
    """
    Depth-first walker that dispatches to a visitor.

    Usage:
        Traverser(visitor).traverse(program)

    Attributes:
        visitor: Mapping of node kind to NodeHandlers
    """

    def __init__(self, visitor: Visitor):
        self.visitor = visitor

    def traverse(self, ast: Program) -> None:
        """
        Walk the whole tree starting at the Program root.

        Raises:
            TraversalError: If a node outside the source node set is found
        """
        self._traverse_node(ast, None)

    def _traverse_node(self, node: Node, parent: Optional[Node]) -> None:
        """Enter a node, walk its children, then exit it."""
        children = self._children(node)
        handlers = self.visitor.get(node.kind)

        if handlers and handlers.enter:
            handlers.enter(node, parent)

        for child in children:
            self._traverse_node(child, node)

        if handlers and handlers.exit:
            handlers.exit(node, parent)

    @staticmethod
    def _children(node: Node) -> tuple:
        """Children of a node in walk order; rejects unknown node types."""
        if isinstance(node, Program):
            return node.body
        if isinstance(node, CallExpression):
            return node.params
        if isinstance(node, (NumberLiteral, StringLiteral)):
            return ()
        raise TraversalError(type(node).__name__)


def traverse(ast: Program, visitor: Visitor) -> None:
    """
    Walk a source AST depth-first, invoking the visitor's callbacks.

    Args:
        ast: The Program root
        visitor: Mapping of node kind to NodeHandlers
    """
    Traverser(visitor).traverse(ast)
