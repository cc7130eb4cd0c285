"""
sexpc AST Transformer
=====================

This module converts the source AST (calls with name + params) into the
target AST (calls with callee + arguments, top-level calls wrapped in
statements). It is written as a single visitor for the generic
traverser; the traverser decides the walk order, this module decides
what each node becomes.

Destination Binding
-------------------
Every source container node is bound to the target list its children
must be appended to:

- the Program root is bound to the new Program's body
- each CallExpression is bound to the arguments list of the call built
  for it

A node finds its destination through its parent's binding alone, so
the target tree is assembled during a single pre-order walk without
computing its shape up front. Bindings are made on enter, before the
node's children are visited.

The bindings live in a mapping owned by one transform() call. The
source tree is never modified.

Example:

    (add 2 (sub 4 1))

becomes

    Program
      ExpressionStatement
        CallExpression callee=add
          NumberLiteral 2
          CallExpression callee=sub
            NumberLiteral 4
            NumberLiteral 1
"""

from typing import Optional
import logging

from sexpc import ast
from sexpc import target_ast as target
from sexpc.traverser import NodeHandlers, traverse

logger = logging.getLogger(__name__)


class Transformer:
    """
    Builds a target AST from a source AST.

    A Transformer instance may be reused, but each transform() call
    starts from fresh bindings and is not re-entrant.

    Example:
        program = Transformer().transform(source_program)
    """

    def __init__(self):
        # id(source node) -> target list its children are appended to.
        # Keyed by identity: frozen nodes compare by value, and two equal
        # sibling calls must still get separate destinations.
        self._destinations: dict[int, list] = {}

    def transform(self, program: ast.Program) -> target.Program:
        """
        Transform a source Program into a target Program.

        Args:
            program: Root of the source AST

        Returns:
            Root of the newly built target AST
        """
        new_program = target.Program()
        self._destinations = {id(program): new_program.body}

        try:
            traverse(program, {
                "CallExpression": NodeHandlers(enter=self._enter_call),
                "NumberLiteral": NodeHandlers(enter=self._enter_number),
                "StringLiteral": NodeHandlers(enter=self._enter_string),
            })
        finally:
            self._destinations = {}

        logger.debug(f"Transformed program into {len(new_program.body)} top-level nodes")
        return new_program

    # =========================================================================
    # Visitor Callbacks
    # =========================================================================

    def _enter_number(self, node: ast.NumberLiteral, parent: Optional[ast.Node]) -> None:
        self._destination_of(parent).append(target.NumberLiteral(value=node.text))

    def _enter_string(self, node: ast.StringLiteral, parent: Optional[ast.Node]) -> None:
        self._destination_of(parent).append(target.StringLiteral(value=node.text))

    def _enter_call(self, node: ast.CallExpression, parent: Optional[ast.Node]) -> None:
        """
        Build the target call, attach it to the parent's destination and
        bind its argument list as this node's destination.

        Only calls directly under the Program become statements; nested
        calls are attached bare as arguments.
        """
        call = target.CallExpression(callee=target.Identifier(name=node.name))

        if isinstance(parent, ast.CallExpression):
            self._destination_of(parent).append(call)
        else:
            self._destination_of(parent).append(target.ExpressionStatement(expression=call))

        self._destinations[id(node)] = call.arguments

    def _destination_of(self, parent: Optional[ast.Node]) -> list:
        """Target list bound to a container node."""
        return self._destinations[id(parent)]


def transform(program: ast.Program) -> target.Program:
    """
    Transform a source AST into a target AST.

    Args:
        program: Root of the source AST

    Returns:
        Root of the target AST
    """
    return Transformer().transform(program)
