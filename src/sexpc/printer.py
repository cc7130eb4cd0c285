"""
sexpc AST Pretty Printer
========================

Human-readable dump of a source AST for debugging, used by the
``sexpc --ast`` option. It is a plain traverser visitor: containers
indent on enter and dedent on exit.

Example output for ``(add 2 (concat "a" "b"))``:

    Program
      Call: add
        Number: 2
        Call: concat
          String: "a"
          String: "b"
"""

from typing import Optional

from sexpc.ast import Node, Program, CallExpression, NumberLiteral, StringLiteral
from sexpc.traverser import NodeHandlers, traverse


class ASTPrinter:
    """
    Pretty printer for source AST debugging.

    Usage:
        printer = ASTPrinter()
        output = printer.print(ast)
        print(output)
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, program: Program) -> str:
        """Print the AST and return as string."""
        self.output = []
        self.indent_level = 0
        traverse(program, {
            "Program": NodeHandlers(enter=self._enter_program, exit=self._dedent),
            "CallExpression": NodeHandlers(enter=self._enter_call, exit=self._dedent),
            "NumberLiteral": NodeHandlers(enter=self._enter_number),
            "StringLiteral": NodeHandlers(enter=self._enter_string),
        })
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        """Emit a line with current indentation."""
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _dedent(self, node: Node, parent: Optional[Node]) -> None:
        self.indent_level = max(0, self.indent_level - 1)

    def _enter_program(self, node: Program, parent: Optional[Node]) -> None:
        self._emit("Program")
        self.indent_level += 1

    def _enter_call(self, node: CallExpression, parent: Optional[Node]) -> None:
        self._emit(f"Call: {node.name}")
        self.indent_level += 1

    def _enter_number(self, node: NumberLiteral, parent: Optional[Node]) -> None:
        self._emit(f"Number: {node.text}")

    def _enter_string(self, node: StringLiteral, parent: Optional[Node]) -> None:
        self._emit(f'String: "{node.text}"')
