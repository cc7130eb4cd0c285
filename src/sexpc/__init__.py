"""
sexpc - S-Expression Call Compiler
==================================

This package implements a small source-to-source compiler. It reads a
Lisp-like call-expression language and emits the same calls in C-like
syntax:

    (add 2 (subtract 4 2))   →   add(2, subtract(4, 2));

The input language has exactly three kinds of expression: numbers,
double-quoted strings and parenthesized calls. There are no variables,
definitions or control flow.

Pipeline
--------
    Source → Lexer → Parser → Transformer (via Traverser) → Code Generator → Output

Main Components
---------------
- **lexer**: source text to tokens
- **parser**: tokens to the source AST (calls with name + params)
- **traverser**: generic depth-first walk with per-kind enter/exit callbacks
- **transformer**: source AST to target AST (calls with callee + arguments)
- **codegen**: target AST to text
- **compiler**: runs the stages in order

Quick Start
-----------
    >>> from sexpc import compile
    >>> compile('(concat "a" "b")')
    'concat("a", "b");'

Or use the command-line tool:
    $ sexpc program.lisp
    $ echo '(add 2 3)' | sexpc -
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from sexpc.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    compile,
    compile_file,
)
from sexpc.errors import (
    SexpcError,
    LexError,
    UnterminatedStringError,
    UnknownCharacterError,
    ParseError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    NestingTooDeepError,
    TraversalError,
    CodeGenError,
    UnknownNodeKindError,
)
from sexpc.lexer import Lexer, Token, TokenType, lex
from sexpc.parser import Parser, parse, parse_source
from sexpc.traverser import NodeHandlers, Traverser, Visitor, traverse
from sexpc.transformer import Transformer, transform
from sexpc.codegen import CodeGenerator, generate
from sexpc.printer import ASTPrinter

__all__ = [
    # Version
    "__version__",
    # Main API
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile",
    "compile_file",
    # Errors
    "SexpcError",
    "LexError",
    "UnterminatedStringError",
    "UnknownCharacterError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "NestingTooDeepError",
    "TraversalError",
    "CodeGenError",
    "UnknownNodeKindError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "lex",
    # Parser
    "Parser",
    "parse",
    "parse_source",
    # Traverser
    "NodeHandlers",
    "Traverser",
    "Visitor",
    "traverse",
    # Transformer
    "Transformer",
    "transform",
    # Code Generator
    "CodeGenerator",
    "generate",
    # Debugging
    "ASTPrinter",
]
