"""
sexpc Error Hierarchy
=====================

This module defines the exception hierarchy for the sexpc compiler.
All exceptions inherit from SexpcError, allowing callers to catch every
compiler failure with a single except clause if desired.

Exception Hierarchy
-------------------
SexpcError (base)
├── LexError - tokenizer errors
│   ├── UnterminatedStringError - missing closing quote
│   └── UnknownCharacterError - character outside every token class
├── ParseError - parser errors
│   ├── UnexpectedTokenError - token does not fit the grammar
│   ├── UnexpectedEndOfInputError - tokens ran out mid-expression
│   └── NestingTooDeepError - calls nested past the parser limit
├── TraversalError - node outside the source tree's closed set
└── CodeGenError - code generation errors
    └── UnknownNodeKindError - node outside the target tree's closed set

Error Message Format
--------------------
Errors carry just enough context to identify the offending character,
token or node, and follow this format:

    error: unknown character '@' at offset 7
    hint: only parentheses, letters, digits and double-quoted strings are allowed

The pipeline is fail-fast: the first error raised by any stage aborts the
whole compilation and reaches the caller unchanged.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sexpc.lexer import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class SexpcError(Exception):
    """
    Base exception for all sexpc errors.

    This class provides common formatting for error messages with an
    optional hint, so every stage reports problems the same way:

        try:
            output = compile('(add 2 3)')
        except SexpcError as e:
            print(e)

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: unexpected token ')' at index 3
            hint: expected a function name after '('
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Lexer Errors
# =============================================================================

class LexError(SexpcError):
    """
    Error raised while tokenizing source text.

    Examples:
        - Unterminated string literal
        - Character that belongs to no token class
    """
    pass


class UnterminatedStringError(LexError):
    """
    Unterminated string literal.

    Raised when the end of input is reached before the closing quote.

    Example:
        (say "hi        <- missing closing quote
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            f"unterminated string literal starting at offset {position}",
            hint="add a closing '\"' to complete the string",
        )


class UnknownCharacterError(LexError):
    """
    Character that matches none of the recognized classes.

    Attributes:
        char: The offending character
        position: Offset of the character in the source text
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"unknown character {char!r} at offset {position}",
            hint="only parentheses, letters, digits and double-quoted strings are allowed",
        )


# =============================================================================
# Parser Errors
# =============================================================================

class ParseError(SexpcError):
    """
    Error raised while building the source AST from tokens.

    Parsing is all-or-nothing: no partial tree is ever returned.
    """
    pass


class UnexpectedTokenError(ParseError):
    """
    Token that does not fit the expected grammar position.

    Examples:
        ( 42 ...)       <- '(' must be followed by a name
        )               <- stray closing paren
        (add x)         <- bare name where an expression is expected

    Attributes:
        token: The offending token
        index: Position of the token in the token stream
        expected: Description of what the parser wanted instead (optional)
    """

    def __init__(self, token: "Token", index: int, expected: Optional[str] = None):
        self.token = token
        self.index = index
        self.expected = expected

        hint = f"expected {expected}" if expected else None
        super().__init__(
            f"unexpected token {token.text!r} at index {index}",
            hint=hint,
        )


class UnexpectedEndOfInputError(ParseError):
    """
    Token stream exhausted in the middle of an expression.

    Example:
        (add 2 (sub 3 1)      <- outer call never closed
    """

    def __init__(self, expected: Optional[str] = None):
        self.expected = expected
        hint = f"expected {expected}" if expected else None
        super().__init__("unexpected end of input", hint=hint)


class NestingTooDeepError(ParseError):
    """
    Calls nested deeper than the parser accepts.

    Each level costs several stack frames in every later stage. The
    default limit keeps the whole pipeline inside the interpreter's
    default recursion limit.

    Attributes:
        limit: Maximum accepted nesting depth
        index: Position of the '(' that opened one level too many
    """

    def __init__(self, limit: int, index: int):
        self.limit = limit
        self.index = index
        super().__init__(
            f"calls nested more than {limit} levels deep at index {index}",
            hint="split the expression into several top-level calls",
        )


# =============================================================================
# Traversal Errors
# =============================================================================

class TraversalError(SexpcError):
    """
    Node outside the closed set of source AST kinds.

    This indicates an internal invariant violation: a tree built by the
    parser only ever contains Program, CallExpression, NumberLiteral and
    StringLiteral nodes.
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"cannot traverse node of kind '{kind}'")


# =============================================================================
# Code Generation Errors
# =============================================================================

class CodeGenError(SexpcError):
    """Error raised while rendering the target AST to text."""
    pass


class UnknownNodeKindError(CodeGenError):
    """
    Node outside the closed set of target AST kinds.

    Never expected from a transformer-produced tree.
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"unknown node kind '{kind}'")
