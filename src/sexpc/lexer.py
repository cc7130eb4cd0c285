"""
sexpc Lexer (Tokenizer)
=======================

This module implements the lexer for the call-expression language.
It converts source text into a flat list of tokens for the parser.

Token Categories
----------------
| Kind   | Matches                       | Example  | Text     |
|--------|-------------------------------|----------|----------|
| PAREN  | ( or )                        | (        | (        |
| NAME   | run of ASCII letters          | add      | add      |
| NUMBER | run of ASCII digits           | 42       | 42       |
| STRING | "..." (no escapes)            | "hi"     | hi       |

Whitespace between tokens is skipped, and so is U+FEFF (byte order
mark). Number text is kept verbatim and never converted to an integer.
String tokens store the characters strictly between the quotes; the
quotes themselves are dropped.

Example Usage
-------------
>>> from sexpc.lexer import lex
>>> for token in lex('(add 2 "x")'):
...     print(token)
Token(PAREN, '(')
Token(NAME, 'add')
Token(NUMBER, '2')
Token(STRING, 'x')
Token(PAREN, ')')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import logging
import string

from sexpc.errors import UnterminatedStringError, UnknownCharacterError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token kinds of the call-expression language."""

    PAREN = auto()          # ( or )
    NAME = auto()           # call identifiers
    NUMBER = auto()         # digit runs
    STRING = auto()         # double-quoted text


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from source text.

    Tokens are immutable; their order in the stream is significant and
    their index in the list is their only position information.

    Attributes:
        kind: The TokenType classification
        text: The token text (without quotes for strings)
    """
    kind: TokenType
    text: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.text!r})"

    def is_open_paren(self) -> bool:
        """Return True if this token is '('."""
        return self.kind == TokenType.PAREN and self.text == "("

    def is_close_paren(self) -> bool:
        """Return True if this token is ')'."""
        return self.kind == TokenType.PAREN and self.text == ")"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes call-expression source text.

    Scans left to right in a single pass without backtracking. Each
    character either starts a token, is skipped as whitespace, or is
    rejected.

    Usage:
        lexer = Lexer(source)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters
    PARENS = "()"
    QUOTE = '"'
    BYTE_ORDER_MARK = "\ufeff"

    def __init__(self, source: str):
        """
        Initialize the lexer with source text.

        Args:
            source: The text to tokenize
        """
        self.source = source
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order

        Raises:
            UnterminatedStringError: If a string literal is never closed
            UnknownCharacterError: If a character fits no token class
        """
        while not self._at_end():
            char = self._peek()

            # A BOM left at the front of a UTF-8 file counts as whitespace
            if char.isspace() or char == self.BYTE_ORDER_MARK:
                self._advance()
                continue

            yield self._scan_token(char)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Current character, or empty string past the end."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self._pos]
        self._pos += 1
        return char

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self, char: str) -> Token:
        """Scan the token starting at the current character."""
        if char in self.PARENS:
            return Token(TokenType.PAREN, self._advance())

        if char in self.DIGITS:
            return Token(TokenType.NUMBER, self._scan_run(self.DIGITS))

        if char == self.QUOTE:
            return self._scan_string()

        if char in self.LETTERS:
            return Token(TokenType.NAME, self._scan_run(self.LETTERS))

        raise UnknownCharacterError(char, self._pos)

    def _scan_run(self, charset: str) -> str:
        """Collect the longest run of characters from charset."""
        start = self._pos
        while not self._at_end() and self._peek() in charset:
            self._advance()
        return self.source[start:self._pos]

    def _scan_string(self) -> Token:
        """
        Scan a double-quoted string literal.

        No escape sequences are recognized: the first '"' after the
        opening one always closes the literal.
        """
        start = self._pos
        self._advance()  # consume opening "

        close = self.source.find(self.QUOTE, self._pos)
        if close == -1:
            raise UnterminatedStringError(start)

        text = self.source[self._pos:close]
        self._pos = close + 1  # skip past closing "
        return Token(TokenType.STRING, text)


# =============================================================================
# Convenience Functions
# =============================================================================

def lex(source: str) -> list[Token]:
    """
    Tokenize source text into a list of tokens.

    Args:
        source: The text to tokenize

    Returns:
        List of tokens in source order (empty for empty input)

    Raises:
        LexError: If the text cannot be tokenized
    """
    tokens = list(Lexer(source).tokenize())
    logger.debug(f"Lexed {len(source)} characters into {len(tokens)} tokens")
    return tokens
