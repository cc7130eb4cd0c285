"""
sexpc Recursive Descent Parser
==============================

This module implements the recursive descent parser for the
call-expression language. It takes the token list from the lexer and
builds the source Abstract Syntax Tree.

Grammar (EBNF)
--------------
program     ::= expr*
expr        ::= NUMBER | STRING | call
call        ::= '(' NAME expr* ')'

The parser looks at one token at a time and keeps a single cursor into
the token list. The cursor belongs to one Parser instance; recursive
calls share it rather than copying it.

Failure Policy
--------------
Parsing is fail-fast. The first token that does not fit raises
UnexpectedTokenError; running out of tokens inside a call raises
UnexpectedEndOfInputError. No partial tree is ever returned.

Calls may nest at most MAX_NESTING_DEPTH levels deep (configurable per
Parser); one more level raises NestingTooDeepError.

Example Usage
-------------
>>> from sexpc.lexer import lex
>>> from sexpc.parser import Parser
>>> program = Parser(lex('(add 2 (sub 4 1))')).parse()
>>> program.body[0].name
'add'
"""

import logging

from sexpc.lexer import Token, TokenType, lex
from sexpc.ast import (
    Program,
    Expression,
    CallExpression,
    NumberLiteral,
    StringLiteral,
)
from sexpc.errors import (
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    NestingTooDeepError,
)

logger = logging.getLogger(__name__)

# Deepest accepted call nesting
MAX_NESTING_DEPTH = 100


class Parser:
    """
    Recursive descent parser for the call-expression language.

    Attributes:
        tokens: List of tokens to parse
        max_depth: Deepest call nesting accepted
    """

    def __init__(self, tokens: list[Token], max_depth: int = MAX_NESTING_DEPTH):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            max_depth: Deepest call nesting accepted
        """
        self.tokens = tokens
        self.max_depth = max_depth

        # Current position in token stream
        self._pos = 0

        # Number of calls currently open
        self._depth = 0

    def parse(self) -> Program:
        """
        Parse the whole token stream into a Program.

        Returns:
            Program whose body holds every top-level expression

        Raises:
            ParseError: If the tokens do not form a valid program
        """
        body = []
        while not self._at_end():
            body.append(self._walk())

        logger.debug(f"Parsed {len(self.tokens)} tokens into {len(body)} top-level expressions")
        return Program(body=tuple(body))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self._pos >= len(self.tokens)

    def _peek(self, expected: str) -> Token:
        """
        Return the current token without consuming it.

        Args:
            expected: What the caller is looking for, used in the error

        Raises:
            UnexpectedEndOfInputError: If no tokens are left
        """
        if self._at_end():
            raise UnexpectedEndOfInputError(expected)
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def _expect(self, token_type: TokenType, expected: str) -> Token:
        """
        Expect and consume a token of the given kind.

        Raises:
            UnexpectedTokenError: If the current token is of another kind
            UnexpectedEndOfInputError: If no tokens are left
        """
        token = self._peek(expected)
        if token.kind != token_type:
            raise UnexpectedTokenError(token, self._pos, expected)
        return self._advance()

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def _walk(self) -> Expression:
        """Parse one expression starting at the current token."""
        token = self._peek("an expression")

        if token.kind == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(text=token.text)

        if token.kind == TokenType.STRING:
            self._advance()
            return StringLiteral(text=token.text)

        if token.is_open_paren():
            return self._parse_call()

        raise UnexpectedTokenError(token, self._pos, "a number, a string or '('")

    def _parse_call(self) -> CallExpression:
        """
        Parse a call expression: '(' NAME expr* ')'.

        The opening paren is the current token on entry; the matching
        closing paren has been consumed on return.
        """
        if self._depth >= self.max_depth:
            raise NestingTooDeepError(self.max_depth, self._pos)

        self._advance()  # consume '('
        name = self._expect(TokenType.NAME, "a function name after '('")

        self._depth += 1
        params = []
        while not self._peek("')' to close the call").is_close_paren():
            params.append(self._walk())
        self._depth -= 1

        self._advance()  # consume ')'
        return CallExpression(name=name.text, params=tuple(params))


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: list[Token], max_depth: int = MAX_NESTING_DEPTH) -> Program:
    """
    Parse a token list into a source AST.

    Args:
        tokens: Tokens produced by the lexer
        max_depth: Deepest call nesting accepted

    Returns:
        The Program root node

    Raises:
        ParseError: If parsing fails
    """
    return Parser(tokens, max_depth).parse()


def parse_source(source: str) -> Program:
    """
    Lex and parse source text in one step.

    Args:
        source: Call-expression source text

    Returns:
        The Program root node
    """
    return parse(lex(source))
