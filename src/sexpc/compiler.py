"""
sexpc Compiler Main Module
==========================

This module provides the main compiler interface. It orchestrates the
complete compilation process:

    Source → Lex → Parse → Transform → Generate → Output

Usage
-----
Command line:
    $ sexpc program.lisp -o program.c

Programmatic:
    >>> from sexpc import compile
    >>> compile('(multiply 3 (multiply 4 5))')
    'multiply(3, multiply(4, 5));'

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Convert source to tokens
2. **Parsing**: Build the source AST
3. **Transformation**: Walk the source AST and build the target AST
4. **Code Generation**: Render the target AST as text

Error Handling
--------------
Each stage runs exactly once, in order. The first SexpcError raised by
any stage propagates to the caller unchanged: there is no error
collection, no recovery and no partial output. Nothing is kept between
calls.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from sexpc.lexer import Token, lex
from sexpc.parser import MAX_NESTING_DEPTH, parse
from sexpc.transformer import transform
from sexpc.codegen import CodeGenerator
from sexpc.ast import Program as SourceProgram
from sexpc.target_ast import Program as TargetProgram

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        line_separator: Text placed between generated top-level statements
        trailing_newline: If True, non-empty output ends with one
                          line_separator (useful when writing files)
        max_nesting_depth: Deepest call nesting the parser accepts
    """
    line_separator: str = "\n"
    trailing_newline: bool = False
    max_nesting_depth: int = MAX_NESTING_DEPTH


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        source: The compiled source text
        output: Generated code
        tokens: Token stream produced by the lexer
        ast: Source AST produced by the parser
        target: Target AST produced by the transformer
    """
    source: str = ""
    output: str = ""
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[SourceProgram] = None
    target: Optional[TargetProgram] = None

    @property
    def token_count(self) -> int:
        """Number of tokens lexed."""
        return len(self.tokens)


class Compiler:
    """
    Call-expression to C-like call syntax compiler.

    Example:
        compiler = Compiler()
        result = compiler.compile_source('(add 2 3)')
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        """
        Initialize the compiler.

        Args:
            options: Compiler configuration (uses defaults if None)
        """
        self.options = options or CompilerOptions()

    def compile_source(self, source: str) -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Call-expression source text

        Returns:
            CompilerResult holding the output and every intermediate

        Raises:
            SexpcError: From whichever stage fails first
        """
        result = CompilerResult(source=source)

        # Stage 1: Lexical analysis
        result.tokens = lex(source)

        # Stage 2: Parsing
        result.ast = parse(result.tokens, self.options.max_nesting_depth)

        # Stage 3: Transformation
        result.target = transform(result.ast)

        # Stage 4: Code generation
        generator = CodeGenerator(line_separator=self.options.line_separator)
        output = generator.generate(result.target)
        if output and self.options.trailing_newline:
            output += self.options.line_separator
        result.output = output

        logger.debug(
            f"Compiled {len(source)} characters: {result.token_count} tokens, "
            f"{len(result.target.body)} statements"
        )
        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a source file.

        Args:
            filepath: Path to the source file

        Returns:
            CompilerResult holding the output and every intermediate

        Raises:
            SexpcError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        logger.debug(f"Read {len(source)} characters from {path}")
        return self.compile_source(source)


# =============================================================================
# Convenience Functions
# =============================================================================

def compile(source: str) -> str:
    """
    Compile call-expression source into C-like call syntax.

    This is the primary high-level interface.

    Args:
        source: Call-expression source text

    Returns:
        Generated code; one line per top-level call

    Raises:
        SexpcError: If compilation fails

    Example:
        >>> compile('(add 2 3)(subtract 4 2)')
        'add(2, 3);\\nsubtract(4, 2);'
    """
    return Compiler().compile_source(source).output


def compile_file(
    filepath: str,
    output_path: Optional[str] = None,
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile a source file.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the generated code to
        options: Compiler configuration (uses defaults if None)

    Returns:
        Generated code

    Raises:
        SexpcError: If compilation fails
        FileNotFoundError: If source file not found

    Example:
        >>> code = compile_file("program.lisp", "program.c")
    """
    result = Compiler(options).compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
