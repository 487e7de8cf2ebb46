"""
Error types for arithcalc lexing, parsing, evaluation and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class LexErrorKind(StrEnum):
    """Ways the source text can fail to tokenize."""

    UNEXPECTED_CHAR = "unexpected_char"
    INVALID_NUMBER = "invalid_number"


class ParseErrorKind(StrEnum):
    """Ways the token stream can fail to match the grammar."""

    UNEXPECTED_TOKEN = "unexpected_token"
    UNMATCHED_PAREN = "unmatched_paren"
    TRAILING_INPUT = "trailing_input"
    TOO_DEEP = "too_deep"


class EvalErrorKind(StrEnum):
    """Ways a well-formed tree can fail to evaluate."""

    DIVISION_BY_ZERO = "division_by_zero"


class CalcError(Exception):
    """Base exception for all arithcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    @property
    def pos(self) -> int | None:
        """Zero-based source offset of the failure, when known."""
        return self.context.pos if self.context else None

    def format_with_source(self, source: str) -> str:
        """Render the message with a caret under ``pos`` in ``source``."""
        if self.pos is None:
            return self.message
        return f"{self.message}\n{ErrorContext(source, self.pos).format()}"

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class LexError(CalcError):
    """
    Raised when the source text cannot be split into tokens.

    Examples:
    - Characters outside the expression alphabet
    - Malformed numeric literals such as ``1.`` or ``1.2.3``
    """

    def __init__(
        self,
        kind: LexErrorKind,
        message: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        super().__init__(message, context)


class ParseError(CalcError):
    """
    Raised when the token stream does not conform to the grammar.

    Examples:
    - Missing operand
    - Missing closing parenthesis
    - Tokens left over after a complete expression
    - Nesting beyond the configured depth limit
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        super().__init__(message, context)


class EvalError(CalcError):
    """Raised when a well-formed tree describes undefined arithmetic."""

    def __init__(self, kind: EvalErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class ConfigError(CalcError):
    """Raised when a configuration file cannot be read or is invalid."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        source: The full expression text being processed
        pos: Zero-based offset into ``source``
    """

    source: str
    pos: int

    @property
    def column(self) -> int:
        """One-based column, as shown to users."""
        return self.pos + 1

    def format(self) -> str:
        """
        Format the source line with a marker under the error position.

        Returns:
            Two lines: the indented source and a ``^`` under ``pos``.
        """
        return f"  {self.source}\n  {' ' * self.pos}^"


def make_lex_error(kind: LexErrorKind, message: str, source: str, pos: int) -> LexError:
    """
    Helper to create a LexError with context.

    Args:
        kind: Error kind
        message: Error description (the column is appended)
        source: Expression text
        pos: Zero-based offset of the offending character

    Returns:
        LexError with context attached
    """
    context = ErrorContext(source=source, pos=pos)
    return LexError(kind, f"{message} at column {context.column}", context)


def make_parse_error(kind: ParseErrorKind, message: str, source: str, pos: int) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        kind: Error kind
        message: Error description (the column is appended)
        source: Expression text
        pos: Zero-based offset of the offending token

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(source=source, pos=pos)
    return ParseError(kind, f"{message} at column {context.column}", context)
