"""
Tokenizer for arithcalc expressions.

Produces tokens one at a time on demand; ``next_token`` is a pure function
of the source text and a cursor, so a scan can be restarted from any
position the lexer has handed back.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import StrEnum, auto

from arithcalc.core.errors import LexErrorKind, make_lex_error


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    END = auto()


class Token:
    """A single token from the expression lexer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.pos) == (other.kind, other.value, other.pos)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.pos))

    @property
    def number(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.value)


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_WHITESPACE = " \t\n\r"

# Digits, optionally followed by a point and more digits
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")


def next_token(source: str, cursor: int = 0) -> tuple[Token, int]:
    """Read the token starting at ``cursor``.

    Args:
        source: Expression text.
        cursor: Offset to resume scanning from.

    Returns:
        The token and the cursor just past it. At end of input this is an
        END token and the cursor does not move.

    Raises:
        LexError: On a character outside the expression alphabet or a
            malformed numeric literal.
    """
    n = len(source)
    i = cursor

    while i < n and source[i] in _WHITESPACE:
        i += 1

    if i >= n:
        return Token(TokenKind.END, "", n), n

    # Matches exactly when source[i] is an ASCII digit
    m = _NUMBER_RE.match(source, i)
    if m is not None:
        end = m.end()
        # "1." and "1.2.3" both leave a point glued to the literal
        if end < n and source[end] == ".":
            raise make_lex_error(
                LexErrorKind.INVALID_NUMBER,
                f"Invalid number {source[i : end + 1]!r}",
                source,
                i,
            )
        return Token(TokenKind.NUMBER, m.group(0), i), end

    c = source[i]
    kind = _SINGLE_CHAR.get(c)
    if kind is not None:
        return Token(kind, c, i), i + 1

    raise make_lex_error(
        LexErrorKind.UNEXPECTED_CHAR,
        f"Unexpected character {c!r}",
        source,
        i,
    )


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily yield tokens from ``source``, ending with a single END token."""
    cursor = 0
    while True:
        tok, cursor = next_token(source, cursor)
        yield tok
        if tok.kind == TokenKind.END:
            return


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    return list(iter_tokens(source))
