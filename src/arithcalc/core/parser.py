"""
Recursive descent parser for arithcalc expressions.

Grammar (precedence low to high):
    expression  → term (("+"|"-") term)*
    term        → factor (("*"|"/") factor)*
    factor      → "-" factor | primary
    primary     → NUMBER | "(" expression ")"

The grammar is LL(1): every decision is made on the single lookahead
token, which is pulled from the lexer only when the previous one has been
consumed.
"""

from __future__ import annotations

import logging

from arithcalc.core.ast import BinaryExpr, BinaryOp, Expr, Negate, Number
from arithcalc.core.errors import ParseErrorKind, make_parse_error
from arithcalc.core.lexer import Token, TokenKind, next_token

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

_ADDITIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.END:
        return "end of input"
    return repr(tok.value)


class _Parser:
    """Recursive descent parser over a lazily scanned token stream."""

    def __init__(self, source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.source = source
        self.max_depth = max_depth
        self.nesting = 0
        self.current, self.cursor = next_token(source, 0)

    def advance(self) -> Token:
        tok = self.current
        if tok.kind != TokenKind.END:
            self.current, self.cursor = next_token(self.source, self.cursor)
        return tok

    def _nest(self, tok: Token) -> None:
        self.nesting += 1
        if self.nesting > self.max_depth:
            raise make_parse_error(
                ParseErrorKind.TOO_DEEP,
                f"Expression nested deeper than {self.max_depth} levels",
                self.source,
                tok.pos,
            )

    def _unnest(self) -> None:
        self.nesting -= 1

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term (('+' | '-') term)*"""
        left = self.parse_term()
        while self.current.kind in _ADDITIVE:
            op = _ADDITIVE[self.advance().kind]
            right = self.parse_term()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_term(self) -> Expr:
        """factor (('*' | '/') factor)*"""
        left = self.parse_factor()
        while self.current.kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self.advance().kind]
            right = self.parse_factor()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """'-' factor | primary"""
        if self.current.kind == TokenKind.MINUS:
            self._nest(self.advance())
            operand = self.parse_factor()
            self._unnest()
            return Negate(operand=operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Number(value=tok.number)

        if tok.kind == TokenKind.LPAREN:
            self._nest(self.advance())
            expr = self.parse_expression()
            if self.current.kind != TokenKind.RPAREN:
                raise make_parse_error(
                    ParseErrorKind.UNMATCHED_PAREN,
                    f"Expected ')' to close '(' at column {tok.pos + 1}, "
                    f"found {_describe(self.current)}",
                    self.source,
                    self.current.pos,
                )
            self.advance()
            self._unnest()
            return expr

        raise make_parse_error(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"Expected a number, '-' or '(' but found {_describe(tok)}",
            self.source,
            tok.pos,
        )


def parse_expr(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")
        max_depth: Limit on parenthesis/negation nesting. Flat operator
            chains are not limited.

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If tokenization fails.
        ParseError: If the expression is invalid.
    """
    parser = _Parser(source, max_depth=max_depth)
    expr = parser.parse_expression()

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.END:
        raise make_parse_error(
            ParseErrorKind.TRAILING_INPUT,
            f"Unexpected {_describe(parser.current)} after expression",
            source,
            parser.current.pos,
        )

    logger.debug(f"Parsed {source!r} as {expr}")
    return expr
