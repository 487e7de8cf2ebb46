"""Core arithcalc functionality: lexer, parser, AST, evaluator, graph rendering."""

from .ast import BinaryExpr, BinaryOp, Expr, Negate, Number, depth, to_infix, walk
from .config import CalcConfig, load_config
from .errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    EvalError,
    EvalErrorKind,
    LexError,
    LexErrorKind,
    ParseError,
    ParseErrorKind,
)
from .evaluator import calculate, evaluate
from .graph import render_dot, render_tree
from .lexer import Token, TokenKind, iter_tokens, next_token, tokenize
from .parser import DEFAULT_MAX_DEPTH, parse_expr

__all__ = [
    # AST
    "Expr",
    "Number",
    "BinaryExpr",
    "BinaryOp",
    "Negate",
    "walk",
    "depth",
    "to_infix",
    # Errors
    "CalcError",
    "ConfigError",
    "ErrorContext",
    "LexError",
    "LexErrorKind",
    "ParseError",
    "ParseErrorKind",
    "EvalError",
    "EvalErrorKind",
    # Pipeline
    "Token",
    "TokenKind",
    "next_token",
    "iter_tokens",
    "tokenize",
    "DEFAULT_MAX_DEPTH",
    "parse_expr",
    "evaluate",
    "calculate",
    "render_dot",
    "render_tree",
    # Config
    "CalcConfig",
    "load_config",
]
