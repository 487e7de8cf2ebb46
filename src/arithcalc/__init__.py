"""
arithcalc - parse, evaluate and graph arithmetic expressions.

Usage:
    from arithcalc import parse_expr, evaluate, render_dot

    expr = parse_expr("2 + 3 * 4")
    evaluate(expr)    # 14.0
    render_dot(expr)  # "strict graph { ... }"
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import CalcError, ConfigError, EvalError, LexError, ParseError
from .core.evaluator import calculate, evaluate
from .core.graph import render_dot
from .core.parser import parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "ConfigError",
    "LexError",
    "ParseError",
    "EvalError",
    "calculate",
    "evaluate",
    "parse_expr",
    "render_dot",
]
