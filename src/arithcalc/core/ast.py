"""
Expression tree types for arithcalc.

A parsed expression is a closed union of three frozen node models:

- Number: a numeric literal (leaf)
- BinaryExpr: left op right, for + - * /
- Negate: unary minus

Nodes are built bottom-up by the parser and never mutated afterwards.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def format_number(value: float, precision: int | None = None) -> str:
    """Render a float for display.

    Integral values print without a fractional part ("3", not "3.0").
    Everything else uses the shortest round-trip repr, or ``precision``
    significant digits when given.
    """
    if precision is not None:
        return f"{value:.{precision}g}"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> str:
        return "Number"

    @property
    def label(self) -> str:
        return format_number(self.value)

    @property
    def children(self) -> tuple[Expr, ...]:
        return ()

    def __str__(self) -> str:
        return to_infix(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> str:
        return "BinaryOp"

    @property
    def label(self) -> str:
        return self.op.value

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return to_infix(self)


class Negate(BaseModel):
    """Unary minus."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> str:
        return "Negate"

    @property
    def label(self) -> str:
        return "-"

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return to_infix(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | BinaryExpr | Negate

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Negate.model_rebuild()


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def walk(expr: Expr) -> Iterator[Expr]:
    """Yield every node in depth-first preorder, left subtree before right.

    Uses an explicit stack, so arbitrarily tall trees are safe to walk.
    """
    stack: list[Expr] = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def depth(expr: Expr) -> int:
    """Height of the tree: 1 for a single leaf."""
    deepest = 0
    stack: list[tuple[Expr, int]] = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in node.children)
    return deepest


def to_infix(expr: Expr) -> str:
    """Render a tree as fully parenthesized infix, e.g. ``((1 - 2) - 3)``.

    Pending nodes and literal text share one stack, so tall trees render
    without recursion.
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryExpr):
            parts.append("(")
            stack.extend((")", item.right, f" {item.op.value} ", item.left))
        elif isinstance(item, Negate):
            parts.append("-")
            stack.append(item.operand)
        else:
            parts.append(item.label)
    return "".join(parts)
