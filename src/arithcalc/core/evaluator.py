"""
Expression evaluator for arithcalc.

Reduces an expression AST to a float. Pure evaluation: no I/O, no side
effects, no use of Python's eval().
"""

from __future__ import annotations

from arithcalc.core.ast import BinaryExpr, BinaryOp, Expr, Negate, Number
from arithcalc.core.errors import EvalError, EvalErrorKind
from arithcalc.core.parser import DEFAULT_MAX_DEPTH, parse_expr


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Arithmetic follows IEEE double precision; overflow yields ``inf``.
    Subtrees are reduced left to right in postorder with an explicit
    stack, so tree height is not bounded by Python's recursion limit.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        EvalError: On division by zero.
    """
    return _interpret(expr)


def calculate(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> float:
    """Parse and evaluate an expression string in one step."""
    return evaluate(parse_expr(source, max_depth=max_depth))


def _interpret(expr: Expr) -> float:
    """Reduce the tree bottom-up onto a value stack."""
    values: list[float] = []
    # (node, children already reduced onto values)
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, reduced = stack.pop()

        if isinstance(node, Number):
            values.append(node.value)
        elif not isinstance(node, (Negate, BinaryExpr)):
            raise TypeError(f"Unknown expression type: {type(node).__name__}")
        elif not reduced:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))
        elif isinstance(node, Negate):
            values.append(-values.pop())
        else:
            right = values.pop()
            left = values.pop()
            values.append(_interpret_binary(node, left, right))

    return values.pop()


def _interpret_binary(expr: BinaryExpr, left: float, right: float) -> float:
    """Apply a binary operator to its already evaluated operands."""
    if expr.op == BinaryOp.ADD:
        return left + right
    if expr.op == BinaryOp.SUB:
        return left - right
    if expr.op == BinaryOp.MUL:
        return left * right
    if expr.op == BinaryOp.DIV:
        if right == 0.0:
            raise EvalError(EvalErrorKind.DIVISION_BY_ZERO, f"Division by zero in {expr}")
        return left / right

    raise TypeError(f"Unknown binary op: {expr.op}")
