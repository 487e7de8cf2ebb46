"""
Graph rendering for expression trees.

``render_dot`` emits a Graphviz "dot" description of the tree to be piped
into the external ``dot`` tool; it never runs the tool itself. Node ids are
assigned in depth-first preorder, so the output for a given tree is always
byte-identical.

``render_tree`` builds a rich Tree for viewing the AST in a terminal.
"""

from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from arithcalc.core.ast import Expr, walk


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_dot(expr: Expr, name: str | None = None) -> str:
    """Render an expression tree as an undirected dot graph.

    Example for ``1 + 2``::

        strict graph {
          0 [ label = "+", kind = "BinaryOp" ]
          0 -- 1
          0 -- 2
          1 [ label = "1", kind = "Number" ]
          2 [ label = "2", kind = "Number" ]
        }

    Args:
        expr: Expression AST.
        name: Optional graph name placed after the ``graph`` keyword.

    Returns:
        The complete graph description, without a trailing newline.
    """
    nodes = list(walk(expr))

    # Subtree sizes, filled right to left so children are always known
    sizes = [1] * len(nodes)
    for i in range(len(nodes) - 1, -1, -1):
        child = i + 1
        for _ in nodes[i].children:
            sizes[i] += sizes[child]
            child += sizes[child]

    header = f"strict graph {_quote(name)} {{" if name else "strict graph {"
    lines = [header]
    for i, node in enumerate(nodes):
        lines.append(f"  {i} [ label = {_quote(node.label)}, kind = {_quote(node.kind)} ]")
        child = i + 1
        for _ in node.children:
            lines.append(f"  {i} -- {child}")
            child += sizes[child]
    lines.append("}")
    return "\n".join(lines)


def render_tree(expr: Expr) -> Tree:
    """Build a rich Tree mirroring the expression structure."""
    root = Tree(_tree_label(expr))
    stack: list[tuple[Expr, Tree]] = [(child, root) for child in reversed(expr.children)]
    while stack:
        node, parent = stack.pop()
        branch = parent.add(_tree_label(node))
        stack.extend((child, branch) for child in reversed(node.children))
    return root


def _tree_label(node: Expr) -> Text:
    label = Text(node.label, style="bold")
    label.append(f"  {node.kind}", style="dim")
    return label
