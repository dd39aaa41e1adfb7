"""Write expression trees back out as text.

Only tree-to-text conversions live here. Reading infix input is out of
scope; the builder accepts postfix only.
"""

from ..tokens import join_tokens
from .node import ExpressionNode
from .traverser import PostOrderTraverser, PreOrderTraverser, collect_values


def to_postfix(root: ExpressionNode) -> str:
    """Space-separated postfix form, e.g. "2 3 + 4 5 - *"."""
    return join_tokens(collect_values(PostOrderTraverser(), root))


def to_prefix(root: ExpressionNode) -> str:
    """Space-separated prefix form, e.g. "* + 2 3 - 4 5"."""
    return join_tokens(collect_values(PreOrderTraverser(), root))


def to_infix(root: ExpressionNode) -> str:
    """Fully parenthesized infix form, e.g. "((2 + 3) * (4 - 5))".

    Every operator gets its own parentheses, so the text never depends on
    precedence rules. A lone operand is returned bare.
    """
    if root.is_leaf():
        return root.value
    return f"({to_infix(root.left)} {root.value} {to_infix(root.right)})"
