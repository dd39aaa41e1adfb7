"""Core components for exprtree.

This package contains the node model and the three components used in
sequence over one postfix token sequence: TreeBuilder, TreeEvaluator and
TreeRenderer.
"""

from ..tokens import (
    OPERATORS,
    DIGITS,
    TokenType,
    classify,
    is_operand,
    is_operator,
    tokenize,
)
from .node import ExpressionNode, Leaf, Operator
from .builder import TreeBuilder
from .evaluator import TreeEvaluator, OPERATIONS, truncating_divide
from .renderer import TreeRenderer
from .traverser import (
    ExpressionTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_strategy,
)
from .notation import to_infix, to_postfix, to_prefix

__all__ = [
    "OPERATORS",
    "DIGITS",
    "TokenType",
    "classify",
    "is_operand",
    "is_operator",
    "tokenize",
    "ExpressionNode",
    "Leaf",
    "Operator",
    "TreeBuilder",
    "TreeEvaluator",
    "OPERATIONS",
    "truncating_divide",
    "TreeRenderer",
    "ExpressionTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "ReverseInOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_strategy",
    "to_infix",
    "to_postfix",
    "to_prefix",
]
