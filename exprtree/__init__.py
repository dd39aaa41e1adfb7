"""exprtree - Postfix Expression Trees.

exprtree turns a postfix (reverse Polish) token sequence into a binary
expression tree, evaluates the tree to an integer, and draws it sideways as
indented text.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from exprtree import build_tree, evaluate, render

    tree = build_tree("2 3 + 4 5 - *")
    evaluate(tree)        # -1
    render(tree)          # ['        5', '    -', ...]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Operands are single digits and the operators are + - * /. Division
truncates toward zero. Trees are immutable once built.
"""

__version__ = "1.0.0"

from .errors import (
    ExpressionError,
    MalformedExpression,
    UnknownToken,
    DivisionByZero,
)
from .tokens import OPERATORS, TokenType, tokenize
from .config import BuildConfig, RenderConfig, TraversalStrategy
from .core import (
    ExpressionNode,
    Leaf,
    Operator,
    TreeBuilder,
    TreeEvaluator,
    TreeRenderer,
    to_infix,
    to_postfix,
    to_prefix,
)
from .api import (
    build_tree,
    evaluate,
    render,
    render_text,
    traverse_tree,
    count_nodes,
    get_leaf_nodes,
    tree_height,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "ExpressionError",
    "MalformedExpression",
    "UnknownToken",
    "DivisionByZero",
    # Tokens and config
    "OPERATORS",
    "TokenType",
    "tokenize",
    "BuildConfig",
    "RenderConfig",
    "TraversalStrategy",
    # Core
    "ExpressionNode",
    "Leaf",
    "Operator",
    "TreeBuilder",
    "TreeEvaluator",
    "TreeRenderer",
    "to_infix",
    "to_postfix",
    "to_prefix",
    # API
    "build_tree",
    "evaluate",
    "render",
    "render_text",
    "traverse_tree",
    "count_nodes",
    "get_leaf_nodes",
    "tree_height",
    "get_tree_stats",
]
