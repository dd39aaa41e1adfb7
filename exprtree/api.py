"""High-level API for exprtree.

This module provides simple, functional interfaces for the common
operations. These functions wrap TreeBuilder, TreeEvaluator and
TreeRenderer for ease of use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import BuildConfig, RenderConfig, TraversalStrategy
from .core.builder import TreeBuilder
from .core.evaluator import TreeEvaluator
from .core.node import ExpressionNode
from .core.renderer import TreeRenderer
from .core.traverser import create_traverser
from .tokens import tokenize


def build_tree(
    tokens: Union[str, Iterable[str]],
    config: Optional[BuildConfig] = None
) -> ExpressionNode:
    """Build an expression tree from postfix tokens.

    A string is tokenized first, so whitespace between tokens is allowed.

    Args:
        tokens: Postfix expression as a string or a sequence of tokens
        config: Optional build configuration

    Returns:
        Root of the expression tree

    Raises:
        MalformedExpression: If the tokens do not form one expression

    Example:
        >>> tree = build_tree("2 3 + 4 5 - *")
        >>> evaluate(tree)
        -1
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)
    return TreeBuilder(config).build(tokens)


def evaluate(tree: ExpressionNode) -> int:
    """Evaluate an expression tree to an integer.

    Raises:
        DivisionByZero: If a division has a zero right operand
    """
    return TreeEvaluator().evaluate(tree)


def render(tree: ExpressionNode, config: Optional[RenderConfig] = None) -> List[str]:
    """Render an expression tree as a list of sideways-layout lines."""
    return list(TreeRenderer(config).render(tree))


def render_text(tree: ExpressionNode, config: Optional[RenderConfig] = None) -> str:
    """Render an expression tree as a single newline-joined string."""
    return "\n".join(TreeRenderer(config).render(tree))


def traverse_tree(
    root: ExpressionNode,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.POST_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0
) -> Iterator[Tuple[ExpressionNode, int]]:
    """Walk an expression tree in the given order.

    Args:
        root: Starting node for traversal
        strategy: Traversal order (pre, in, post, reverse, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Tuples of (node, depth)

    Example:
        >>> tree = build_tree("23+")
        >>> [node.value for node, _ in traverse_tree(tree, "pre")]
        ['+', '2', '3']
    """
    traverser = create_traverser(strategy)
    yield from traverser.traverse(root, max_depth=max_depth, min_depth=min_depth)


def count_nodes(root: ExpressionNode, **kwargs) -> int:
    """Count nodes in a tree (see traverse_tree for options)."""
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def get_leaf_nodes(root: ExpressionNode, **kwargs) -> Iterator[ExpressionNode]:
    """Yield the operand nodes, in traversal order."""
    for node, _ in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def tree_height(root: ExpressionNode) -> int:
    """Depth of the deepest node; a single leaf has height 0."""
    return max(depth for _, depth in traverse_tree(root))


def get_tree_stats(root: ExpressionNode) -> Dict[str, Any]:
    """Get statistics about an expression tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, max_depth,
        per-depth node counts under 'depths' and per-operator counts under
        'operators'

    Example:
        >>> stats = get_tree_stats(build_tree("23+45-*"))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (7, 4, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'operators': {}
    }

    for node, depth in traverse_tree(root, TraversalStrategy.LEVEL_ORDER):
        stats['total_nodes'] += 1

        if node.is_leaf():
            stats['leaf_nodes'] += 1
        else:
            stats['operators'][node.value] = stats['operators'].get(node.value, 0) + 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats
