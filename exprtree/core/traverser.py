"""Tree traversal strategies for exprtree.

Traversers implement the different orders in which an expression tree can be
walked. Each yields (node, depth) pairs with depth relative to the root they
were started on. Expression trees are acyclic and every node has zero or two
children, so no visited-set bookkeeping is needed.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Iterator, List, Optional, Tuple, Type, Union

from ..config import TraversalStrategy
from .node import ExpressionNode


class ExpressionTraverser(ABC):
    """Abstract base class for expression tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(ExpressionTraverser):
    """Operator before its operands. Visiting order spells prefix notation."""

    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:

        def _traverse_recursive(node: Optional[ExpressionNode], depth: int):
            if node is None:
                return
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(node.left, depth + 1)
                yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class InOrderTraverser(ExpressionTraverser):
    """Left operand, operator, right operand. Spells infix notation."""

    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:

        def _traverse_recursive(node: Optional[ExpressionNode], depth: int):
            if node is None:
                return
            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _traverse_recursive(node.left, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if explore:
                yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(ExpressionTraverser):
    """Operands before their operator. Spells postfix notation.

    This is the order in which an evaluator reduces the tree.
    """

    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:

        def _traverse_recursive(node: Optional[ExpressionNode], depth: int):
            if node is None:
                return
            if self._should_explore(depth, max_depth):
                yield from _traverse_recursive(node.left, depth + 1)
                yield from _traverse_recursive(node.right, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class ReverseInOrderTraverser(ExpressionTraverser):
    """Right operand, operator, left operand.

    Printing each visited node on its own line, indented by depth, lays the
    tree out rotated 90 degrees counter-clockwise: root at the left margin,
    right subtrees above, left subtrees below. Swapping the order mirrors
    the picture, so TreeRenderer depends on it exactly.
    """

    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:

        def _traverse_recursive(node: Optional[ExpressionNode], depth: int):
            if node is None:
                return
            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _traverse_recursive(node.right, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if explore:
                yield from _traverse_recursive(node.left, depth + 1)

        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(ExpressionTraverser):
    """Level by level from the root, left to right within a level."""

    def traverse(self,
                 root: Optional[ExpressionNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[ExpressionNode, int]]:
        if root is None:
            return

        queue: Deque[Tuple[ExpressionNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children():
                    queue.append((child, depth + 1))


TRAVERSERS: Dict[TraversalStrategy, Type[ExpressionTraverser]] = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.REVERSE_IN_ORDER: ReverseInOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}

# Accepted spellings besides the enum values themselves
STRATEGY_ALIASES: Dict[str, TraversalStrategy] = {
    'pre_order': TraversalStrategy.PRE_ORDER,
    'prefix': TraversalStrategy.PRE_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'infix': TraversalStrategy.IN_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'postfix': TraversalStrategy.POST_ORDER,
    'reverse_in_order': TraversalStrategy.REVERSE_IN_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a traversal strategy from an enum member or a name.

    Names are case-insensitive and may be an enum value (pre, in, post,
    reverse, level) or one of STRATEGY_ALIASES.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    name = str(strategy).lower()
    if name in STRATEGY_ALIASES:
        return STRATEGY_ALIASES[name]
    try:
        return TraversalStrategy(name)
    except ValueError:
        choices = [s.value for s in TraversalStrategy] + list(STRATEGY_ALIASES)
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(choices)}"
        ) from None


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str]) -> ExpressionTraverser:
    """Create a traverser instance for a strategy.

    Args:
        strategy: TraversalStrategy member or name (see parse_strategy)

    Returns:
        ExpressionTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return TRAVERSERS[parse_strategy(strategy)]()


def collect_values(traverser: ExpressionTraverser, root: ExpressionNode) -> List[str]:
    """Return node values in the order the traverser visits them."""
    return [node.value for node, _ in traverser.traverse(root)]
