"""Expression tree nodes for exprtree.

A node is either a Leaf (an operand digit) or an Operator holding exactly two
subtrees. The two variants make the "leaf xor both children" rule part of the
type rather than a runtime convention: there is no way to build a node with a
single child.

Nodes are frozen dataclasses. Once TreeBuilder returns a tree nothing in it
changes, so any number of evaluators and renderers may read it at once.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional


class ExpressionNode(ABC):
    """Abstract base class for nodes in an expression tree.

    This class defines the minimal interface shared by both node variants.
    Traversal logic lives in the traversers; a node only knows its own value
    and its direct children.
    """

    value: str
    left: Optional["ExpressionNode"]
    right: Optional["ExpressionNode"]

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is an operand (has no children).

        Returns:
            bool: True for operands, False for operators
        """
        pass

    @abstractmethod
    def children(self) -> Iterator["ExpressionNode"]:
        """Iterate over the direct children, left first.

        Returns:
            Iterator yielding zero (leaf) or two (operator) nodes
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Common fields:
        - value: The token this node represents
        - kind: "operand" or "operator"
        - arity: Number of children (0 or 2)

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Leaf(ExpressionNode):
    """An operand: a single decimal digit."""

    value: str

    # Not dataclass fields: operands never have children.
    left = None
    right = None

    def is_leaf(self) -> bool:
        return True

    def children(self) -> Iterator[ExpressionNode]:
        return iter(())

    def metadata(self) -> Dict[str, Any]:
        return {'value': self.value, 'kind': 'operand', 'arity': 0}

    def __repr__(self) -> str:
        return f"Leaf({self.value!r})"


@dataclass(frozen=True)
class Operator(ExpressionNode):
    """A binary operator owning its left and right operand subtrees."""

    value: str
    left: ExpressionNode
    right: ExpressionNode

    def __post_init__(self):
        for side in ('left', 'right'):
            child = getattr(self, side)
            if not isinstance(child, ExpressionNode):
                raise TypeError(
                    f"Operator {self.value!r} needs an ExpressionNode as its "
                    f"{side} child, got {type(child).__name__}"
                )

    def is_leaf(self) -> bool:
        return False

    def children(self) -> Iterator[ExpressionNode]:
        yield self.left
        yield self.right

    def metadata(self) -> Dict[str, Any]:
        return {'value': self.value, 'kind': 'operator', 'arity': 2}

    def __repr__(self) -> str:
        return f"Operator({self.value!r}, {self.left!r}, {self.right!r})"
