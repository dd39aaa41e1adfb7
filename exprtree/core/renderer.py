"""Sideways text rendering of expression trees.

The tree is drawn rotated 90 degrees counter-clockwise. The root sits at the
left margin, right subtrees appear above their parent and left subtrees
below, and depth is shown as indentation:

    >>> print("\\n".join(TreeRenderer().render(build("23+45-*"))))
            5
        -
            4
    *
            3
        +
            2
"""

from typing import Iterator, Optional

from ..config import RenderConfig, ensure_valid
from .node import ExpressionNode
from .traverser import ReverseInOrderTraverser


class TreeRenderer:
    """Produce the indented line-by-line picture of a tree.

    Lines are generated lazily; nothing is written anywhere. Callers decide
    where the lines go.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize renderer.

        Args:
            config: Indentation settings (defaults to four spaces per level)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or RenderConfig()
        ensure_valid(self.config)
        self.traverser = ReverseInOrderTraverser()

    def render(self, node: Optional[ExpressionNode], depth: int = 0) -> Iterator[str]:
        """Render the subtree rooted at node.

        Args:
            node: Subtree root; None renders nothing
            depth: Depth of node within the whole tree, which sets the
                indentation of its line

        Yields:
            One line per node: the indent for its depth followed by its value
        """
        for current, level in self.traverser.traverse(node):
            yield self.config.indent(depth + level) + current.value
