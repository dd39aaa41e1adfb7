"""Postfix token sequence to expression tree construction.

TreeBuilder reads tokens left to right with a list used as a stack of
partially built subtrees. Operands push a leaf; operators pop their right
operand, then their left operand, and push the combined node.
"""

import logging
from typing import Iterable, List, Optional

from ..config import BuildConfig, ensure_valid
from ..errors import MalformedExpression
from ..tokens import TokenType, classify
from .node import ExpressionNode, Leaf, Operator

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Build binary expression trees from postfix tokens.

    The builder keeps no state between calls, so one instance can be reused
    for any number of expressions.
    """

    def __init__(self, config: Optional[BuildConfig] = None):
        """Initialize builder.

        Args:
            config: Build configuration (defaults to the four arithmetic
                operators)

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config or BuildConfig()
        ensure_valid(self.config)

    def build(self, tokens: Iterable[str]) -> ExpressionNode:
        """Build an expression tree from postfix tokens.

        Args:
            tokens: Single-character tokens in postfix order. A plain string
                works too, one token per character.

        Returns:
            Root node of the expression tree

        Raises:
            UnknownToken: If a token is not a digit or accepted operator
            MalformedExpression: If an operator lacks two operands, or the
                tokens do not reduce to exactly one tree

        Example:
            >>> TreeBuilder().build(['2', '3', '+'])
            Operator('+', Leaf('2'), Leaf('3'))
        """
        stack: List[ExpressionNode] = []
        count = 0

        for position, token in enumerate(tokens):
            count += 1
            kind = classify(token, position, self.config.operators)

            if kind is TokenType.OPERAND:
                stack.append(Leaf(token))
                continue

            if len(stack) < 2:
                raise MalformedExpression(
                    f"Operator needs two operands, found {len(stack)}",
                    position=position, token=token
                )

            # Most recent subtree is the right operand
            right = stack.pop()
            left = stack.pop()
            stack.append(Operator(token, left, right))

        if not stack:
            raise MalformedExpression("Expression is empty")

        if len(stack) > 1:
            raise MalformedExpression(
                f"{len(stack)} subexpressions left without an operator"
            )

        logger.debug("Built expression tree from %d tokens", count)
        return stack[0]
