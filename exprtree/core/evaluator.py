"""Recursive evaluation of expression trees.

Evaluation is post-order: both operand subtrees are reduced to integers
before the operator at their parent is applied.
"""

import logging
import operator
from typing import Callable, Dict

from ..errors import DivisionByZero, UnknownToken
from ..tokens import is_operand
from .node import ExpressionNode

logger = logging.getLogger(__name__)


def truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero.

    Python's // floors, so -7 // 2 is -4; this returns -3.

    Raises:
        DivisionByZero: If right is 0
    """
    if right == 0:
        raise DivisionByZero("Division by zero", token='/')
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


OPERATIONS: Dict[str, Callable[[int, int], int]] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': truncating_divide,
}


class TreeEvaluator:
    """Compute the integer value of an expression tree.

    Evaluation has no side effects: calling it repeatedly on the same tree
    returns the same result.
    """

    def evaluate(self, node: ExpressionNode) -> int:
        """Evaluate the tree rooted at node.

        Args:
            node: Root of the (sub)tree to evaluate

        Returns:
            Integer value of the expression

        Raises:
            DivisionByZero: If any '/' has a right operand equal to 0
            UnknownToken: If a hand-built tree holds a value that is neither
                a digit operand nor a known operator
        """
        result = self._evaluate(node)
        logger.debug("Evaluated tree rooted at %r to %d", node.value, result)
        return result

    def _evaluate(self, node: ExpressionNode) -> int:
        if node.is_leaf():
            if not is_operand(node.value):
                raise UnknownToken("Operand must be a single digit", token=node.value)
            return int(node.value)

        operation = OPERATIONS.get(node.value)
        if operation is None:
            raise UnknownToken("Unknown operator", token=node.value)

        left = self._evaluate(node.left)
        right = self._evaluate(node.right)
        return operation(left, right)

