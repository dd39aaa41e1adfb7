#!/usr/bin/env python3
"""
Expression tree walkthrough with exprtree.

This example demonstrates:
- Building a tree from postfix tokens
- Drawing it sideways and evaluating it
- Writing it back out in other notations
- Handling malformed input and division by zero
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from exprtree import (
    ExpressionError,
    build_tree,
    evaluate,
    get_tree_stats,
    render,
    to_infix,
    to_prefix,
)


def show(expression: str) -> None:
    """Build, draw and evaluate one postfix expression."""
    print(f"Postfix: {expression}")
    print("-" * 50)

    try:
        tree = build_tree(expression)
    except ExpressionError as e:
        print(f"  Cannot build: {e}\n")
        return

    print(f"  Infix:  {to_infix(tree)}")
    print(f"  Prefix: {to_prefix(tree)}")

    stats = get_tree_stats(tree)
    print(f"  Nodes: {stats['total_nodes']}, height: {stats['max_depth']}")

    print("  Tree:")
    for line in render(tree):
        print(f"    {line}")

    try:
        print(f"  Result: {evaluate(tree)}\n")
    except ExpressionError as e:
        print(f"  Cannot evaluate: {e}\n")


def main():
    expressions = sys.argv[1:] or [
        "2 3 + 4 5 - *",
        "9 2 3 * - 7 /",
        "6 0 /",
        "+ 2 3",
        "2 3",
    ]
    for expression in expressions:
        show(expression)


if __name__ == "__main__":
    main()
