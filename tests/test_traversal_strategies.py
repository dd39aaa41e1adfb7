"""Unit tests for traversal strategies.

Tests the visiting order of each traverser and depth limiting on the
classic tree *(+(2,3), -(4,5)).
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exprtree import Leaf, TraversalStrategy, build_tree
from exprtree.core.traverser import (
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    ReverseInOrderTraverser,
    LevelOrderTraverser,
    STRATEGY_ALIASES,
    TRAVERSERS,
    create_traverser,
    collect_values,
    parse_strategy,
)


class TestTraversalStrategies(unittest.TestCase):
    """Test different traversal strategies."""

    def setUp(self):
        self.tree = build_tree("23+45-*")

    def test_pre_order(self):
        self.assertEqual(collect_values(PreOrderTraverser(), self.tree), list("*+23-45"))

    def test_in_order(self):
        self.assertEqual(collect_values(InOrderTraverser(), self.tree), list("2+3*4-5"))

    def test_post_order_reproduces_input(self):
        self.assertEqual(collect_values(PostOrderTraverser(), self.tree), list("23+45-*"))

    def test_reverse_in_order(self):
        self.assertEqual(collect_values(ReverseInOrderTraverser(), self.tree), list("5-4*3+2"))

    def test_level_order(self):
        result = list(LevelOrderTraverser().traverse(self.tree))
        self.assertEqual([node.value for node, _ in result], list("*+-2345"))
        self.assertEqual([depth for _, depth in result], [0, 1, 1, 2, 2, 2, 2])

    def test_depths_reported(self):
        depths = {node.value: depth for node, depth in PreOrderTraverser().traverse(self.tree)}
        self.assertEqual(depths['*'], 0)
        self.assertEqual(depths['+'], 1)
        self.assertEqual(depths['5'], 2)

    def test_single_leaf(self):
        for name in ('pre', 'in', 'post', 'reverse', 'level'):
            result = list(create_traverser(name).traverse(Leaf('7')))
            self.assertEqual(result, [(Leaf('7'), 0)])

    def test_none_root(self):
        for name in ('pre', 'in', 'post', 'reverse', 'level'):
            self.assertEqual(list(create_traverser(name).traverse(None)), [])


class TestDepthLimits(unittest.TestCase):
    """Test max_depth and min_depth handling."""

    def setUp(self):
        self.tree = build_tree("23+45-*")

    def test_max_depth(self):
        values = [n.value for n, _ in PreOrderTraverser().traverse(self.tree, max_depth=1)]
        self.assertEqual(values, ['*', '+', '-'])

    def test_max_depth_zero(self):
        values = [n.value for n, _ in ReverseInOrderTraverser().traverse(self.tree, max_depth=0)]
        self.assertEqual(values, ['*'])

    def test_min_depth(self):
        values = [n.value for n, _ in PostOrderTraverser().traverse(self.tree, min_depth=2)]
        self.assertEqual(values, ['2', '3', '4', '5'])

    def test_level_order_limits(self):
        values = [n.value for n, _ in LevelOrderTraverser().traverse(self.tree, max_depth=1, min_depth=1)]
        self.assertEqual(values, ['+', '-'])

    def test_in_order_limits(self):
        values = [n.value for n, _ in InOrderTraverser().traverse(self.tree, max_depth=1)]
        self.assertEqual(values, ['+', '*', '-'])


class TestTraverserFactory(unittest.TestCase):
    """Test create_traverser name handling."""

    def test_aliases(self):
        self.assertIsInstance(create_traverser('prefix'), PreOrderTraverser)
        self.assertIsInstance(create_traverser('IN_ORDER'), InOrderTraverser)
        self.assertIsInstance(create_traverser('postfix'), PostOrderTraverser)
        self.assertIsInstance(create_traverser('reverse_in_order'), ReverseInOrderTraverser)
        self.assertIsInstance(create_traverser('level'), LevelOrderTraverser)

    def test_enum_members(self):
        self.assertIsInstance(
            create_traverser(TraversalStrategy.REVERSE_IN_ORDER),
            ReverseInOrderTraverser
        )
        for strategy in TraversalStrategy:
            self.assertIsInstance(create_traverser(strategy), TRAVERSERS[strategy])

    def test_enum_values_are_names(self):
        for strategy in TraversalStrategy:
            self.assertIs(parse_strategy(strategy.value), strategy)
            self.assertIs(parse_strategy(strategy.value.upper()), strategy)

    def test_every_alias_resolves(self):
        for alias, strategy in STRATEGY_ALIASES.items():
            self.assertIs(parse_strategy(alias), strategy)
            self.assertIsInstance(create_traverser(alias), TRAVERSERS[strategy])

    def test_every_strategy_has_traverser(self):
        self.assertEqual(set(TRAVERSERS), set(TraversalStrategy))

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError) as ctx:
            create_traverser('sideways')
        self.assertIn("Unknown traversal strategy", str(ctx.exception))
        self.assertIn("prefix", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
