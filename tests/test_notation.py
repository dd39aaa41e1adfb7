"""Tests for writing trees back out as text."""

import random

import pytest

from exprtree import Leaf, build_tree, evaluate, to_infix, to_postfix, to_prefix
from exprtree.tokens import tokenize


class TestNotation:

    def test_postfix(self, classic_tree):
        assert to_postfix(classic_tree) == "2 3 + 4 5 - *"

    def test_prefix(self, classic_tree):
        assert to_prefix(classic_tree) == "* + 2 3 - 4 5"

    def test_infix(self, classic_tree):
        assert to_infix(classic_tree) == "((2 + 3) * (4 - 5))"

    def test_single_leaf(self):
        leaf = Leaf('4')
        assert to_infix(leaf) == to_prefix(leaf) == to_postfix(leaf) == "4"

    @pytest.mark.parametrize("expression", ["23+", "12+3*", "123*+", "99-9-", "12+34+*56-78-/*"])
    def test_postfix_reproduces_input(self, expression):
        assert tokenize(to_postfix(build_tree(expression))) == list(expression)


def test_infix_matches_python_arithmetic():
    """Without division, the infix text evaluates the same in Python."""
    rng = random.Random(7)

    def gen(depth):
        if depth == 0 or rng.random() < 0.3:
            return rng.choice("0123456789")
        return gen(depth - 1) + gen(depth - 1) + rng.choice("+-*")

    for _ in range(200):
        tree = build_tree(gen(4))
        assert evaluate(tree) == eval(to_infix(tree))
