"""Shared pytest configuration and fixtures for exprtree tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exprtree import Leaf, Operator


# Tokens of the classic example (2 + 3) * (4 - 5)
CLASSIC_TOKENS = ['2', '3', '+', '4', '5', '-', '*']


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: large inputs, excluded by run_tests.py by default"
    )


@pytest.fixture
def classic_tokens():
    return list(CLASSIC_TOKENS)


@pytest.fixture
def classic_tree():
    """The tree *(+(2,3), -(4,5)) built by hand."""
    return Operator(
        '*',
        Operator('+', Leaf('2'), Leaf('3')),
        Operator('-', Leaf('4'), Leaf('5')),
    )
