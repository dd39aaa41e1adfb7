"""Configuration system for exprtree.

This module defines how callers tune tree construction and rendering.
Defaults reproduce the classic behaviour exactly: the four arithmetic
operators and four-space indentation per tree level.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List

from .tokens import OPERATORS


class TraversalStrategy(Enum):
    """Order in which a traversal visits expression nodes."""
    PRE_ORDER = "pre"               # Operator before operands (prefix)
    IN_ORDER = "in"                 # Left, self, right (infix)
    POST_ORDER = "post"             # Operands before operator (postfix)
    REVERSE_IN_ORDER = "reverse"    # Right, self, left (sideways rendering)
    LEVEL_ORDER = "level"           # Level by level from the root


@dataclass
class BuildConfig:
    """Configuration for turning postfix tokens into a tree."""

    # Operator characters accepted by the builder. Must be a subset of the
    # operators the evaluator knows how to apply.
    operators: FrozenSet[str] = field(default_factory=lambda: OPERATORS)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.operators:
            errors.append("operators cannot be empty")

        for op in sorted(self.operators, key=repr):
            if not isinstance(op, str) or len(op) != 1:
                errors.append(f"operator {op!r} must be a single character")
            elif op.isdigit():
                errors.append(f"operator {op!r} collides with an operand digit")
            elif op not in OPERATORS:
                errors.append(f"operator {op!r} has no arithmetic meaning")

        return errors


@dataclass
class RenderConfig:
    """Configuration for the sideways text rendering."""

    indent_width: int = 4    # Indent characters per tree level
    indent_char: str = " "   # Character repeated for indentation

    @classmethod
    def compact(cls) -> 'RenderConfig':
        """Create config with two-character indentation."""
        return cls(indent_width=2)

    def indent(self, depth: int) -> str:
        """Return the indentation prefix for a node at the given depth."""
        return self.indent_char * (depth * self.indent_width)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.indent_width < 0:
            errors.append("indent_width cannot be negative")

        if not isinstance(self.indent_char, str) or len(self.indent_char) != 1:
            errors.append("indent_char must be a single character")

        return errors


def ensure_valid(config) -> None:
    """Raise ValueError listing every problem in a config object."""
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
