"""Exception hierarchy for exprtree.

Every failure the library can report derives from ExpressionError, so
callers can catch one type at the boundary and still tell construction
problems apart from evaluation problems.
"""

from typing import Optional


class ExpressionError(Exception):
    """Base class for errors raised while building or evaluating a tree.

    Attributes:
        position: 0-based index of the offending token, or None when the
            problem is only visible at the end of the input
        token: The offending token, if there is one
    """

    def __init__(self, message: str,
                 position: Optional[int] = None,
                 token: Optional[str] = None):
        self.reason = message
        self.position = position
        self.token = token
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        if self.position is None and self.token is None:
            return message
        details = []
        if self.token is not None:
            details.append(f"token {self.token!r}")
        if self.position is not None:
            details.append(f"position {self.position}")
        return f"{message} ({', '.join(details)})"


class MalformedExpression(ExpressionError):
    """Raised when a token sequence does not reduce to exactly one tree."""
    pass


class UnknownToken(MalformedExpression):
    """Raised for a token that is neither a digit nor a known operator."""
    pass


class DivisionByZero(ExpressionError, ZeroDivisionError):
    """Raised when a '/' node's right operand evaluates to zero."""
    pass
