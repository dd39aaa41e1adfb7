"""Token classification for postfix expressions.

A token is a single character: a decimal digit (operand) or one of the four
arithmetic operators. Multi-digit numbers are not representable.
"""

from enum import Enum
from typing import FrozenSet, Iterable, List, Optional

from .errors import UnknownToken


OPERATORS: FrozenSet[str] = frozenset({'+', '-', '*', '/'})
DIGITS: FrozenSet[str] = frozenset('0123456789')


class TokenType(Enum):
    """What role a token plays in an expression."""
    OPERAND = "operand"    # Single digit 0-9
    OPERATOR = "operator"  # Binary arithmetic operator


def is_operator(token: str, operators: FrozenSet[str] = OPERATORS) -> bool:
    return token in operators


def is_operand(token: str) -> bool:
    return token in DIGITS


def classify(token: str,
             position: Optional[int] = None,
             operators: FrozenSet[str] = OPERATORS) -> TokenType:
    """Classify a token as operand or operator.

    Args:
        token: Token to classify
        position: Index of the token in its sequence, for error messages
        operators: Operator characters accepted as operators

    Returns:
        TokenType of the token

    Raises:
        UnknownToken: If the token is not a single digit or known operator
    """
    if not isinstance(token, str) or len(token) != 1:
        raise UnknownToken("Tokens must be single characters",
                           position=position, token=token)
    if is_operand(token):
        return TokenType.OPERAND
    if is_operator(token, operators):
        return TokenType.OPERATOR
    raise UnknownToken("Unrecognized token", position=position, token=token)


def tokenize(text: str) -> List[str]:
    """Split a postfix expression string into single-character tokens.

    Whitespace is ignored, so "2 3 +" and "23+" give the same tokens.
    Characters are not validated here; TreeBuilder rejects unknown ones.

    Example:
        >>> tokenize("2 3 + 4 5 - *")
        ['2', '3', '+', '4', '5', '-', '*']
    """
    return [char for char in text if not char.isspace()]


def join_tokens(tokens: Iterable[str]) -> str:
    """Join tokens back into a space-separated postfix string."""
    return " ".join(tokens)
