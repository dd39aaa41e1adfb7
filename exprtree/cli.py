"""Command line driver for exprtree.

Usage:
    exprtree "23+45-*"              # Tree picture and result
    exprtree 2 3 + 4 5 - '*'        # Arguments are joined into one expression
    exprtree --notation infix "23+" # Also print the infix form
    exprtree --no-tree "62/"        # Result only
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .api import build_tree, evaluate, render
from .config import RenderConfig
from .core.notation import to_infix, to_postfix, to_prefix
from .errors import ExpressionError
from .tokens import tokenize

logger = logging.getLogger(__name__)

NOTATIONS = {
    'infix': to_infix,
    'prefix': to_prefix,
    'postfix': to_postfix,
}


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="Build, draw and evaluate a postfix expression tree"
    )
    parser.add_argument(
        "expression",
        nargs="+",
        help="Postfix expression of single digits and + - * /"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="Indent width per tree level (default: 4)"
    )
    parser.add_argument(
        "--no-tree",
        action="store_true",
        help="Do not print the tree picture"
    )
    parser.add_argument(
        "--no-result",
        action="store_true",
        help="Do not evaluate the expression"
    )
    parser.add_argument(
        "--notation",
        choices=sorted(NOTATIONS),
        help="Also print the expression in this notation"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the parsed command and return the exit status."""
    render_config = RenderConfig(indent_width=args.indent)

    tokens = tokenize("".join(args.expression))
    logger.debug("Tokens: %s", tokens)

    try:
        tree = build_tree(tokens)

        if args.notation:
            print(f"{args.notation.capitalize()}: {NOTATIONS[args.notation](tree)}")

        if not args.no_tree:
            print("Expression Tree:")
            for line in render(tree, render_config):
                print(line)

        if not args.no_result:
            result = evaluate(tree)
            print("Result of the Expression:")
            print(result)
    except ExpressionError as e:
        logger.error("%s", e)
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    errors = RenderConfig(indent_width=args.indent).validate()
    if errors:
        parser.error("; ".join(errors))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    return run(args)
