"""Allow running exprtree as ``python -m exprtree``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
