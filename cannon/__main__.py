"""Entry point for ``python -m cannon``."""

import sys

from cannon.cli import main

if __name__ == "__main__":
    sys.exit(main())
