"""Module entry point for running with python -m mdindex."""

import sys

from mdindex.cli import main

if __name__ == "__main__":
    sys.exit(main())
