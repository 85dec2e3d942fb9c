"""Module entry point for running with python -m commentxml."""

import sys

from commentxml.cli import main

if __name__ == "__main__":
    sys.exit(main())
