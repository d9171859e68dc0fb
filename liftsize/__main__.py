"""
Entry point for running liftsize as a module.

Usage:
    python -m liftsize estimate --stops 2 --load 400 --travel 4
    python -m liftsize make-example
    python -m liftsize serve --port 8000
"""

import sys

from liftsize.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
