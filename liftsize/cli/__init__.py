"""
Command-line interface for the elevator sizing estimator.
"""

from liftsize.cli.main import cli, main

__all__ = ["cli", "main"]
