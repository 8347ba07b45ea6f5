"""CLI commands for DayBalance.

This package provides the command-line interface for viewing
insights over exported journal entries.
"""

from daybalance.cli.main import cli, main

__all__ = ["cli", "main"]
