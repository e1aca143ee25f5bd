"""
CLI logger adapter.

Provides a simple logger that writes to stderr for CLI commands, keeping
stdout free for converted paths.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI.

    Outputs info messages to stderr, only in verbose mode.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize CLI logger.

        Args:
            verbose: If True, show info messages. If False, stay silent.
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.echo(f'[INFO] {message}', err=True)

