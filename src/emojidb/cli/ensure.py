"""CLI error handling utilities with styled output.

The Ensure class asserts invariants in CLI commands with consistent,
user-friendly error messages. All errors use a red "Error:" prefix.
"""

from typing import TypeVar

import click

from emojidb.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Takes `T | None` and returns `T`, so the type checker can narrow the
        value after this call.

        Example:
            >>> config = Ensure.not_none(ctx.config, "No emojidb.toml found")
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value
