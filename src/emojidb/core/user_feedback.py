"""Messages a build run shows while it reconciles and writes the database."""

from abc import ABC, abstractmethod

import click

from emojidb.cli.output import user_output


def _error_line(message: str) -> str:
    return click.style("Error: ", fg="red") + message


class UserFeedback(ABC):
    """Where `emojidb build` sends its reconcile summary and failure reports.

    Commands talk to ctx.feedback rather than printing, so `--quiet` only has
    to pick an implementation once in create_context.

    The summary lines and the "Wrote N emojis" confirmation are informational
    and vanish under `--quiet`. Failures (an empty icon directory, an
    unreachable registry, a database that could not be written) are printed
    in every mode with a red "Error:" prefix, matching Ensure.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Report progress such as reconcile counts."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Confirm that the database or config was written."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report why the run is about to exit with status 1.

        The message is given without the "Error:" prefix.
        """


class InteractiveFeedback(UserFeedback):
    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(_error_line(message))


class SuppressedFeedback(UserFeedback):
    """Used for `--quiet`: failures still reach stderr."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(_error_line(message))
