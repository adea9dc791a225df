"""Load progress display."""

from abc import ABC, abstractmethod

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
)


class ProgressReporter(ABC):
    """Reports incremental progress of a bulk operation.

    Purely observational: nothing here affects what is written.
    """

    @abstractmethod
    def start(self, total: int) -> None:
        """Begin tracking an operation of `total` steps."""

    @abstractmethod
    def advance(self) -> None:
        """Record one completed step."""

    @abstractmethod
    def stop(self) -> None:
        """Finish tracking. Safe to call when not started."""


class RichProgressReporter(ProgressReporter):
    """Progress bar rendered with rich on stderr."""

    def __init__(self, description: str = "Inserting", console: Console | None = None) -> None:
        self._description = description
        self._console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def start(self, total: int) -> None:
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=self._console,
        )
        self._progress.start()
        self._task = self._progress.add_task(self._description, total=total)

    def advance(self) -> None:
        if self._progress is None or self._task is None:
            return
        self._progress.advance(self._task)

    def stop(self) -> None:
        if self._progress is None:
            return
        self._progress.stop()
        self._progress = None
        self._task = None


class SilentProgressReporter(ProgressReporter):
    """Progress reporter that shows nothing."""

    def start(self, total: int) -> None:
        pass

    def advance(self) -> None:
        pass

    def stop(self) -> None:
        pass
