"""Fake ProgressReporter for testing."""

from emojidb.core.progress import ProgressReporter


class FakeProgressReporter(ProgressReporter):
    """Records progress calls without rendering anything."""

    def __init__(self) -> None:
        self._totals: list[int] = []
        self._ticks = 0
        self._stops = 0

    @property
    def totals(self) -> list[int]:
        """Totals passed to start(), in call order."""
        return self._totals

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def stops(self) -> int:
        return self._stops

    def start(self, total: int) -> None:
        self._totals.append(total)

    def advance(self) -> None:
        self._ticks += 1

    def stop(self) -> None:
        self._stops += 1
