"""Fake in-memory icon inventory for testing."""

from pathlib import Path

from emojidb.integrations.icons.abc import IconInventory


class FakeIconInventory(IconInventory):
    """In-memory fake implementation for testing.

    All state is provided via constructor. list_icons() calls are counted
    so tests can assert the directory is read once per run.
    """

    def __init__(
        self,
        icons: list[str] | None = None,
        icon_dir: Path | None = None,
    ) -> None:
        """Create FakeIconInventory.

        Args:
            icons: Icon filenames to report (with extension)
            icon_dir: Path reported by location() (defaults to a fake path)
        """
        self._icons = list(icons) if icons is not None else []
        self._icon_dir = icon_dir or Path("/fake/icons")
        self._list_calls = 0

    @property
    def list_calls(self) -> int:
        """Number of list_icons() calls, for test assertions."""
        return self._list_calls

    def list_icons(self) -> list[str]:
        self._list_calls += 1
        return list(self._icons)

    def location(self) -> Path:
        return self._icon_dir
