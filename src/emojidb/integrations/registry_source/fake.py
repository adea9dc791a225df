"""Fake in-memory registry source for testing."""

from emojidb.integrations.registry_source.abc import RegistrySource


class FakeRegistrySource(RegistrySource):
    """In-memory fake implementation for testing.

    Returns constructor-supplied text, or raises a constructor-supplied error
    to simulate an unreadable file or failed fetch.
    """

    def __init__(
        self,
        text: str = "",
        *,
        local: bool = True,
        error: Exception | None = None,
    ) -> None:
        """Create FakeRegistrySource.

        Args:
            text: Registry text returned by read_text()
            local: Value reported by is_local
            error: If set, read_text() raises this instead of returning text
        """
        self._text = text
        self._local = local
        self._error = error
        self._read_calls = 0

    @property
    def read_calls(self) -> int:
        """Number of read_text() calls, for test assertions."""
        return self._read_calls

    @property
    def is_local(self) -> bool:
        return self._local

    def read_text(self) -> str:
        self._read_calls += 1
        if self._error is not None:
            raise self._error
        return self._text

    def describe(self) -> str:
        if self._local:
            return "/fake/emoji-test.txt"
        return "https://fake.invalid/emoji-test.txt"
