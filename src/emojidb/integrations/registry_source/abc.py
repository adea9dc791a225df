"""Abstract base class for the emoji registry text source."""

from abc import ABC, abstractmethod


class RegistrySource(ABC):
    """Abstract interface for reading the Unicode emoji registry text.

    Implementations include:
    - FakeRegistrySource: In-memory for testing
    - LocalRegistrySource: Reads a file on disk
    - RemoteRegistrySource: Fetches over HTTP with httpx
    """

    @property
    @abstractmethod
    def is_local(self) -> bool:
        """True when the text comes from a local file rather than the network."""
        ...

    @abstractmethod
    def read_text(self) -> str:
        """Read the full registry text.

        Returns:
            The registry text decoded as UTF-8

        Raises:
            OSError: If a local file cannot be read
            httpx.HTTPError: If a remote fetch fails or returns a non-2xx status
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable origin of the text (path or URL)."""
        ...
