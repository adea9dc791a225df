"""Abstract base class for the icon asset inventory."""

from abc import ABC, abstractmethod
from pathlib import Path


class IconInventory(ABC):
    """Abstract interface over the directory of icon files.

    Implementations include:
    - FakeIconInventory: In-memory for testing
    - RealIconInventory: Directory listing for production
    """

    @abstractmethod
    def list_icons(self) -> list[str]:
        """List icon filenames (with extension), in a stable order.

        Returns:
            Filenames found in the icon directory. Empty if the directory is
            missing or holds no files.
        """
        ...

    @abstractmethod
    def location(self) -> Path:
        """Get the icon directory path (for error messages and debugging)."""
        ...
