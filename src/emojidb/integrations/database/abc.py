"""Abstract base class for the output emoji database."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from pathlib import Path

from emojidb.core.types import MatchedRecord

EMOJI_TABLE = "emojis"
EMOJI_COLUMNS = ("file_name", "emoji", "emoji_version", "description")


class EmojiDatabase(ABC):
    """Abstract interface for writing the full-text indexed emoji table.

    Implementations include:
    - FakeEmojiDatabase: In-memory rows for testing
    - RealEmojiDatabase: sqlite3 file with an FTS4 table
    """

    @abstractmethod
    def open(self, path: Path) -> None:
        """Open (creating if needed) the database file at path."""
        ...

    @abstractmethod
    def create_emoji_table(self) -> None:
        """Create the `emojis` full-text table.

        Raises:
            RuntimeError: If the database has not been opened
        """
        ...

    @abstractmethod
    def insert_emoji(self, record: MatchedRecord) -> None:
        """Insert one record as one row using a parameterized statement.

        Raises:
            RuntimeError: If the database has not been opened
        """
        ...

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group inserts so that all rows land or none do.

        Commits on normal exit, rolls back if the block raises.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the database. Safe to call when not open."""
        ...
