"""Fake in-memory emoji database for testing."""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from emojidb.core.types import MatchedRecord
from emojidb.integrations.database.abc import EmojiDatabase


class FakeEmojiDatabase(EmojiDatabase):
    """In-memory fake implementation for testing.

    Rows inserted inside a transaction only become visible in `rows` when the
    transaction commits, mirroring the all-or-nothing load.
    """

    def __init__(self, *, fail_on_insert: int | None = None) -> None:
        """Create FakeEmojiDatabase.

        Args:
            fail_on_insert: If set, the insert with this zero-based index
                raises sqlite3.OperationalError
        """
        self._fail_on_insert = fail_on_insert
        self._path: Path | None = None
        self._table_created = False
        self._rows: list[MatchedRecord] = []
        self._pending: list[MatchedRecord] | None = None
        self._insert_attempts = 0
        self._commits = 0
        self._rollbacks = 0
        self._closed = False

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def table_created(self) -> bool:
        return self._table_created

    @property
    def rows(self) -> list[MatchedRecord]:
        """Committed rows, in insertion order."""
        return list(self._rows)

    @property
    def commits(self) -> int:
        return self._commits

    @property
    def rollbacks(self) -> int:
        return self._rollbacks

    @property
    def closed(self) -> bool:
        return self._closed

    def open(self, path: Path) -> None:
        self._path = path
        self._closed = False

    def create_emoji_table(self) -> None:
        if self._path is None:
            raise RuntimeError("Database is not open")
        self._table_created = True

    def insert_emoji(self, record: MatchedRecord) -> None:
        if self._path is None:
            raise RuntimeError("Database is not open")
        if not self._table_created:
            raise sqlite3.OperationalError("no such table: emojis")
        index = self._insert_attempts
        self._insert_attempts += 1
        if self._fail_on_insert is not None and index == self._fail_on_insert:
            raise sqlite3.OperationalError(f"Simulated insert failure at row {index}")
        if self._pending is not None:
            self._pending.append(record)
        else:
            self._rows.append(record)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self._pending = []
        try:
            yield
        except BaseException:
            self._pending = None
            self._rollbacks += 1
            raise
        self._rows.extend(self._pending)
        self._pending = None
        self._commits += 1

    def close(self) -> None:
        self._closed = True
