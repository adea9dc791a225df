"""sqlite3-backed emoji database."""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from emojidb.core.types import MatchedRecord
from emojidb.integrations.database.abc import EMOJI_COLUMNS, EMOJI_TABLE, EmojiDatabase

logger = logging.getLogger(__name__)

# FTS4 keeps the primary key declaration as column text only; it does not
# enforce uniqueness.
CREATE_EMOJI_TABLE_SQL = (
    f"create virtual table {EMOJI_TABLE} using fts4("
    "file_name text primary key, emoji text, emoji_version text, description text, "
    "tokenize=unicode61)"
)
INSERT_EMOJI_SQL = (
    f"insert into {EMOJI_TABLE} ({', '.join(EMOJI_COLUMNS)}) values (?, ?, ?, ?)"
)


class RealEmojiDatabase(EmojiDatabase):
    """Production database writing a single sqlite file.

    The connection runs in autocommit mode; transaction() issues explicit
    BEGIN/COMMIT/ROLLBACK so the whole load is one unit.
    """

    def __init__(self) -> None:
        self._connection: sqlite3.Connection | None = None

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise RuntimeError("Database is not open")
        return self._connection

    def open(self, path: Path) -> None:
        logger.debug("Opening sqlite database at %s", path)
        self._connection = sqlite3.connect(path, isolation_level=None)

    def create_emoji_table(self) -> None:
        self._require_connection().execute(CREATE_EMOJI_TABLE_SQL)

    def insert_emoji(self, record: MatchedRecord) -> None:
        self._require_connection().execute(
            INSERT_EMOJI_SQL,
            (record.file_name, record.emoji, record.emoji_version, record.description),
        )

    @contextmanager
    def transaction(self) -> Iterator[None]:
        connection = self._require_connection()
        connection.execute("BEGIN")
        try:
            yield
        except BaseException:
            logger.debug("Rolling back emoji load")
            connection.execute("ROLLBACK")
            raise
        connection.execute("COMMIT")

    def close(self) -> None:
        if self._connection is None:
            return
        self._connection.close()
        self._connection = None
