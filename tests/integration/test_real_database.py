"""Tests for RealEmojiDatabase against a real sqlite file."""

import sqlite3
from pathlib import Path

import pytest

from emojidb.core.types import MatchedRecord
from emojidb.integrations.database.real import RealEmojiDatabase

RECORDS = [
    MatchedRecord(file_name="1f600", emoji="😀", emoji_version="E1.0", description="grinning face"),
    MatchedRecord(
        file_name="1f602", emoji="😂", emoji_version="E0.6", description="face with tears of joy"
    ),
    MatchedRecord(file_name="1fa85", emoji="🪅", emoji_version="E12.0", description="piñata"),
    MatchedRecord(
        file_name="1f9d1-200d-1f4bb",
        emoji="🧑‍💻",
        emoji_version="E12.1",
        description="technologist'); drop table emojis; --",
    ),
]


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Write RECORDS into a fresh database file."""
    path = tmp_path / "emojis.db"
    db = RealEmojiDatabase()
    db.open(path)
    db.create_emoji_table()
    with db.transaction():
        for record in RECORDS:
            db.insert_emoji(record)
    db.close()
    return path


def _query(path: Path, sql: str, params: tuple[str, ...] = ()) -> list[tuple]:
    connection = sqlite3.connect(path)
    try:
        return connection.execute(sql, params).fetchall()
    finally:
        connection.close()


def test_schema_is_fts4_with_unicode61(db_path: Path) -> None:
    [(sql,)] = _query(db_path, "select sql from sqlite_master where name = 'emojis'")

    assert "using fts4" in sql
    assert "file_name text primary key" in sql
    assert "tokenize=unicode61" in sql


def test_columns_in_contract_order(db_path: Path) -> None:
    columns = [row[1] for row in _query(db_path, "pragma table_info(emojis)")]

    assert columns == ["file_name", "emoji", "emoji_version", "description"]


def test_rows_round_trip_in_insertion_order(db_path: Path) -> None:
    rows = _query(
        db_path, "select file_name, emoji, emoji_version, description from emojis order by rowid"
    )

    assert rows == [
        (r.file_name, r.emoji, r.emoji_version, r.description) for r in RECORDS
    ]


def test_full_text_search_by_description_word(db_path: Path) -> None:
    rows = _query(db_path, "select file_name from emojis where description match ?", ("tears",))

    assert rows == [("1f602",)]


def test_unicode61_folds_diacritics(db_path: Path) -> None:
    rows = _query(db_path, "select file_name from emojis where emojis match ?", ("pinata",))

    assert rows == [("1fa85",)]


def test_description_text_is_stored_verbatim(db_path: Path) -> None:
    """Parameterized inserts keep SQL-looking text as plain data."""
    rows = _query(db_path, "select description from emojis where file_name = ?", ("1f9d1-200d-1f4bb",))

    assert rows == [("technologist'); drop table emojis; --",)]


def test_transaction_rolls_back_on_error(tmp_path: Path) -> None:
    path = tmp_path / "emojis.db"
    db = RealEmojiDatabase()
    db.open(path)
    db.create_emoji_table()

    with pytest.raises(ValueError):
        with db.transaction():
            db.insert_emoji(RECORDS[0])
            raise ValueError("abort load")
    db.close()

    assert _query(path, "select count(*) from emojis") == [(0,)]


def test_operations_require_open_database() -> None:
    db = RealEmojiDatabase()

    with pytest.raises(RuntimeError, match="not open"):
        db.create_emoji_table()
    db.close()
