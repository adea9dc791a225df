"""Tests for the database builder, using FakeEmojiDatabase."""

import sqlite3
from pathlib import Path

import pytest

from emojidb.core.builder import build_database, load_all
from emojidb.core.types import MatchedRecord
from emojidb.integrations.database.fake import FakeEmojiDatabase
from tests.fakes.progress import FakeProgressReporter
from tests.fakes.user_feedback import FakeUserFeedback

RECORDS = [
    MatchedRecord(file_name="1f600", emoji="😀", emoji_version="E1.0", description="grinning face"),
    MatchedRecord(file_name="2764", emoji="❤", emoji_version="E0.6", description="red heart"),
    MatchedRecord(
        file_name="1f602", emoji="😂", emoji_version="E0.6", description="face with tears of joy"
    ),
]


def test_build_database_writes_rows_in_order(tmp_path: Path) -> None:
    db = FakeEmojiDatabase()
    progress = FakeProgressReporter()
    feedback = FakeUserFeedback()
    output = tmp_path / "dist" / "emojis.db"

    build_database(db, output, RECORDS, progress, feedback)

    assert db.path == output
    assert db.table_created
    assert db.rows == RECORDS
    assert db.commits == 1
    assert db.closed
    assert output.parent.is_dir()
    assert "INFO: Database is prepared, now inserting." in feedback.messages


def test_build_database_ticks_progress_once_per_record(tmp_path: Path) -> None:
    progress = FakeProgressReporter()

    build_database(
        FakeEmojiDatabase(), tmp_path / "out" / "emojis.db", RECORDS, progress, FakeUserFeedback()
    )

    assert progress.totals == [3]
    assert progress.ticks == 3
    assert progress.stops == 1


def test_build_database_with_no_records_creates_empty_table(tmp_path: Path) -> None:
    db = FakeEmojiDatabase()

    build_database(
        db, tmp_path / "out" / "emojis.db", [], FakeProgressReporter(), FakeUserFeedback()
    )

    assert db.table_created
    assert db.rows == []


def test_insert_failure_rolls_back_whole_load(tmp_path: Path) -> None:
    db = FakeEmojiDatabase(fail_on_insert=2)
    progress = FakeProgressReporter()

    with pytest.raises(sqlite3.OperationalError, match="row 2"):
        build_database(db, tmp_path / "out" / "emojis.db", RECORDS, progress, FakeUserFeedback())

    assert db.rows == []
    assert db.rollbacks == 1
    assert db.commits == 0
    assert db.closed
    assert progress.ticks == 2
    assert progress.stops == 1


def test_insert_failure_removes_partial_output(tmp_path: Path) -> None:
    """The output directory is left empty when the load fails."""

    class FileWritingFakeDatabase(FakeEmojiDatabase):
        def open(self, path: Path) -> None:
            super().open(path)
            path.write_bytes(b"partial")

    output = tmp_path / "out" / "emojis.db"

    with pytest.raises(sqlite3.OperationalError):
        build_database(
            FileWritingFakeDatabase(fail_on_insert=0),
            output,
            RECORDS,
            FakeProgressReporter(),
            FakeUserFeedback(),
        )

    assert output.parent.is_dir()
    assert list(output.parent.iterdir()) == []


def test_load_all_requires_table() -> None:
    db = FakeEmojiDatabase()
    db.open(Path("/fake/emojis.db"))

    with pytest.raises(sqlite3.OperationalError, match="no such table"):
        load_all(db, RECORDS, FakeProgressReporter())
