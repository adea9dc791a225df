"""Rebuild the emoji database from matched records."""

import logging
from collections.abc import Sequence
from pathlib import Path

from emojidb.core.destination import fresh_destination
from emojidb.core.progress import ProgressReporter
from emojidb.core.types import MatchedRecord
from emojidb.core.user_feedback import UserFeedback
from emojidb.integrations.database.abc import EmojiDatabase

logger = logging.getLogger(__name__)


def load_all(
    db: EmojiDatabase,
    records: Sequence[MatchedRecord],
    progress: ProgressReporter,
) -> None:
    """Insert every record, in order, as one all-or-nothing transaction."""
    progress.start(len(records))
    try:
        with db.transaction():
            for record in records:
                db.insert_emoji(record)
                progress.advance()
    finally:
        progress.stop()


def build_database(
    db: EmojiDatabase,
    output: Path,
    records: Sequence[MatchedRecord],
    progress: ProgressReporter,
    feedback: UserFeedback,
) -> None:
    """Recreate the output directory and write a fresh database into it.

    Any failure aborts the build and removes the partial database file.

    Args:
        db: Database implementation to write through
        output: Database file path; its parent directory is recreated
        records: Matched records in registry order
        progress: Receives one tick per inserted record
        feedback: Receives the "prepared" notice before inserting
    """
    with fresh_destination(output):
        db.open(output)
        try:
            db.create_emoji_table()
            logger.debug("Created emoji table in %s", output)
            feedback.info("Database is prepared, now inserting.")
            load_all(db, records, progress)
        finally:
            db.close()
    logger.debug("Wrote %d rows to %s", len(records), output)
