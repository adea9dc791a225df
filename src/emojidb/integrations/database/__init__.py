"""Emoji database integration."""

from emojidb.integrations.database.abc import EmojiDatabase
from emojidb.integrations.database.fake import FakeEmojiDatabase
from emojidb.integrations.database.real import RealEmojiDatabase

__all__ = ["EmojiDatabase", "FakeEmojiDatabase", "RealEmojiDatabase"]
