"""Icon asset inventory integration."""

from emojidb.integrations.icons.abc import IconInventory
from emojidb.integrations.icons.fake import FakeIconInventory
from emojidb.integrations.icons.real import RealIconInventory

__all__ = ["IconInventory", "FakeIconInventory", "RealIconInventory"]
