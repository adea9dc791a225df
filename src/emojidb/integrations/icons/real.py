"""Directory-backed icon inventory."""

import logging
from pathlib import Path

from emojidb.integrations.icons.abc import IconInventory

logger = logging.getLogger(__name__)


class RealIconInventory(IconInventory):
    """Production inventory that lists a directory of icon files."""

    def __init__(self, icon_dir: Path) -> None:
        self._icon_dir = icon_dir

    def list_icons(self) -> list[str]:
        """List filenames in the icon directory.

        A missing directory lists as empty so callers report one precondition
        failure for both cases.
        """
        if not self._icon_dir.is_dir():
            logger.debug("Icon directory does not exist: %s", self._icon_dir)
            return []

        names = sorted(entry.name for entry in self._icon_dir.iterdir() if entry.is_file())
        logger.debug("Listed %d icon files in %s", len(names), self._icon_dir)
        return names

    def location(self) -> Path:
        return self._icon_dir
