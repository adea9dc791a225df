"""Reconcile registry definitions against the icon inventory.

The two inputs are maintained independently, so gaps on either side are
expected and reported, never treated as errors.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from emojidb.core.filenames import derive_filename, strip_extension
from emojidb.core.types import MatchedRecord, RegistryEntry
from emojidb.integrations.icons.abc import IconInventory

logger = logging.getLogger(__name__)


class EmptyInventoryError(Exception):
    """Raised when the icon directory is missing or has no files."""

    def __init__(self, icon_dir: Path) -> None:
        super().__init__(f"No emoji icons found in {icon_dir}")
        self.icon_dir = icon_dir


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of matching registry entries against the inventory.

    matched keeps registry order. unmatched_icons holds inventory filenames
    (with extension) that no matched record claims.
    """

    matched: list[MatchedRecord]
    unmatched_entries: list[RegistryEntry]
    unmatched_icons: frozenset[str]
    definition_count: int
    icon_count: int


def load_inventory(icons: IconInventory) -> frozenset[str]:
    """Read the icon directory listing once.

    Raises:
        EmptyInventoryError: If the listing is empty
    """
    names = icons.list_icons()
    if not names:
        raise EmptyInventoryError(icons.location())
    return frozenset(names)


def reconcile(entries: Sequence[RegistryEntry], inventory: Iterable[str]) -> ReconcileResult:
    """Pair each registry entry with an icon file.

    Args:
        entries: Parsed registry entries, in registry order
        inventory: Icon filenames, with extension

    Returns:
        ReconcileResult with matched records in registry order
    """
    icon_names = frozenset(inventory)
    matched: list[MatchedRecord] = []
    unmatched: list[RegistryEntry] = []

    for entry in entries:
        filename = derive_filename(entry.code_points, icon_names)
        if filename not in icon_names:
            unmatched.append(entry)
            continue
        matched.append(
            MatchedRecord(
                file_name=strip_extension(filename),
                emoji=entry.emoji,
                emoji_version=entry.version,
                description=entry.description,
            )
        )

    claimed = {record.file_name for record in matched}
    unmatched_icons = frozenset(
        name for name in icon_names if strip_extension(name) not in claimed
    )
    logger.debug(
        "Reconciled %d entries: matched=%d, unmatched=%d, unclaimed icons=%d",
        len(entries),
        len(matched),
        len(unmatched),
        len(unmatched_icons),
    )
    return ReconcileResult(
        matched=matched,
        unmatched_entries=unmatched,
        unmatched_icons=unmatched_icons,
        definition_count=len(entries),
        icon_count=len(icon_names),
    )
