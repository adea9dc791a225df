"""Output utilities for CLI commands.

user_output writes to stderr so stdout stays free for machine-readable use.
"""

from collections.abc import Iterable

import click

from emojidb.core.filenames import glyph_for_filename
from emojidb.core.reconcile import ReconcileResult
from emojidb.core.types import RegistryEntry


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a user-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def format_reconcile_summary(result: ReconcileResult, *, source_is_local: bool) -> list[str]:
    """Summary lines describing a reconciliation run.

    Example:
        Found 3773 emoji definitions in remote file (3641 matching icons – 3668 icon files total).
        Icons not found: 132
        Existing icons not found in Definition: 27
    """
    origin = "local" if source_is_local else "remote"
    lines = [
        f"Found {result.definition_count} emoji definitions in {origin} file "
        f"({len(result.matched)} matching icons – {result.icon_count} icon files total)."
    ]
    if result.unmatched_entries:
        lines.append(f"Icons not found: {len(result.unmatched_entries)}")
    if result.unmatched_icons:
        lines.append(f"Existing icons not found in Definition: {len(result.unmatched_icons)}")
    return lines


def format_unmatched_entries(entries: Iterable[RegistryEntry]) -> str:
    """Itemize registry entries without an icon as `CODE: glyph`."""
    return ", ".join(f"{entry.code}: {entry.emoji}" for entry in entries)


def format_unmatched_icons(icons: Iterable[str]) -> str:
    """Itemize icon files without a definition as `file.svg:glyph`, sorted."""
    return ", ".join(f"{icon}:{glyph_for_filename(icon)}" for icon in sorted(icons))
