"""Reconcile the registry with the icon set and rebuild the database."""

import logging
import sqlite3
from typing import NoReturn

import click
import httpx

from emojidb.cli.ensure import Ensure
from emojidb.cli.output import (
    format_reconcile_summary,
    format_unmatched_entries,
    format_unmatched_icons,
)
from emojidb.core.builder import build_database
from emojidb.core.context import EmojiDbContext
from emojidb.core.destination import inputs_inside_output_dir, is_unsafe_output_dir
from emojidb.core.reconcile import EmptyInventoryError, ReconcileResult, load_inventory, reconcile
from emojidb.core.registry import parse_registry

logger = logging.getLogger(__name__)


def _fail(ctx: EmojiDbContext, phase: str, error: BaseException) -> NoReturn:
    """Report a run-terminating failure with the phase it happened in, then exit."""
    logger.debug("Exception caught: %s: %s", type(error).__name__, str(error))
    logger.debug("Exception details:", exc_info=True)
    ctx.feedback.error(f"Failed while {phase}: {error}")
    raise SystemExit(1) from None


def _report(ctx: EmojiDbContext, result: ReconcileResult, *, list_unmatched: bool) -> None:
    assert ctx.registry is not None
    for line in format_reconcile_summary(result, source_is_local=ctx.registry.is_local):
        ctx.feedback.info(line)
    if not list_unmatched:
        return
    if result.unmatched_entries:
        ctx.feedback.info("\nDefinitions without an icon:")
        ctx.feedback.info(format_unmatched_entries(result.unmatched_entries))
    if result.unmatched_icons:
        ctx.feedback.info("\nIcons without a definition:")
        ctx.feedback.info(format_unmatched_icons(result.unmatched_icons))


def reconcile_definitions(ctx: EmojiDbContext, *, list_unmatched: bool) -> ReconcileResult:
    """Load both inputs, match them and print the summary."""
    icons = Ensure.not_none(ctx.icons, f"No config found at {ctx.config_path}")
    registry = Ensure.not_none(ctx.registry, f"No config found at {ctx.config_path}")

    try:
        inventory = load_inventory(icons)
    except EmptyInventoryError as e:
        ctx.feedback.error(f"{e}. Please run: git submodule update --init --recursive")
        raise SystemExit(1) from None

    phase = "reading registry" if registry.is_local else "fetching registry"
    try:
        text = registry.read_text()
    except (OSError, UnicodeDecodeError, httpx.HTTPError) as e:
        _fail(ctx, f"{phase} {registry.describe()}", e)

    result = reconcile(parse_registry(text), inventory)
    _report(ctx, result, list_unmatched=list_unmatched)
    return result


@click.command("build")
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Reconcile and report without touching the output directory.",
)
@click.option(
    "--list-unmatched",
    is_flag=True,
    default=False,
    help="List definitions without icons and icons without definitions.",
)
@click.pass_obj
def build_cmd(ctx: EmojiDbContext, dry_run: bool, list_unmatched: bool) -> None:
    """Rebuild the emoji database from scratch.

    The output file's parent directory is deleted and recreated.
    """
    config = Ensure.not_none(
        ctx.config,
        f"No config found at {ctx.config_path}. Run 'emojidb init' to create one.",
    )
    Ensure.invariant(
        not is_unsafe_output_dir(config.output.parent, ctx.cwd),
        f"Refusing to use {config.output.parent} as output directory: "
        "it is deleted on every build. Point 'output' at a dedicated directory.",
    )
    inputs = [config.icon_dir, ctx.config_path]
    if config.local_emoji_definition is not None:
        inputs.append(config.local_emoji_definition)
    endangered = ", ".join(str(p) for p in inputs_inside_output_dir(config.output.parent, inputs))
    Ensure.invariant(
        not endangered,
        f"Refusing to use {config.output.parent} as output directory: "
        f"it would delete build inputs ({endangered}). "
        "Point 'output' at a dedicated directory.",
    )

    result = reconcile_definitions(ctx, list_unmatched=list_unmatched)

    if dry_run:
        ctx.feedback.info(f"\nDry run: would write {len(result.matched)} rows to {config.output}")
        return

    ctx.feedback.info("")
    try:
        build_database(ctx.database, config.output, result.matched, ctx.progress, ctx.feedback)
    except OSError as e:
        _fail(ctx, f"resetting destination {config.output.parent}", e)
    except sqlite3.Error as e:
        _fail(ctx, f"writing database {config.output}", e)

    ctx.feedback.success(f"✓ Wrote {len(result.matched)} emojis to {config.output}")
