"""Tests for reconciliation summary formatting."""

from emojidb.cli.output import (
    format_reconcile_summary,
    format_unmatched_entries,
    format_unmatched_icons,
)
from emojidb.core.reconcile import ReconcileResult, reconcile
from emojidb.core.registry import parse_registry
from tests.test_utils.registry_text import GRINNING_FACE, TEARS_OF_JOY, registry_text


def _result() -> ReconcileResult:
    entries = parse_registry(registry_text(GRINNING_FACE, TEARS_OF_JOY))
    return reconcile(entries, {"1f600.svg", "1f601.svg"})


def test_summary_reports_counts_and_origin() -> None:
    lines = format_reconcile_summary(_result(), source_is_local=False)

    assert lines == [
        "Found 2 emoji definitions in remote file (1 matching icons – 2 icon files total).",
        "Icons not found: 1",
        "Existing icons not found in Definition: 1",
    ]


def test_summary_omits_empty_unmatched_lines() -> None:
    entries = parse_registry(registry_text(GRINNING_FACE))
    result = reconcile(entries, {"1f600.svg"})

    lines = format_reconcile_summary(result, source_is_local=True)

    assert lines == [
        "Found 1 emoji definitions in local file (1 matching icons – 1 icon files total)."
    ]


def test_itemized_lists() -> None:
    result = _result()

    assert format_unmatched_entries(result.unmatched_entries) == "1F602: \U0001f602"
    assert format_unmatched_icons(result.unmatched_icons) == "1f601.svg:\U0001f601"
