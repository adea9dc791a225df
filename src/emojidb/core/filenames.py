"""Derive icon filenames from registry code points."""

from collections.abc import Container, Sequence

ICON_EXTENSION = ".svg"

# Emoji-presentation variation selector; icon sets often omit it from names.
VARIATION_SELECTOR_MARKER = "-fe0f"


def normalize_code_point(code_point: str) -> str:
    """Lowercase a hex code point and strip its leading zeros.

    At least one digit always remains, so "0000" becomes "0".
    """
    return code_point.lower().lstrip("0") or "0"


def candidate_filename(code_points: Sequence[str]) -> str:
    """Primary icon filename for a code point sequence.

    Examples:
        >>> candidate_filename(["1F600"])
        '1f600.svg'
        >>> candidate_filename(["0023", "FE0F", "20E3"])
        '23-fe0f-20e3.svg'
    """
    return "-".join(normalize_code_point(cp) for cp in code_points) + ICON_EXTENSION


def fallback_filename(filename: str) -> str:
    """Filename with every variation-selector marker removed."""
    return filename.replace(VARIATION_SELECTOR_MARKER, "")


def derive_filename(code_points: Sequence[str], inventory: Container[str]) -> str:
    """Choose the filename to look up for a code point sequence.

    Returns the primary candidate when the inventory has it, otherwise the
    fallback with the variation selector stripped. The result may still be
    absent from the inventory; callers decide whether it matched.
    """
    primary = candidate_filename(code_points)
    if primary in inventory:
        return primary
    return fallback_filename(primary)


def strip_extension(filename: str) -> str:
    """Drop the icon extension, which is not stored in the database."""
    return filename.removesuffix(ICON_EXTENSION)


def glyph_for_filename(filename: str) -> str:
    """Render the emoji a hyphenated hex filename stands for.

    Segments that are not valid code points are shown as-is.
    """
    characters: list[str] = []
    for segment in strip_extension(filename).split("-"):
        try:
            characters.append(chr(int(segment, 16)))
        except (ValueError, OverflowError):
            characters.append(segment)
    return "".join(characters)
