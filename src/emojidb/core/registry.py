"""Parse Unicode emoji registry text (the emoji-test.txt format)."""

import logging
import re

from emojidb.core.types import RegistryEntry

logger = logging.getLogger(__name__)

# One definition per line:
#   1F600                                      ; fully-qualified     # 😀 E1.0 grinning face
#   1F469 200D 2764 FE0F 200D 1F48B 200D 1F469 ; fully-qualified     # 👩‍❤️‍💋‍👩 E2.0 kiss: woman, woman
# Field widths vary, so runs of spaces/tabs are accepted between fields.
# Headers, "# group:" comments and blank lines never match.
REGISTRY_LINE_PATTERN = re.compile(
    r"""
    ^(?P<code>[0-9A-Fa-f]+(?:[ \t]+[0-9A-Fa-f]+)*)   # code point group
    [ \t]+;[ \t]+(?P<status>\S+)                     # status field
    [ \t]+\#[ \t]+(?P<emoji>\S+)                     # emoji glyph
    [ \t]+(?P<version>E\S+)                          # version tag, e.g. E13.1
    [ \t]+(?P<description>[^\r\n]+?)                 # free text description
    [ \t]*\r?$
    """,
    re.MULTILINE | re.VERBOSE,
)


def parse_registry(text: str) -> list[RegistryEntry]:
    """Extract every definition line from registry text, in source order.

    Args:
        text: Full registry text

    Returns:
        One RegistryEntry per matching line. Lines that do not have the
        definition shape produce nothing.

    Examples:
        >>> entries = parse_registry("1F600 ; fully-qualified # 😀 E1.0 grinning face\\n")
        >>> entries[0].code_points, entries[0].description
        (('1F600',), 'grinning face')
    """
    entries = [
        RegistryEntry(
            code_points=tuple(match.group("code").split()),
            status=match.group("status"),
            emoji=match.group("emoji"),
            version=match.group("version"),
            description=match.group("description"),
        )
        for match in REGISTRY_LINE_PATTERN.finditer(text)
    ]
    logger.debug("Parsed %d registry entries", len(entries))
    return entries
