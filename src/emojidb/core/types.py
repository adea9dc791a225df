"""Data types shared by the reconciler and the database builder."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryEntry:
    """One emoji definition line parsed from the registry text."""

    code_points: tuple[str, ...]
    status: str
    emoji: str
    version: str
    description: str

    @property
    def code(self) -> str:
        """Code points as written in the registry, space separated."""
        return " ".join(self.code_points)


@dataclass(frozen=True)
class MatchedRecord:
    """A registry entry paired with an icon; one row of the output table.

    file_name is the icon filename without its extension.
    """

    file_name: str
    emoji: str
    emoji_version: str
    description: str
