"""Data models for transliteration schemas."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


# Placeholder padding segment edges; stripped from prefix/postfix keys
BOUNDARY_MARKER = "$"

EMPTY_TABLE: Mapping[str, str] = MappingProxyType({})


def _freeze_table(table: Mapping[str, str] | None) -> Mapping[str, str]:
    if not table:
        return EMPTY_TABLE
    return MappingProxyType(dict(table))


@dataclass(frozen=True, eq=False)
class Schema:
    """A named, immutable set of substitution rule tables.

    Each of the four tables is optional. A missing table is stored as an
    empty read-only mapping, so every lookup answers "no match" the same
    way whether the category is absent or the key is.
    """

    name: str
    description: str = ""
    url: str = ""
    mapping: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    prev_mapping: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    next_mapping: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    ending_mapping: Mapping[str, str] = field(default_factory=lambda: EMPTY_TABLE)
    samples: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        for table_name in ("mapping", "prev_mapping", "next_mapping", "ending_mapping"):
            object.__setattr__(self, table_name, _freeze_table(getattr(self, table_name)))
        object.__setattr__(
            self,
            "samples",
            tuple((source, expected) for source, expected in self.samples),
        )

    @classmethod
    def from_dict(cls, definition: Mapping[str, Any]) -> "Schema":
        """
        Build a schema from a parsed definition record.

        Args:
            definition: Record with name, description, url, the optional
                rule tables and optional samples

        Returns:
            Schema instance
        """
        return cls(
            name=definition["name"],
            description=definition.get("description") or "",
            url=definition.get("url") or "",
            mapping=definition.get("mapping"),  # type: ignore[arg-type]
            prev_mapping=definition.get("prev_mapping"),  # type: ignore[arg-type]
            next_mapping=definition.get("next_mapping"),  # type: ignore[arg-type]
            ending_mapping=definition.get("ending_mapping"),  # type: ignore[arg-type]
            samples=tuple(tuple(pair) for pair in definition.get("samples") or ()),  # type: ignore[misc]
        )

    @classmethod
    def load(cls, name: str) -> "Schema":
        """
        Load a schema by name from the default repository.

        Raises:
            SchemaNotFoundError: No definition exists for the name
            SchemaFormatError: The definition is malformed
        """
        from translit.repository import load_schema

        return load_schema(name)

    def lookup_letter(self, letter: str) -> str | None:
        """Default replacement for a single character."""
        return self.mapping.get(letter.lower())

    def lookup_prefix(self, key: str) -> str | None:
        """Replacement for a character in the context of the previous one."""
        return self.prev_mapping.get(key.replace(BOUNDARY_MARKER, "").lower())

    def lookup_postfix(self, key: str) -> str | None:
        """Replacement for a character in the context of the next one."""
        return self.next_mapping.get(key.replace(BOUNDARY_MARKER, "").lower())

    def lookup_ending(self, key: str) -> str | None:
        """Replacement for the final one or two characters of a word."""
        return self.ending_mapping.get(key.lower())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a definition record for JSON serialization."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "url": self.url,
        }
        for table_name in ("mapping", "prev_mapping", "next_mapping", "ending_mapping"):
            table = getattr(self, table_name)
            if table:
                data[table_name] = dict(table)
        if self.samples:
            data["samples"] = [list(pair) for pair in self.samples]
        return data


@dataclass(frozen=True)
class Ending:
    """A matched word-final tail: its translation and where it starts."""

    translation: str
    start: int
