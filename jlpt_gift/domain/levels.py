"""JLPT level lookup for parsed morphemes."""
from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Iterator, Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from .mecab import MorphemeRecord

_INTEGER_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class LevelTable:
    """Read-only word -> level mapping loaded from the JLPT word list."""

    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: object) -> bool:
        return word in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get(self, word: str | None) -> str | None:
        if word is None:
            return None
        return self.entries.get(word)

    def lookup_level(self, record: MorphemeRecord) -> int | str | None:
        if not self.entries:
            return None
        for key in (record.base_form, record.reading):
            if key is not None and key in self.entries:
                return coerce_level(self.entries[key])
        return None


def annotate_level(record: MorphemeRecord, table: LevelTable) -> None:
    """Set ``record.level`` from the base form, falling back to the reading."""
    level = table.lookup_level(record)
    if level is not None:
        record.level = level


def coerce_level(value: str) -> int | str:
    """Return numeric levels as ``int`` and anything else as a stripped string."""
    text = str(value).strip()
    match = _INTEGER_PREFIX_RE.match(text)
    if match is None:
        return text
    return int(match.group(1))


def get_default_level_table() -> LevelTable:
    from ..storage.level_repository import default_level_repository

    return default_level_repository().load()


def reset_default_level_table() -> None:
    from ..storage.level_repository import reset_default_level_repository

    reset_default_level_repository()
