"""MeCab output line parsing into morpheme records.

MeCab (IPADIC layout) prints one token per line::

    走っ\t動詞,自立,*,*,五段・ラ行,連用タ接続,走る,ハシッ,ハシッ

The surface form comes before the first tab, the comma separated feature
list after it. ``*`` marks "not applicable" in the detail and inflection
columns and is exposed as ``None`` on the record.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from .levels import LevelTable

SENTINEL = "*"

FEATURE_FIELDS = (
    "part_of_speech",
    "part_of_speech_detail1",
    "part_of_speech_detail2",
    "part_of_speech_detail3",
    "inflection_type",
    "inflection_form",
    "base_form",
    "reading",
    "pronunciation",
)
RECORD_FIELDS = ("surface",) + FEATURE_FIELDS
LEVEL_FIELD = "level"

# Feature positions 1-5 use the sentinel; the others are copied verbatim.
_SENTINEL_FIELDS = frozenset(FEATURE_FIELDS[1:6])


@dataclass
class MorphemeRecord:
    surface: str | None = None
    part_of_speech: str | None = None
    part_of_speech_detail1: str | None = None
    part_of_speech_detail2: str | None = None
    part_of_speech_detail3: str | None = None
    inflection_type: str | None = None
    inflection_form: str | None = None
    base_form: str | None = None
    reading: str | None = None
    pronunciation: str | None = None
    level: int | str | None = None

    def parse(
        self,
        line: str | None,
        *,
        level_table: LevelTable | None = None,
        annotate: bool = True,
    ) -> None:
        """Populate the record from one MeCab output line.

        Empty lines and lines without a tab are ignored and leave the record
        untouched. Missing trailing features stay ``None``. When ``annotate``
        is set the JLPT level is looked up in ``level_table``, or in the
        process-wide default table when none is given.
        """
        if line is None or not line.strip():
            return
        surface, tab, feature_text = line.partition("\t")
        if not tab:
            return

        self.surface = surface
        features = feature_text.split(",") if feature_text else []
        for name, value in zip(FEATURE_FIELDS, features):
            if name in _SENTINEL_FIELDS:
                value = from_sentinel(value)
            setattr(self, name, value)

        if annotate:
            from .levels import annotate_level, get_default_level_table

            if level_table is None:
                level_table = get_default_level_table()
            annotate_level(self, level_table)

    def to_line(self) -> str:
        values = []
        for name in FEATURE_FIELDS:
            value = getattr(self, name)
            if name in _SENTINEL_FIELDS:
                values.append(to_sentinel(value))
            else:
                values.append(value or "")
        return f"{self.surface or ''}\t{','.join(values)}"

    def __str__(self) -> str:
        return self.to_line()

    def to_dict(self, *, include_level: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {name: getattr(self, name) for name in RECORD_FIELDS}
        if include_level:
            payload[LEVEL_FIELD] = self.level
        return payload

    def to_yaml(self, *, include_level: bool = True, width: int = -1) -> str:
        return yaml.safe_dump(
            self.to_dict(include_level=include_level),
            allow_unicode=True,
            sort_keys=False,
            width=yaml_width(width),
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MorphemeRecord":
        """Rebuild a record from a mapping produced by ``to_dict``.

        Unknown keys are ignored and non-string values are stringified, except
        ``level`` which keeps its integer form.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Morpheme entry must be a mapping, got {type(payload).__name__}.")
        record = cls()
        for name in RECORD_FIELDS:
            value = payload.get(name)
            setattr(record, name, None if value is None else str(value))
        level = payload.get(LEVEL_FIELD)
        record.level = level if level is None or isinstance(level, int) else str(level)
        return record

    def is_empty(self) -> bool:
        return all(getattr(self, item.name) is None for item in fields(self))


def parse_mecab_line(
    line: str | None,
    *,
    level_table: LevelTable | None = None,
    annotate: bool = True,
) -> MorphemeRecord | None:
    """Return a populated record, or ``None`` when the line is rejected."""
    record = MorphemeRecord()
    record.parse(line, level_table=level_table, annotate=annotate)
    if record.surface is None:
        return None
    return record


def from_sentinel(value: str | None) -> str | None:
    return None if value == SENTINEL else value


def to_sentinel(value: str | None) -> str:
    return SENTINEL if value is None else value


def yaml_width(width: int) -> float | int:
    # PyYAML treats any negative width as its default of 80 columns.
    return float("inf") if width < 0 else width
