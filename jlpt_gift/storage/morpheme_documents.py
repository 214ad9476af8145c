"""YAML documents holding lists of parsed morphemes."""

from __future__ import annotations

from typing import IO, Any, Iterable

import yaml

from ..domain.levels import LevelTable
from ..domain.mecab import MorphemeRecord, parse_mecab_line, yaml_width

MORPHEMES_KEY = "形態素"


def parse_mecab_output(
    lines: Iterable[str],
    *,
    level_table: LevelTable | None = None,
    annotate: bool = True,
) -> list[MorphemeRecord]:
    """Parse MeCab output, skipping ``EOS`` markers and blank lines."""
    records: list[MorphemeRecord] = []
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        record = parse_mecab_line(line, level_table=level_table, annotate=annotate)
        if record is not None:
            records.append(record)
    return records


def dump_morpheme_document(
    records: Iterable[MorphemeRecord | dict[str, Any]],
    stream: IO[str] | None = None,
    *,
    width: int = -1,
) -> str | None:
    entries = [
        record.to_dict() if isinstance(record, MorphemeRecord) else dict(record)
        for record in records
    ]
    return yaml.safe_dump(
        {MORPHEMES_KEY: entries},
        stream,
        allow_unicode=True,
        sort_keys=False,
        width=yaml_width(width),
    )


def load_morpheme_document(source: str | IO[str]) -> list[MorphemeRecord]:
    payload = yaml.safe_load(source)
    if payload is None:
        return []
    if not isinstance(payload, dict):
        raise ValueError("Morpheme document must be a mapping with a '形態素' list.")
    entries = payload.get(MORPHEMES_KEY)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValueError(f"'{MORPHEMES_KEY}' must be a list of morpheme mappings.")
    return [MorphemeRecord.from_dict(entry) for entry in entries]
