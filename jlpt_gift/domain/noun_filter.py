"""Noun selection for vocabulary lists."""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from .mecab import MorphemeRecord

NOUN = "名詞"
PRONOUN = "代名詞"

_KANJI_NUMERALS = "一二三四五六七八九十百千万億兆〇零"
_KANJI_NUMERAL_RE = re.compile(f"[{_KANJI_NUMERALS}]+")


def is_numeric_only(text: str | None) -> bool:
    """True when text is made only of digits or only of kanji numerals."""
    if not text:
        return False
    if text.isdecimal():
        return True
    return _KANJI_NUMERAL_RE.fullmatch(text) is not None


def is_vocabulary_noun(morpheme: MorphemeRecord | Mapping[str, Any]) -> bool:
    if _field(morpheme, "part_of_speech") != NOUN:
        return False
    if _field(morpheme, "part_of_speech_detail1") == PRONOUN:
        return False
    return not is_numeric_only(_field(morpheme, "surface"))


def select_nouns(morphemes: Iterable[Any]) -> list[Any]:
    """Keep nouns that are neither pronouns nor bare numbers."""
    return [morpheme for morpheme in morphemes if is_vocabulary_noun(morpheme)]


def _field(morpheme: MorphemeRecord | Mapping[str, Any], name: str) -> Any:
    if isinstance(morpheme, Mapping):
        return morpheme.get(name)
    return getattr(morpheme, name, None)
