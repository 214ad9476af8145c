"""Domain logic for MeCab records, JLPT levels and noun selection."""

from .levels import (
    LevelTable,
    annotate_level,
    coerce_level,
    get_default_level_table,
    reset_default_level_table,
)
from .mecab import (
    FEATURE_FIELDS,
    RECORD_FIELDS,
    SENTINEL,
    MorphemeRecord,
    from_sentinel,
    parse_mecab_line,
    to_sentinel,
)
from .noun_filter import is_numeric_only, is_vocabulary_noun, select_nouns

__all__ = [
    "FEATURE_FIELDS",
    "LevelTable",
    "MorphemeRecord",
    "RECORD_FIELDS",
    "SENTINEL",
    "annotate_level",
    "coerce_level",
    "from_sentinel",
    "get_default_level_table",
    "is_numeric_only",
    "is_vocabulary_noun",
    "parse_mecab_line",
    "reset_default_level_table",
    "select_nouns",
    "to_sentinel",
]
