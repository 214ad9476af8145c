"""Storage layer for word lists, morpheme documents and exports."""

from .level_repository import (
    LevelRepository,
    default_level_repository,
    reset_default_level_repository,
)
from .morpheme_documents import (
    MORPHEMES_KEY,
    dump_morpheme_document,
    load_morpheme_document,
    parse_mecab_output,
)
from .word_list_exporter import WORD_LIST_FORMATS, WordListExporter, build_word_list_rows

__all__ = [
    "LevelRepository",
    "MORPHEMES_KEY",
    "WORD_LIST_FORMATS",
    "WordListExporter",
    "build_word_list_rows",
    "default_level_repository",
    "dump_morpheme_document",
    "load_morpheme_document",
    "parse_mecab_output",
    "reset_default_level_repository",
]
