"""JLPT word list loading."""

from __future__ import annotations

import csv
import logging
import os
import threading
from typing import Iterable

from ..config import DEFAULT_WORD_LIST
from ..domain.levels import LevelTable

logger = logging.getLogger(__name__)


class LevelRepository:
    """Loads the ``word,level`` CSV once and serves the cached table.

    The file is read on the first ``load`` call only; later edits to the file
    are not picked up. A missing file gives an empty table, and any read
    failure is logged and also degrades to an empty table.
    """

    def __init__(self, path: str, logger_instance=None) -> None:
        self.path = str(path or "").strip()
        self.logger = logger_instance or logger
        self._lock = threading.Lock()
        self._table: LevelTable | None = None

    @property
    def loaded(self) -> bool:
        return self._table is not None

    def load(self) -> LevelTable:
        table = self._table
        if table is not None:
            return table
        with self._lock:
            if self._table is None:
                self._table = self._read_table()
            return self._table

    def parse_rows(self, rows: Iterable[list[str]]) -> LevelTable:
        entries: dict[str, str] = {}
        for row in rows:
            if not row or len(row) < 2:
                continue
            word = str(row[0] or "").strip()
            if not word:
                continue
            entries[word] = str(row[1] or "").strip()
        return LevelTable(entries)

    def _read_table(self) -> LevelTable:
        if not self.path or not os.path.isfile(self.path):
            self.logger.debug("JLPT word list not found: %s", self.path)
            return LevelTable()
        try:
            with open(self.path, "r", newline="", encoding="utf-8-sig") as handle:
                table = self.parse_rows(csv.reader(handle))
        except Exception as exc:
            self.logger.warning("Failed to load JLPT word list %s: %s", self.path, exc)
            return LevelTable()
        self.logger.debug("Loaded %s JLPT words from %s", len(table), self.path)
        return table


_default_lock = threading.Lock()
_default_repository: LevelRepository | None = None


def default_level_repository() -> LevelRepository:
    global _default_repository
    with _default_lock:
        if _default_repository is None:
            path = os.getenv("JLPT_WORD_LIST", DEFAULT_WORD_LIST).strip() or DEFAULT_WORD_LIST
            _default_repository = LevelRepository(path)
        return _default_repository


def reset_default_level_repository() -> None:
    global _default_repository
    with _default_lock:
        _default_repository = None
