"""Shared fixtures for the MeCab/JLPT test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from jlpt_gift.storage.level_repository import reset_default_level_repository


class _Logger:
    def __init__(self):
        self.debugs = []
        self.infos = []
        self.warnings = []

    def debug(self, message, *args):
        self.debugs.append(message % args if args else message)

    def info(self, message, *args):
        self.infos.append(message % args if args else message)

    def warning(self, message, *args):
        self.warnings.append(message % args if args else message)


@pytest.fixture(autouse=True)
def _isolated_default_level_table(monkeypatch, tmp_path):
    # The default word list is read from the working directory.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JLPT_WORD_LIST", raising=False)
    reset_default_level_repository()
    yield
    reset_default_level_repository()


@pytest.fixture
def recording_logger() -> _Logger:
    return _Logger()


@pytest.fixture
def word_list_path(tmp_path: Path) -> Path:
    path = tmp_path / "words.csv"
    path.write_text("合図,2\n走る,4\nハシル,4\n食べる,5\n", encoding="utf-8")
    return path
