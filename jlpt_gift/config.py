"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .utils import env_flag, parse_int_env, resolve_path

DEFAULT_WORD_LIST = "jlpt_word_list.csv"


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    word_list_path: str
    level_enabled: bool = True
    output_dir: str = "outputs"
    yaml_line_width: int = -1


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    # The word list is looked up relative to the working directory, like the
    # MeCab pipelines that produce the input.
    word_list_path = os.getenv("JLPT_WORD_LIST", DEFAULT_WORD_LIST).strip() or DEFAULT_WORD_LIST
    level_enabled = env_flag("JLPT_LEVEL_ENABLED", "1")
    output_dir = resolve_path(os.getenv("OUTPUT_DIR", "outputs").strip() or "outputs", os.getcwd())
    yaml_line_width = parse_int_env("YAML_LINE_WIDTH", -1, min_value=-1, max_value=4096)
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        word_list_path=word_list_path,
        level_enabled=level_enabled,
        output_dir=output_dir,
        yaml_line_width=yaml_line_width,
    )
