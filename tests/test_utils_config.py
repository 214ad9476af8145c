import os

from jlpt_gift.config import DEFAULT_WORD_LIST, load_config
from jlpt_gift.utils import env_flag, parse_int_env, resolve_path


def test_resolve_path_handles_relative_and_absolute(tmp_path):
    base_dir = str(tmp_path)
    relative = "nested/file.txt"
    absolute = str(tmp_path / "absolute.txt")

    assert resolve_path(relative, base_dir) == os.path.join(base_dir, relative)
    assert resolve_path(absolute, base_dir) == absolute


def test_parse_int_env_applies_default_and_bounds(monkeypatch):
    monkeypatch.setenv("INT_ENV_TEST", "not-a-number")
    assert parse_int_env("INT_ENV_TEST", 7, min_value=1, max_value=10) == 7

    monkeypatch.setenv("INT_ENV_TEST", "100")
    assert parse_int_env("INT_ENV_TEST", 7, min_value=1, max_value=10) == 10

    monkeypatch.setenv("INT_ENV_TEST", "-5")
    assert parse_int_env("INT_ENV_TEST", 7, min_value=1, max_value=10) == 1


def test_env_flag_accepts_common_truthy_values(monkeypatch):
    for value in ("1", "true", "YES", " on "):
        monkeypatch.setenv("FLAG_ENV_TEST", value)
        assert env_flag("FLAG_ENV_TEST") is True
    monkeypatch.setenv("FLAG_ENV_TEST", "off")
    assert env_flag("FLAG_ENV_TEST", "1") is False
    monkeypatch.delenv("FLAG_ENV_TEST")
    assert env_flag("FLAG_ENV_TEST", "1") is True


def test_load_config_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("FILE_LOG_LEVEL", "error")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("JLPT_WORD_LIST", "lists/n5.csv")
    monkeypatch.setenv("JLPT_LEVEL_ENABLED", "no")
    monkeypatch.setenv("OUTPUT_DIR", "exports")
    monkeypatch.setenv("YAML_LINE_WIDTH", "-20")  # below min -> clamped

    config = load_config()

    assert config.log_level == "WARNING"
    assert config.file_log_level == "ERROR"
    assert os.path.isdir(config.log_dir)
    assert config.log_file.startswith(os.path.join(str(tmp_path / "logs"), "app_"))
    assert config.word_list_path == "lists/n5.csv"
    assert config.level_enabled is False
    assert config.output_dir == os.path.join(str(tmp_path), "exports")
    assert config.yaml_line_width == -1


def test_load_config_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    for name in ("LOG_LEVEL", "JLPT_LEVEL_ENABLED", "OUTPUT_DIR", "YAML_LINE_WIDTH"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.log_level == "INFO"
    assert config.word_list_path == DEFAULT_WORD_LIST
    assert config.level_enabled is True
    assert config.output_dir == os.path.join(str(tmp_path), "outputs")
    assert config.yaml_line_width == -1
