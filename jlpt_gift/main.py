"""Command line entrypoint for the MeCab -> JLPT word list pipeline.

    mecab < text.txt | python -m jlpt_gift.main parse > morphemes.yaml
    python -m jlpt_gift.main nouns --input morphemes.yaml > nouns.yaml
    python -m jlpt_gift.main export --input nouns.yaml --format xlsx
"""
from __future__ import annotations

import argparse
import sys

import yaml

from .config import AppConfig, load_config
from .domain.noun_filter import select_nouns
from .logging_config import setup_logging
from .storage.level_repository import LevelRepository
from .storage.morpheme_documents import (
    dump_morpheme_document,
    load_morpheme_document,
    parse_mecab_output,
)
from .storage.word_list_exporter import WORD_LIST_FORMATS, WordListExporter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jlpt-gift",
        description="Turn MeCab output into JLPT-tagged vocabulary lists.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser(
        "parse",
        help="Parse MeCab output into a YAML morpheme document.",
    )
    parse_cmd.add_argument("--input", help="MeCab output file (default: stdin).")
    parse_cmd.add_argument(
        "--no-level",
        action="store_true",
        help="Skip the JLPT level lookup.",
    )
    parse_cmd.add_argument(
        "--level-table",
        help="JLPT word list CSV (default: JLPT_WORD_LIST or jlpt_word_list.csv).",
    )

    nouns_cmd = subparsers.add_parser(
        "nouns",
        help="Keep nouns, dropping pronouns and bare numbers.",
    )
    nouns_cmd.add_argument("--input", help="YAML morpheme document (default: stdin).")

    export_cmd = subparsers.add_parser(
        "export",
        help="Write a word list file from a YAML morpheme document.",
    )
    export_cmd.add_argument("--input", help="YAML morpheme document (default: stdin).")
    export_cmd.add_argument(
        "--format",
        default="csv",
        choices=WORD_LIST_FORMATS,
        help="Output file format.",
    )
    export_cmd.add_argument("--output-dir", help="Directory for the exported file.")
    export_cmd.add_argument("--name", default="word_list", help="File name prefix.")
    return parser


def _read_input(path: str | None) -> str:
    if not path:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _run_parse(args: argparse.Namespace, config: AppConfig, logger) -> int:
    text = _read_input(args.input)
    annotate = config.level_enabled and not args.no_level
    level_table = None
    if annotate:
        level_table = LevelRepository(args.level_table or config.word_list_path, logger).load()
    records = parse_mecab_output(
        text.splitlines(),
        level_table=level_table,
        annotate=annotate,
    )
    logger.debug("Parsed %s morphemes", len(records))
    dump_morpheme_document(records, sys.stdout, width=config.yaml_line_width)
    return 0


def _run_nouns(args: argparse.Namespace, config: AppConfig, logger) -> int:
    records = load_morpheme_document(_read_input(args.input))
    nouns = select_nouns(records)
    logger.debug("Selected %s of %s morphemes", len(nouns), len(records))
    dump_morpheme_document(nouns, sys.stdout, width=config.yaml_line_width)
    return 0


def _run_export(args: argparse.Namespace, config: AppConfig, logger) -> int:
    records = load_morpheme_document(_read_input(args.input))
    exporter = WordListExporter(args.output_dir or config.output_dir, logger)
    output_path = exporter.export(records, file_format=args.format, name=args.name)
    if output_path is None:
        print("No words to export.", file=sys.stderr)
        return 0
    print(output_path)
    return 0


_COMMANDS = {
    "parse": _run_parse,
    "nouns": _run_nouns,
    "export": _run_export,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = load_config()
    logger = setup_logging(config)

    try:
        return _COMMANDS[args.command](args, config, logger)
    except (ValueError, RuntimeError, OSError, yaml.YAMLError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"jlpt-gift {args.command} failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
