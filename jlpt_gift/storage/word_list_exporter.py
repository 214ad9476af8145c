"""Word list export to csv/txt/xlsx/ods files."""

from __future__ import annotations

import csv
from datetime import datetime
import logging
import os
from typing import Iterable

from ..domain.mecab import MorphemeRecord

logger = logging.getLogger(__name__)

WORD_LIST_HEADERS = ["word", "reading", "level", "part_of_speech"]
WORD_LIST_FORMATS = ("csv", "txt", "xlsx", "ods")


def build_word_list_rows(records: Iterable[MorphemeRecord]) -> list[list[str]]:
    """One row per distinct word; the base form wins over the surface."""
    rows: list[list[str]] = []
    seen: set[str] = set()
    for record in records:
        word = (record.base_form or record.surface or "").strip()
        if not word or word in seen:
            continue
        seen.add(word)
        rows.append(
            [
                word,
                record.reading or "",
                "" if record.level is None else str(record.level),
                record.part_of_speech or "",
            ]
        )
    return rows


class WordListExporter:
    def __init__(self, output_dir: str, logger_instance=None) -> None:
        self.output_dir = str(output_dir or "").strip() or "outputs"
        self.logger = logger_instance or logger

    def export(
        self,
        records: Iterable[MorphemeRecord],
        *,
        file_format: str = "csv",
        name: str = "word_list",
    ) -> str | None:
        normalized_format = str(file_format or "csv").strip().lower().lstrip(".")
        if normalized_format not in WORD_LIST_FORMATS:
            raise ValueError(f"Unsupported word list export format: {file_format}")

        rows = build_word_list_rows(records)
        if not rows:
            self.logger.info("Word list is empty; nothing to export")
            return None

        os.makedirs(self.output_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_name = str(name or "").strip() or "word_list"
        output_path = os.path.join(
            self.output_dir,
            f"{base_name}_{timestamp}.{normalized_format}",
        )
        headers = list(WORD_LIST_HEADERS)

        if normalized_format == "csv":
            self._write_csv(headers, rows, output_path)
        elif normalized_format == "txt":
            self._write_txt(headers, rows, output_path)
        elif normalized_format == "xlsx":
            self._write_xlsx(headers, rows, output_path, sheet_name=base_name)
        else:
            self._write_ods(headers, rows, output_path, sheet_name=base_name)
        self.logger.info("Exported %s words to %s", len(rows), output_path)
        return output_path

    def _write_csv(
        self,
        headers: list[str],
        rows: list[list[str]],
        output_path: str,
    ) -> None:
        with open(output_path, "w", newline="", encoding="utf-8-sig") as handle:
            writer = csv.writer(handle)
            writer.writerow(headers)
            writer.writerows(rows)

    def _write_txt(
        self,
        headers: list[str],
        rows: list[list[str]],
        output_path: str,
    ) -> None:
        with open(output_path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, delimiter="\t")
            writer.writerow(headers)
            writer.writerows(rows)

    def _write_xlsx(
        self,
        headers: list[str],
        rows: list[list[str]],
        output_path: str,
        *,
        sheet_name: str,
    ) -> None:
        try:
            from openpyxl import Workbook
        except Exception as exc:
            raise RuntimeError(
                "Excel export requires openpyxl. Install dependency and retry."
            ) from exc

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = (sheet_name[:31] or "Sheet1")
        worksheet.append([str(header) for header in headers])
        for row_values in rows:
            worksheet.append([str(value) for value in row_values[: len(headers)]])
        workbook.save(output_path)

    def _write_ods(
        self,
        headers: list[str],
        rows: list[list[str]],
        output_path: str,
        *,
        sheet_name: str,
    ) -> None:
        try:
            from odf.opendocument import OpenDocumentSpreadsheet
            from odf.table import Table, TableCell, TableColumn, TableRow
            from odf.text import P
        except Exception as exc:
            raise RuntimeError(
                "ODF export requires odfpy. Install dependency and retry."
            ) from exc

        document = OpenDocumentSpreadsheet()
        table = Table(name=sheet_name[:31] or "Sheet1")
        for _ in headers:
            table.addElement(TableColumn())

        def add_row(values: list[str]) -> None:
            row = TableRow()
            for value in values:
                cell = TableCell(valuetype="string")
                cell.addElement(P(text=str(value)))
                row.addElement(cell)
            table.addElement(row)

        add_row(headers)
        for data_row in rows:
            add_row(data_row)

        document.spreadsheet.addElement(table)
        document.save(output_path, addsuffix=False)
