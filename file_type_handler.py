import logging
import os
from datetime import datetime

import pandas as pd
from openpyxl.utils.exceptions import IllegalCharacterError

from delimiter_sniffer import read_sample_lines, sniff_delimiter
from encoding_detector import codec_for, detect_encoding
from errors import ExportError, MissingFileError, UnsupportedFileTypeError
from record_parser import parse_text
from spreadsheet_reader import read_table_set
from table_model import (
    DelimitedOrigin,
    Document,
    SpreadsheetOrigin,
    Table,
    sheet_label,
)

logger = logging.getLogger(__name__)


class FileTypeHandler:
    DEFAULT_SHEET_NAME = "Sheet1"
    TEXT_EXTENSIONS = {".csv", ".txt"}
    SPREADSHEET_EXTENSIONS = {".xls", ".xlsx", ".ods"}
    SUPPORTED_EXTENSIONS = TEXT_EXTENSIONS | SPREADSHEET_EXTENSIONS

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in self.SUPPORTED_EXTENSIONS:
            raise UnsupportedFileTypeError(f"File type '{self.ext}' is not supported.")

    @classmethod
    def is_supported(cls, path: str) -> bool:
        return os.path.splitext(path)[1].lower() in cls.SUPPORTED_EXTENSIONS

    def validate(self) -> None:
        if not os.path.isfile(self.path):
            raise MissingFileError(f"File '{self.path}' not found.")

    def load(self) -> Document:
        self.validate()
        stat = os.stat(self.path)

        if self.ext in self.SPREADSHEET_EXTENSIONS:
            tables = self._load_spreadsheet()
        else:
            tables = [self._load_text()]

        document = Document(
            path=self.path,
            tables=tables,
            file_size=stat.st_size,
            modified=datetime.fromtimestamp(stat.st_mtime),
        )
        logger.info(
            "Loaded %s: %d sheet(s), active %s",
            self.path,
            document.sheet_count,
            document.active.dimensions,
        )
        return document

    def _load_text(self) -> Table:
        with open(self.path, "rb") as fh:
            raw = fh.read()

        encoding = detect_encoding(raw)
        # undecodable bytes become U+FFFD rather than aborting the load
        text = raw.decode(codec_for(encoding), errors="replace")
        delimiter = sniff_delimiter(read_sample_lines(text))
        logger.info(
            "Detected encoding %s, delimiter %r for %s", encoding, delimiter, self.path
        )

        return Table.from_rows(
            sheet_label(0),
            parse_text(text, delimiter),
            DelimitedOrigin(encoding=encoding, delimiter=delimiter),
        )

    def _load_spreadsheet(self) -> list[Table]:
        table_set = read_table_set(self.path)
        origin = SpreadsheetOrigin(format=table_set.format)
        tables = [
            Table.from_rows(name, rows, origin) for name, rows in table_set.sheets
        ]
        if not tables:
            tables = [Table.from_rows(sheet_label(0), [], origin)]
        return tables


def export_table(table: Table, path: str, delimiter: str = ";") -> None:
    """Write ``table`` to ``path``: an .xlsx workbook, otherwise UTF-8 text."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".xlsx":
        _write_excel(table, path)
    else:
        _write_delimited(table, path, delimiter)
    logger.info("Exported %s to %s", table.dimensions, path)


def _write_delimited(table: Table, path: str, delimiter: str) -> None:
    # minimal quoting: fields holding the delimiter, quotes or line breaks
    pd.DataFrame(table.rows, dtype=object).to_csv(
        path,
        sep=delimiter,
        header=False,
        index=False,
        encoding="utf-8",
        lineterminator="\n",
    )


def _write_excel(table: Table, path: str) -> None:
    df = pd.DataFrame(table.rows, dtype=object)
    try:
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(
                writer,
                index=False,
                header=False,
                sheet_name=FileTypeHandler.DEFAULT_SHEET_NAME,
            )
    except IllegalCharacterError as exc:
        raise ExportError(
            f"Cannot write control characters to an Excel sheet: {exc}"
        ) from exc
