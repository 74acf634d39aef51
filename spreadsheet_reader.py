import importlib
import logging
import os

import pandas as pd

from errors import EncryptedWorkbookError, SpreadsheetDecodeError
from table_model import TableSet, sheet_label

logger = logging.getLogger(__name__)

ENGINES = {
    ".xls": ("xlrd", "xlrd"),
    ".xlsx": ("openpyxl", "openpyxl"),
    ".ods": ("odf", "odfpy"),
}

# encrypted OOXML workbooks are wrapped in an OLE2 compound file
OLE_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

ENCRYPTED_MESSAGE = "File is encrypted (password protected). Opening not supported."


def _ensure_engine(module_name: str, dist_name: str):
    try:
        importlib.import_module(module_name)
    except ImportError as exc:
        raise SpreadsheetDecodeError(
            f"This file type requires {dist_name}. Install via: pip install {dist_name}"
        ) from exc


def _looks_encrypted(path: str, ext: str) -> bool:
    if ext != ".xlsx":
        return False
    with open(path, "rb") as fh:
        return fh.read(len(OLE_SIGNATURE)) == OLE_SIGNATURE


def frame_to_rows(df: pd.DataFrame) -> list[list[str]]:
    if df is None or df.empty:
        return []
    cleaned = df.astype(object).where(df.notna(), "")
    return [["" if v is None else str(v) for v in row] for row in cleaned.values.tolist()]


def read_table_set(path: str) -> TableSet:
    """Decode every sheet of a workbook into rows of strings.

    Raises SpreadsheetDecodeError (EncryptedWorkbookError for password
    protected files) instead of the engine's own exception types.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext not in ENGINES:
        raise SpreadsheetDecodeError(f"Not a spreadsheet file: {path}")
    module_name, dist_name = ENGINES[ext]

    if _looks_encrypted(path, ext):
        raise EncryptedWorkbookError(ENCRYPTED_MESSAGE)

    _ensure_engine(module_name, dist_name)

    try:
        sheets = pd.read_excel(
            path, sheet_name=None, header=None, dtype=str, engine=module_name
        )
    except Exception as exc:
        message = str(exc).lower()
        if "password" in message or "encrypt" in message:
            raise EncryptedWorkbookError(ENCRYPTED_MESSAGE) from exc
        logger.info("Workbook decode failed for %s", path, exc_info=True)
        raise SpreadsheetDecodeError(f"Could not read workbook: {exc}") from exc

    table_set = TableSet(format=ext.lstrip("."))
    for idx, (name, df) in enumerate((sheets or {}).items()):
        label = str(name) if name is not None and str(name) else sheet_label(idx)
        table_set.sheets.append((label, frame_to_rows(df)))
    return table_set
