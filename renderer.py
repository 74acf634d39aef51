import os
from typing import List, NamedTuple

from delimiter_sniffer import display_delimiter
from encoding_detector import display_name
from file_info import format_bytes, format_timestamp
from layout_engine import visible_columns
from status_bar import render_footer

STYLE_INFO = "info"
STYLE_HEADER = "header"
STYLE_DATA = "data"
STYLE_HIGHLIGHT = "highlight"
STYLE_BLANK = "blank"
STYLE_FOOTER = "footer"

ELLIPSIS = "..."
SEPARATOR = "|"

# info bar, pinned header row, footer
CHROME_LINES = 3


class RenderLine(NamedTuple):
    text: str
    style: str


def viewport_height(height: int) -> int:
    return max(1, height - CHROME_LINES)


def fit_cell(text: str, width: int) -> str:
    if len(text) > width:
        text = text[: max(0, width - len(ELLIPSIS))] + ELLIPSIS
    return text.ljust(width)


def row_text(row, cols, widths, width: int) -> str:
    parts = []
    for c in cols:
        cell = row[c] if c < len(row) else ""
        parts.append(fit_cell(cell, widths[c]))
        parts.append(SEPARATOR)
    line = "".join(parts)
    return line[:width].ljust(width)


def info_text(document) -> str:
    table = document.active
    parts = [
        f"FILE: {os.path.basename(document.path)}",
        f"SIZE: {format_bytes(document.file_size)}",
        f"DATE: {format_timestamp(document.modified)}",
        f"DIM: {table.dimensions}",
        f"ENC: {display_name(table.source_encoding)}",
        f"SEP: {display_delimiter(table.source_delimiter)}",
    ]
    if document.is_workbook():
        parts.append(
            f"SHEET: {document.active_index + 1}/{document.sheet_count} {table.name}"
        )
    return " " + " | ".join(parts)


def render(document, widths, state, height: int, width: int) -> List[RenderLine]:
    """Describe every screen line, top to bottom, for a ``height`` x ``width``
    terminal. Nothing here touches the terminal itself.
    """
    if height <= 0 or width <= 0:
        return []

    table = document.active
    lines: List[RenderLine] = [
        RenderLine(info_text(document)[:width].ljust(width), STYLE_INFO)
    ]
    blank = " " * width

    body_rows = max(0, height - 2)
    if body_rows > 0:
        if table.row_count == 0 or not widths:
            lines.extend(RenderLine(blank, STYLE_BLANK) for _ in range(body_rows))
        else:
            cols = visible_columns(widths, state.scroll_col, width)
            lines.append(
                RenderLine(row_text(table.rows[0], cols, widths, width), STYLE_HEADER)
            )
            for slot in range(body_rows - 1):
                r = state.scroll_row + 1 + slot
                if r >= table.row_count:
                    lines.append(RenderLine(blank, STYLE_BLANK))
                    continue
                style = STYLE_HIGHLIGHT if r == state.highlight_row else STYLE_DATA
                lines.append(RenderLine(row_text(table.rows[r], cols, widths, width), style))

    if height >= 2:
        footer = render_footer(state.status_message, document.sheet_count, width)
        lines.append(RenderLine(footer, STYLE_FOOTER))
    return lines[:height]
