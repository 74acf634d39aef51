from datetime import datetime

import renderer
from layout_engine import compute_column_widths
from table_model import DelimitedOrigin, Document, SpreadsheetOrigin, Table
from viewport import ViewState


def _document(rows, origin=None, name="Sheet 1"):
    origin = origin or DelimitedOrigin("utf-8", ";")
    table = Table.from_rows(name, rows, origin)
    return Document(
        path="/data/people.csv",
        tables=[table],
        file_size=1536,
        modified=datetime(2024, 3, 1, 9, 30),
    )


def test_fit_cell_truncates_with_ellipsis_and_pads():
    assert renderer.fit_cell("abc", 5) == "abc  "
    assert renderer.fit_cell("abcdefgh", 5) == "ab..."
    assert renderer.fit_cell("abcde", 5) == "abcde"


def test_layout_of_lines():
    rows = [["name", "city"], ["Ann", "Oslo"], ["Bob", "Rome"]]
    doc = _document(rows)
    widths = compute_column_widths(doc.active)
    lines = renderer.render(doc, widths, ViewState(highlight_row=2), 8, 40)

    assert len(lines) == 8
    assert [l.style for l in lines] == [
        renderer.STYLE_INFO,
        renderer.STYLE_HEADER,
        renderer.STYLE_DATA,
        renderer.STYLE_HIGHLIGHT,
        renderer.STYLE_BLANK,
        renderer.STYLE_BLANK,
        renderer.STYLE_BLANK,
        renderer.STYLE_FOOTER,
    ]
    assert lines[1].text.startswith("name |city |")
    assert lines[2].text.startswith("Ann  |Oslo |")
    assert all(len(l.text) == 40 for l in lines[:-1])


def test_footer_never_fills_last_cell():
    doc = _document([["a"], ["b"]])
    lines = renderer.render(doc, [5], ViewState(status_message="x" * 200), 5, 30)
    assert len(lines[-1].text) == 29
    assert lines[-1].text.startswith(" xxx")


def test_scroll_offsets_rows_and_columns():
    rows = [["h1", "h2", "h3"]] + [[f"r{i}", f"b{i}", f"c{i}"] for i in range(1, 20)]
    doc = _document(rows)
    widths = compute_column_widths(doc.active)
    lines = renderer.render(doc, widths, ViewState(scroll_row=5, scroll_col=1), 6, 80)
    assert lines[1].text.startswith("h2   |h3   |")
    assert lines[2].text.startswith("b6   |c6   |")


def test_info_bar_describes_file():
    doc = _document([["a"]])
    text = renderer.info_text(doc)
    assert "FILE: people.csv" in text
    assert "SIZE: 1.5 KB" in text
    assert "DATE: 2024-03-01 09:30" in text
    assert "DIM: 1x1" in text
    assert "ENC: UTF-8" in text
    assert "SEP: ';'" in text


def test_info_bar_for_workbook():
    doc = _document([["a"]], origin=SpreadsheetOrigin("xlsx"), name="Budget")
    text = renderer.info_text(doc)
    assert "ENC: N/A" in text
    assert "SEP: N/A" in text
    assert "SHEET: 1/1 Budget" in text


def test_empty_table_renders_blank_body():
    doc = _document([])
    lines = renderer.render(doc, [], ViewState(), 5, 20)
    assert [l.style for l in lines[1:-1]] == [renderer.STYLE_BLANK] * 3


def test_viewport_height():
    assert renderer.viewport_height(24) == 21
    assert renderer.viewport_height(2) == 1
