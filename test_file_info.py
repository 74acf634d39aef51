import os
from datetime import datetime

import pytest

from file_info import (
    FileInfo,
    format_bytes,
    format_info_row,
    has_wildcards,
    info_table_lines,
    resolve_files,
)
from file_type_handler import FileTypeHandler


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5 MB"),
        (3 * 1024**4, "3072 GB"),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_has_wildcards():
    assert has_wildcards("*.csv")
    assert has_wildcards("data?.xlsx")
    assert not has_wildcards("data.csv")


def test_resolve_files_filters_sorts_and_dedupes(tmp_path):
    for name in ("b.csv", "a.csv", "c.txt", "d.parquet", "e.ods"):
        (tmp_path / name).write_text("x", encoding="utf-8")

    pattern = str(tmp_path / "*")
    files = resolve_files(
        [pattern, str(tmp_path / "a.csv"), pattern], FileTypeHandler.is_supported
    )
    names = [os.path.basename(f) for f in files]
    assert names == ["a.csv", "b.csv", "c.txt", "e.ods"]


def test_literal_paths_pass_through_even_if_missing():
    assert resolve_files(["nope.csv"], FileTypeHandler.is_supported) == ["nope.csv"]


def test_format_info_row_truncates_long_names():
    info = FileInfo(
        name="a_very_long_file_name_that_keeps_going.csv",
        size=2048,
        modified=datetime(2024, 1, 2, 3, 4),
        dimensions="10x3",
        encoding="utf-8",
        delimiter=";",
    )
    row = format_info_row(info)
    assert row.startswith("a_very_long_file_name_that_...")
    assert "2.00 KB" in row
    assert "2024-01-02 03:04" in row
    assert "10x3" in row
    assert "UTF-8" in row
    assert "';'" in row


def test_info_table_reports_errors_and_continues(tmp_path):
    good = tmp_path / "good.csv"
    good.write_text("a;b\n1;2\n", encoding="utf-8")
    bad = tmp_path / "bad.md"
    bad.write_text("x", encoding="utf-8")

    def load(path):
        return FileTypeHandler(path).load()

    lines = info_table_lines(
        [str(bad), str(good), str(tmp_path / "gone.csv")], load
    )
    assert lines[0].startswith("Filename")
    assert set(lines[1]) == {"-"}
    assert lines[2].startswith("Error reading bad.md:")
    assert lines[3].startswith("good.csv")
    assert "2x2" in lines[3]
    assert len(lines) == 4
