import glob
import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from delimiter_sniffer import display_delimiter
from encoding_detector import display_name
from errors import SheetpeekError

logger = logging.getLogger(__name__)

WILDCARDS = ("*", "?")
NAME_WIDTH = 30
ROW_FORMAT = "{0:<30} | {1:>10} | {2:<19} | {3:<12} | {4:<15} | {5:<9}"
HEADER = ("Filename", "Size (KB)", "Date", "Dimension", "Encoding", "Separator")
RULE_WIDTH = 110


@dataclass
class FileInfo:
    name: str
    size: int
    modified: object
    dimensions: str
    encoding: Optional[str]
    delimiter: Optional[str]


def has_wildcards(pattern: str) -> bool:
    return any(w in pattern for w in WILDCARDS)


def resolve_files(patterns, is_supported) -> List[str]:
    """Expand wildcard patterns to supported files; literal paths pass through.

    The result is de-duplicated and sorted.
    """
    results = set()
    for pattern in patterns:
        if has_wildcards(pattern):
            for match in glob.glob(pattern):
                if os.path.isfile(match) and is_supported(match):
                    results.add(match)
        else:
            results.add(pattern)
    return sorted(results)


def format_bytes(size: int) -> str:
    suffixes = ["B", "KB", "MB", "GB"]
    value = float(size)
    i = 0
    while i < len(suffixes) - 1 and size >= 1024:
        value = size / 1024.0
        size //= 1024
        i += 1
    return f"{value:.2f}".rstrip("0").rstrip(".") + f" {suffixes[i]}"


def format_timestamp(moment) -> str:
    if moment is None:
        return "N/A"
    return moment.strftime("%Y-%m-%d %H:%M")


def collect_info(document) -> FileInfo:
    table = document.active
    return FileInfo(
        name=os.path.basename(document.path),
        size=document.file_size,
        modified=document.modified,
        dimensions=table.dimensions,
        encoding=table.source_encoding,
        delimiter=table.source_delimiter,
    )


def _short_name(name: str) -> str:
    if len(name) > NAME_WIDTH:
        return name[: NAME_WIDTH - 3] + "..."
    return name


def format_info_row(info: FileInfo) -> str:
    return ROW_FORMAT.format(
        _short_name(info.name),
        f"{info.size / 1024.0:,.2f} KB",
        format_timestamp(info.modified),
        info.dimensions,
        display_name(info.encoding),
        display_delimiter(info.delimiter),
    )


def info_table_lines(paths, load_document) -> List[str]:
    """One summary line per file. A file that fails to load gets an error
    line and the rest are still listed; missing paths are skipped.
    """
    lines = [ROW_FORMAT.format(*HEADER), "-" * RULE_WIDTH]
    for path in paths:
        if not os.path.isfile(path):
            continue
        try:
            document = load_document(path)
        except (SheetpeekError, OSError) as exc:
            logger.info("Info load failed for %s", path, exc_info=True)
            lines.append(f"Error reading {os.path.basename(path)}: {exc}")
            continue
        lines.append(format_info_row(collect_info(document)))
    return lines
