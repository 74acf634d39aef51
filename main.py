import argparse
import curses
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from app_state import AppState
from config_paths import LOG_PATH, ensure_config_dirs, load_config
from errors import ExportError, InputError, SheetpeekError, SpreadsheetDecodeError
from file_info import has_wildcards, info_table_lines, resolve_files
from file_type_handler import FileTypeHandler, export_table
from orchestrator import Orchestrator

try:
    __version__ = version("sheetpeek")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

CONTROLS = """\
controls:
  Arrows, PgUp/PgDn, Home/End  navigation
  1-9                          switch Excel/ODS sheet
  f, /                         find
  F3 / Shift+F3, n / N         find next / previous
  l                            open in LibreOffice
  e                            open in Excel
  q, ESC                       quit
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetpeek",
        description=(
            "A lightweight terminal viewer for CSV and text files, Excel "
            "workbooks (.xls, .xlsx) and LibreOffice ODS spreadsheets."
        ),
        epilog=CONTROLS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="+", metavar="FILE|PATTERN")
    parser.add_argument(
        "-f", "--find", metavar="TERM", help="search for TERM right after opening"
    )
    parser.add_argument(
        "-t", "--tab", type=int, metavar="INDEX", help="open sheet INDEX (1-based)"
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="convert to UTF-8 CSV, or to XLSX when FILE ends in .xlsx",
    )
    parser.add_argument(
        "-i",
        "--info",
        action="store_true",
        help="print file metadata instead of opening the viewer "
        "(implied for wildcards or multiple files)",
    )
    parser.add_argument(
        "--debug", action="store_true", help=f"write debug logging to {LOG_PATH}"
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    return parser


def configure_logging(level_name: str, debug: bool = False):
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.WARNING)
    try:
        ensure_config_dirs()
        logging.basicConfig(
            filename=LOG_PATH,
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    except OSError:
        # curses owns the terminal, so there is nowhere else to log to
        logging.getLogger().addHandler(logging.NullHandler())


def load_document(path):
    return FileTypeHandler(path).load()


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def run_conversion(path, output, tab, config) -> int:
    try:
        document = load_document(path)
    except (SheetpeekError, OSError) as exc:
        return _error(str(exc))

    if tab is not None:
        index = tab - 1
        if document.has_sheet(index):
            document.active_index = index
        else:
            print(f"Warning: Sheet {tab} not found. Using Sheet 1.", file=sys.stderr)

    try:
        export_table(document.active, output, config["EXPORT_DELIMITER"])
    except (OSError, ExportError) as exc:
        return _error(f"Could not save file: {exc}")
    print(f"Successfully saved to '{output}'.")
    return 0


def run_info(paths) -> int:
    for line in info_table_lines(paths, load_document):
        print(line)
    return 0


def run_viewer(path, initial_search, initial_tab, config) -> int:
    try:
        document = load_document(path)
    except (InputError, OSError) as exc:
        return _error(str(exc))
    except SpreadsheetDecodeError as exc:
        # expected failure (encrypted or corrupt workbook): no traceback
        print(f"An error occurred:\n{exc}", file=sys.stderr)
        return 1

    state = AppState(document, config)

    def curses_main(stdscr):
        orchestrator = Orchestrator(stdscr, state)
        orchestrator.apply_startup(initial_tab, initial_search)
        orchestrator.run()

    try:
        curses.wrapper(curses_main)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Viewer failed on %s", path)
        raise
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    configure_logging(config["LOG_LEVEL"], debug=args.debug)

    files = resolve_files(args.paths, FileTypeHandler.is_supported)
    if not files:
        return _error("No files found.")

    if args.output:
        if len(files) != 1:
            return _error("When using '-o', exactly one input file must be specified.")
        return run_conversion(files[0], args.output, args.tab, config)

    info_mode = (
        args.info or any(has_wildcards(p) for p in args.paths) or len(files) > 1
    )
    if info_mode:
        return run_info(files)

    return run_viewer(files[0], args.find, args.tab, config)


if __name__ == "__main__":
    sys.exit(main())
