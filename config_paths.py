import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "sheetpeek")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "sheetpeek.log")

# default settings
EXPORT_DELIMITER_DEFAULT = ";"
SEARCH_CONTEXT_ROWS_DEFAULT = 5
LOG_LEVEL_DEFAULT = "WARNING"
APPS_DEFAULT = {
    "libreoffice": [
        ["scalc"],
        ["soffice", "--calc"],
        ["libreoffice", "--calc"],
        [r"C:\Program Files\LibreOffice\program\scalc.exe"],
        [r"C:\Program Files (x86)\LibreOffice\program\scalc.exe"],
    ],
    "excel": [
        ["excel"],
        [r"C:\Program Files\Microsoft Office\root\Office16\EXCEL.EXE"],
        [r"C:\Program Files (x86)\Microsoft Office\root\Office16\EXCEL.EXE"],
    ],
}

logger = logging.getLogger(__name__)


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _is_argv(value) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and all(isinstance(item, str) and item for item in value)
    )


def load_config():
    cfg = {
        "EXPORT_DELIMITER": EXPORT_DELIMITER_DEFAULT,
        "SEARCH_CONTEXT_ROWS": SEARCH_CONTEXT_ROWS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "APPS": {name: [list(argv) for argv in cands] for name, cands in APPS_DEFAULT.items()},
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    delim = data.get("export_delimiter")
    if isinstance(delim, str) and len(delim) == 1 and delim not in ('"', "\n", "\r"):
        cfg["EXPORT_DELIMITER"] = delim

    context = data.get("search_context_rows")
    if isinstance(context, int) and not isinstance(context, bool) and context >= 0:
        cfg["SEARCH_CONTEXT_ROWS"] = context

    level = data.get("log_level")
    if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
        cfg["LOG_LEVEL"] = level.upper()

    apps = data.get("apps")
    if isinstance(apps, dict):
        for name, cands in apps.items():
            if not isinstance(name, str) or not isinstance(cands, list):
                continue
            # a single argv list is accepted as shorthand for one candidate
            if _is_argv(cands):
                cands = [cands]
            valid = [list(argv) for argv in cands if _is_argv(argv)]
            if valid:
                cfg["APPS"][name] = valid

    return cfg
