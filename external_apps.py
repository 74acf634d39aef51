import logging
import os
import subprocess

logger = logging.getLogger(__name__)

APP_LABELS = {
    "libreoffice": "LibreOffice",
    "excel": "Excel",
}


def start_detached(argv, popen=subprocess.Popen) -> bool:
    exe = argv[0]
    if os.path.isabs(exe) and not os.path.exists(exe):
        return False
    try:
        popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", exe, exc)
        return False
    logger.info("Started %s", " ".join(argv))
    return True


def open_in_app(app: str, path: str, config, popen=subprocess.Popen) -> str:
    """Try each configured command for ``app`` and report the outcome as a
    status message. The started process is not waited on.
    """
    label = APP_LABELS.get(app, app)
    candidates = (config or {}).get("APPS", {}).get(app, [])
    full_path = os.path.abspath(path)
    for argv in candidates:
        if start_detached([*argv, full_path], popen=popen):
            return f"Opened in {label}."
    logger.warning("No working %s command among %d candidate(s)", label, len(candidates))
    return f"{label} not found."
