import os
from datetime import datetime
from typing import Iterable, Optional

from PyQt5 import QtWidgets

# -----------------------------
# Debug helpers (enable with --debug or env BATTLESHIP_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = False
DEBUG_LOG_PATH = "battleship_abilities_debug.log"
DEBUG_ENV_VAR = "BATTLESHIP_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def configure_from(argv: Iterable[str], environ: Optional[dict] = None) -> list:
    """Enable debugging from a ``--debug`` flag or the environment.

    Returns ``argv`` with the flag removed so it can be handed on.
    """
    global DEBUG_ENABLED
    if environ is None:
        environ = os.environ
    remaining = list(argv)
    if "--debug" in remaining:
        DEBUG_ENABLED = True
        remaining = [a for a in remaining if a != "--debug"]
    if str(environ.get(DEBUG_ENV_VAR, "")).strip().lower() in _TRUTHY:
        DEBUG_ENABLED = True
    return remaining


def _debug_log_line(line: str) -> None:
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(DEBUG_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(f"[{ts}] {line}\n")
    except OSError:
        pass


def debug_event(
    parent,
    title: str,
    message: str,
    details: str = "",
    *,
    force_popup: bool = False,
    level: str = "info",
) -> None:
    """Log a debug event and optionally show a popup.

    The log file is written only while debugging is enabled. A popup is shown
    only for ``force_popup`` and only if a QApplication is running.
    """
    if DEBUG_ENABLED:
        _debug_log_line(f"{level.upper()} | {title} | {message}")
        if details:
            for ln in details.splitlines():
                _debug_log_line(f"    {ln}")

    if not force_popup:
        return
    if QtWidgets.QApplication.instance() is None:
        return

    box = QtWidgets.QMessageBox(parent)
    box.setWindowTitle(title)
    box.setText(message)
    if details:
        box.setDetailedText(details)
    if level == "error":
        box.setIcon(QtWidgets.QMessageBox.Critical)
    elif level == "warning":
        box.setIcon(QtWidgets.QMessageBox.Warning)
    else:
        box.setIcon(QtWidgets.QMessageBox.Information)
    box.exec_()
