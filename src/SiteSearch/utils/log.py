"""The ``SiteSearch`` logger.

Library modules import ``log`` and never add handlers themselves; the CLI
runner calls `configure_logging` once per command. Lines look like::

    10-18 14:02:11 [DEBG] Strict query empty, retrying: query='+setup +guid' ...
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_LINE_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    """Formatter exposing a four-letter ``levelabbr`` record field."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib method name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("SiteSearch")


def _action_log_path(log_dir: str, action: str) -> Path:
    """Return ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``, creating the folder."""
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    return action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """(Re)install the handlers of the ``SiteSearch`` logger.

    The console shows records at ``level`` and above, so ``DEBUG`` surfaces
    the strict/fallback stages of each search. When ``log_to_file`` is set
    and an ``action`` is given, a per-run file additionally keeps every
    DEBUG record.

    Args:
        level: ``log.level`` from config (unknown names fall back to INFO).
        action: CLI command name; names the log sub-directory and file.
        log_to_file: ``log.to_file`` from config.
        log_dir: ``log.dir`` from config.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_LINE_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if log_to_file and action:
        file_handler = logging.FileHandler(_action_log_path(log_dir, action), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
