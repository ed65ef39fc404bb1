"""VipFinder logging utilities.

One package logger shared by every module, printed as
``mm-dd HH:MM:SS [LVL] message`` with a four-letter level tag.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

_LOG_FORMAT: Final[str] = "%(asctime)s [%(leveltag)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib name
        record.leveltag = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("VipFinder")


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Configure the VipFinder logger.

    The console handler honors ``level``; the optional file handler always
    records DEBUG so a run can be inspected afterwards.

    Args:
        level: Logging level name (e.g. INFO, DEBUG).
        action: CLI command name, used for the log file location.
        log_to_file: Whether to mirror logs to ``<log_dir>/<action>/``.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _LevelTagFormatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    log.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(resolved_level)
    console.setFormatter(formatter)
    log.addHandler(console)

    log_path: Path | None = None
    if log_to_file and action:
        action_dir = Path(log_dir or "log") / action
        action_dir.mkdir(parents=True, exist_ok=True)
        log_path = action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False
    return log_path
