"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and aligns uvicorn's loggers with the
chosen level, so request logs and application logs share one format
and one threshold.  Calling it more than once is harmless.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Level names understood by both ``logging`` and uvicorn.
_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Loggers created by uvicorn which otherwise keep their own levels.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def resolve_log_level(level: str) -> str:
    """Return the canonical name of ``level`` (e.g. ``"WARN"`` -> ``"WARNING"``).

    Unknown names fall back to ``"INFO"``.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, bool) or not isinstance(numeric_level, int):
        return "INFO"
    name = logging.getLevelName(numeric_level)
    return name if name in _LEVEL_NAMES else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Resolved with
        ``resolve_log_level``.
    logfile : Optional[str]
        Path of a file to additionally write logs to.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = resolve_log_level(level)
    numeric_level = getattr(logging, level_name)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    logging.getLogger(__name__).debug("Logging configured at level %s", level_name)
