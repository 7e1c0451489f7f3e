"""
Logging setup shared by both services.

``setup_logging`` attaches a console handler and, optionally, a file
handler to the root logger.  When the quiz and question services run
in the same process (see ``run.py``) the second call is a no-op, so
both services write through the same handlers.

``resolve_log_level`` turns the configured ``LOG_LEVEL`` into a level
name that both ``logging`` and uvicorn accept, so a typo in the
environment degrades to ``INFO`` everywhere instead of failing at
server start.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Level names understood by uvicorn's ``log_level`` option.
LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LEVEL = "INFO"


def resolve_log_level(level: Optional[str]) -> str:
    """Return ``level`` upper-cased, or ``INFO`` if it is not a known name.

    ``WARN`` is accepted as an alias of ``WARNING``.
    """
    name = (level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in LEVEL_NAMES:
        return DEFAULT_LEVEL
    return name


def setup_logging(level: str = DEFAULT_LEVEL, logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, resolved with ``resolve_log_level``.
    logfile : Optional[str]
        Path to a file to additionally log to.  Empty or ``None``
        disables the file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_log_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
