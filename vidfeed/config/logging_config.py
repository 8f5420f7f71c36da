"""
Logging for the ``vidfeed`` logger tree.

All modules should use:
    import logging
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_path: Path | None = None, debug: bool = False) -> logging.Logger:
    """
    Configure the ``vidfeed`` logger for a browse session.

    The console (stderr) only shows warnings and errors so it does not
    bury the feed listing on stdout; *debug* lowers it to DEBUG. When
    *log_path* is given, the whole session is appended to that file.
    Calling this again is a no-op.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger("vidfeed")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if debug else logging.WARNING)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_path is not None:
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            session_file = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_path, e)
        else:
            session_file.setFormatter(formatter)
            logger.addHandler(session_file)

    # requests logs every connection through urllib3
    if not debug:
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger
