"""
Logging configuration for the records service.

``setup_logging`` attaches a console handler to the root logger and, when
a log file is configured, a size‑rotated file handler.  It only runs once
per process; later calls leave the existing handlers alone.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> bool:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        File receiving a copy of every record.  Rotated after
        ``max_bytes``, keeping ``backup_count`` old files.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if logging was
        already configured.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(
            RotatingFileHandler(
                Path(logfile).resolve(),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
    return True
