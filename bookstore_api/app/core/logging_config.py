"""
Logging setup for the Bookstore API.

``setup_logging`` attaches a console handler (and, when ``LOG_FILE``
is set, a file handler) to the root logger.  Modules log
through ``logging.getLogger(__name__)``, so every record of this
package appears under a ``bookstore_api.*`` logger name.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return the package logger.

    ``level`` is a level name such as ``"DEBUG"`` (case insensitive);
    unknown names fall back to ``INFO``.  When the root logger already
    has handlers only the package level is applied.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger("bookstore_api")
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return package_logger

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    return package_logger
