"""
Logging for scout runs.

Everything logs under the ``mission_control`` namespace. The HTTP stack
logs one INFO line per request, so it is held at WARNING unless the run
is at DEBUG.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "mission_control"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are only interesting when debugging a run
HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the scout's loggers for one process.

    Args:
        level: Log level name. Defaults to LOG_LEVEL, then INFO.
        log_file: Also append to this file (UTF-8). Defaults to LOG_FILE.

    Returns:
        The ``mission_control`` logger
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level_num = getattr(logging, level_name, logging.INFO)
    log_file = log_file or os.getenv("LOG_FILE")

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level_num)
    # Re-running setup replaces handlers instead of stacking them
    for old in logger.handlers:
        old.close()
    logger.handlers = []
    for handler in handlers:
        handler.setLevel(level_num)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    http_level = logging.DEBUG if level_num <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    return logger
