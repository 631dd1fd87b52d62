"""Logging setup for the periodica command line and HTTP server.

Library code only creates module loggers; nothing is configured on import.
Entry points call :func:`setup_logging` once, which attaches handlers to the
``periodica`` logger so the loader's INFO and DEBUG records become visible
without touching the levels of uvicorn or other libraries.
"""

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LEVEL_ENV_VAR = "PERIODICA_LOG_LEVEL"
PACKAGE_LOGGER = "periodica"


def resolve_level(log_level: str | int | None = None) -> int:
    """Turn a level name (or number) into a logging level.

    ``None`` falls back to ``$PERIODICA_LOG_LEVEL`` and then to INFO.
    """
    if log_level is None:
        log_level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(log_level, int) and not isinstance(log_level, bool):
        return log_level
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        msg = f"Invalid log level: {log_level}"
        raise ValueError(msg)
    return numeric_level


def setup_logging(log_level: str | int | None = None, log_file: Path | None = None) -> logging.Logger:
    """
    Send periodica's log records to stdout and, optionally, a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number.
        log_file: Optional path to a log file.

    Returns:
        The configured ``periodica`` logger.
    """
    numeric_level = resolve_level(log_level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(numeric_level)
    return logger
