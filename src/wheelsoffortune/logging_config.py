"""
Logging Configuration
=====================
One place that decides where the artwork's log records go.

Every module logs through ``logging.getLogger(__name__)``; those loggers are
children of the package logger configured here, so a single call at start-up
(from the CLI) routes the whole application.
"""
import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "wheelsoffortune"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    return handlers


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    namespace: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Route the records of ``namespace`` to stdout and, optionally, to a file.

    Calling it again replaces the previous handlers, so the CLI and the tests
    can re-initialize without duplicating output.

    Returns:
        The configured namespace logger.
    """
    logger = logging.getLogger(namespace)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(
        f"Logging to stdout{f' and {log_file}' if log_file else ''} "
        f"at level {logging.getLevelName(level)}."
    )
    return logger


def parse_level(name: str) -> int:
    """Translate a level name such as 'debug' into its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return level
