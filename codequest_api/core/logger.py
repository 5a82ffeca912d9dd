"""
Logger utility for consistent logging across modules
"""

import logging
import sys


class ColorFormatter(logging.Formatter):
    """Formatter with color support like uvicorn."""

    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, "")
        # Pad before coloring so escape codes don't shift alignment
        record.levelname = f"{color}{record.levelname + self.RESET + ':':<13}"
        return super().format(record)


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Get a logger that prints like uvicorn's console output.

    Args:
        name: Logger name (typically __name__)
        level: Logging level, as an int or a name such as "DEBUG"

    Returns:
        Configured logger instance
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColorFormatter("%(levelname)s [%(name)s:%(funcName)s] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def set_package_level(level: int | str, package: str = "codequest_api") -> None:
    """
    Apply `level` to every logger already created under `package`.
    """
    for name in list(logging.root.manager.loggerDict):
        if name == package or name.startswith(package + "."):
            get_logger(name, level)
