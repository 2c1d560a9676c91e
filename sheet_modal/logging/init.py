from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line written by the tool starts with one of the labels
INFO|WARN|ERROR|SUMMARY so that the output of a load (and the final
SUMMARY line) can be grepped by scripts.

Modules log through ``logging.getLogger(__name__)``; since every module lives
under the ``sheet_modal`` package those loggers propagate to the one
configured here.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
    "LOGGER_NAME",
]

LOGGER_NAME = "sheet_modal"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter writing ``LABEL message`` lines.

    WARNING is shortened to WARN; the custom level 25 is SUMMARY.
    """

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``sheet_modal`` logger (stdout, labeled prefixes).

    Idempotent: a second call returns the already configured logger. Passing
    ``debug=True`` lowers the level of the logger and its handler to DEBUG,
    also on an already configured logger.

    Returns:
        Configured logger instance for the application
    """
    global _logger

    if _logger is None:
        logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.INFO)

        # Clear any existing handlers to avoid duplication
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        handler.setFormatter(LabeledFormatter())
        logger.addHandler(handler)

        # Prevent propagation to root logger to avoid duplicate output
        logger.propagate = False
        _logger = logger

    if debug:
        for h in _logger.handlers:
            h.setLevel(logging.DEBUG)
        _logger.setLevel(logging.DEBUG)
    return _logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    logger = get_logger()
    logger.log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    if _logger is not None:
        for handler in _logger.handlers[:]:
            _logger.removeHandler(handler)
    _logger = None
