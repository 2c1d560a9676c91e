from .init import LOGGER_NAME, get_logger, log_summary, reset_logging, setup_logging

__all__ = [
    "LOGGER_NAME",
    "get_logger",
    "log_summary",
    "reset_logging",
    "setup_logging",
]
