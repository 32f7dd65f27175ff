"""Logging configuration for sbom-sniffer."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict

LOGGER_NAME = "sbom_sniffer"


def setup_logging(level: str = "WARNING", structured: bool = False) -> logging.Logger:
    """
    Set up the package logger.

    The handler is only attached once; later calls just adjust the level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Whether to use structured JSON logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    numeric_level = getattr(logging, level.upper())

    if logger.handlers:
        set_log_level(level)
        return logger

    logger.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def set_log_level(level: str) -> None:
    """Change the level of the package logger and all of its handlers."""
    numeric_level = getattr(logging, level.upper())
    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.setLevel(numeric_level)
    for handler in pkg_logger.handlers:
        handler.setLevel(numeric_level)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


# Global logger instance
logger = setup_logging()
