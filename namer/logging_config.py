"""
Structured logging configuration for namer.

Provides text or JSON-formatted logs with trace_id support for correlating
the records produced while deriving one object's names.

Environment Variables:
    NAMER_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    NAMER_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from namer.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="build-42")
    logger.info("Naming build pod")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging() -> None:
    """
    Configure root logger from the environment.

    Reads configuration from environment variables:
    - NAMER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - NAMER_LOG_FORMAT: json, text (default: text)

    Logs go to stderr so command output on stdout stays parseable.
    """
    log_level = os.getenv("NAMER_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("NAMER_LOG_FORMAT", "text").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    # Handler-level so records propagated from child loggers get it too
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the base name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
