"""
Logger configuration.

Errors the controller absorbs (failed uploads, failed chat requests, stale
results) are reported on this channel and never shown in the transcript.

Dependencies: logging (stdlib)
System role: Diagnostic channel for the controller and its HTTP surface
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries log every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "multipart")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Route pdf_reader logs to stdout at the given level.

    Safe to call more than once: the handler is replaced, not duplicated.

    Args:
        level: Level name; unknown names fall back to INFO

    Returns:
        logging.Logger: The package logger
    """
    package_logger = logging.getLogger("pdf_reader")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return package_logger
