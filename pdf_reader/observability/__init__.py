"""
Observability module.

Logging configuration and request logging for the reader.
"""

from pdf_reader.observability.logger import configure_logging
from pdf_reader.observability.middleware import RequestLoggingMiddleware

__all__ = ["configure_logging", "RequestLoggingMiddleware"]
