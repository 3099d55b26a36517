"""
Exception hierarchy for the PDF Reader client.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PdfReaderException(Exception):
    """Base exception for all PDF Reader errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PdfReaderException):
    """Raised when a selected document is rejected before any state change."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)

    @property
    def field(self) -> str | None:
        return self.details.get("field")


class RemoteServiceError(PdfReaderException):
    """Base exception for failed calls to the remote service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize remote service error.

        Args:
            message: Error message (reason reported by the server when available)
            status_code: HTTP status code, None for transport failures
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class UploadError(RemoteServiceError):
    """Raised when uploading or processing a document fails."""

    pass


class ChatError(RemoteServiceError):
    """Raised when the question-answering endpoint fails."""

    pass
