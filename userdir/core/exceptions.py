"""
Exception hierarchy for the user directory and forwarding gateway.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DirectoryError(Exception):
    """Base exception for all directory and gateway errors."""

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


class RecordNotFoundError(DirectoryError):
    """Raised when a user record cannot be found."""

    def __init__(self, record_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize record not found error.

        Args:
            record_id: Identifier that was looked up
            details: Additional context
        """
        details = details or {}
        details["record_id"] = record_id
        self.record_id = record_id
        super().__init__(f"User not found: {record_id}", details)


class InvalidQueryError(DirectoryError):
    """Raised when a query document or its arguments cannot be resolved."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid query error.

        Args:
            message: Error message
            field: Root field or argument that failed
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class TemplateNotFoundError(DirectoryError):
    """Raised when a query template name is not registered."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["template"] = name
        self.name = name
        super().__init__(f"Query template not registered: {name}", details)


class GatewayError(DirectoryError):
    """Base exception for forwarding gateway failures."""

    pass


def _entry_message(entry: Any) -> str:
    if isinstance(entry, dict) and "message" in entry:
        return str(entry["message"])
    return str(entry)


class UpstreamError(GatewayError):
    """Raised when the upstream envelope carries error entries."""

    def __init__(
        self,
        errors: list[Any],
        data: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            errors: Error descriptors exactly as returned by the upstream
            data: Partial data that accompanied the errors, if any
            details: Additional context
        """
        self.errors = errors
        self.data = data
        messages = "; ".join(_entry_message(entry) for entry in errors)
        super().__init__(f"Upstream query failed: {messages}", details)


class TransportError(GatewayError):
    """Raised when the upstream could not be reached or answered unusably."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize transport error.

        Args:
            message: Error message
            url: Upstream URL that was called
            status_code: HTTP status when the failure was a non-success response
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)
