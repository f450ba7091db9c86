"""Domain exceptions for the tag feed service.

Defines domain-level exceptions for collaborator failures and programmer
errors. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TagFeedException(Exception):
    """Base exception for all tag feed errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. path, query).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TagFeedException):
    """Raised when input validation fails (e.g. bad field name or path)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TagFeedException):
    """Raised when a requested resource is not found or not servable."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'directory').
            resource_id: The path or ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StoreUnavailableException(TagFeedException):
    """Raised when the content store cannot list or read nodes."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            f"Content store unavailable while reading {path}: {reason}",
            "STORE_UNAVAILABLE",
            {"path": path, "reason": reason},
        )


class SearchException(TagFeedException):
    """Raised when a search query is malformed or the search backend fails.

    Callers rely on this to tell "no results" apart from "could not search".
    """

    def __init__(self, query: str, reason: str) -> None:
        """Initialize with the failing query and reason.

        Args:
            query: The query string that was sent.
            reason: Backend message or transport error text.
        """
        super().__init__(
            f"Search failed: {reason}",
            "SEARCH_ERROR",
            {"reason": reason},
        )
        self.query = query


class ExhaustedCursorException(TagFeedException):
    """Raised when a single-shot selection result is read more than once.

    Indicates a bug in the caller, not a runtime condition.
    """

    def __init__(self) -> None:
        super().__init__(
            "Selection result has already been retrieved",
            "EXHAUSTED_CURSOR",
        )
