"""
ArticleHub Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    ArticleHubError (base)
    ├── ValidationError   → 400 Bad Request (malformed ID, unreadable body)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Note that the list endpoint never raises ValidationError: malformed query
parameters are coerced to defaults by the query translator.
"""

from typing import Any, Dict, Optional


class ArticleHubError(Exception):
    """
    Base exception for all ArticleHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the handler chooses to)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ArticleHubError):
    """
    Raised when client input cannot be used at all.

    When:    Article ID is not a valid ObjectId, request body is not a valid article.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid ID format",
            "details": {"field": "id", "value": "not-an-id"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(ArticleHubError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /article/{id} for an ID that matches no document.
    HTTP:    404 Not Found

    The driver reports a miss as `None` / a zero count rather than an
    exception; the service layer converts that into this error.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ArticleHubError):
    """
    Raised when database operations fail unexpectedly.

    When:    Server selection timeout, network error, write failure, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver details
    (host names, operation, error codes) are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
