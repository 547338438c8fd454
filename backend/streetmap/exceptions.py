"""
StreetMap Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the three ways a request can fail.
How:   Each exception carries a client-safe message and an optional context
       dict. Handlers registered in main.py turn them into JSON error bodies
       with the matching HTTP status code.
Who:   Raised by repositories; caught by the global handlers.

Exception Hierarchy:
    StreetMapError (base)
    ├── InvalidRequestError  → 400 Bad Request (required field missing)
    ├── NotFoundError        → 404 Not Found (identifier does not resolve)
    └── StorageError         → 500 Internal Server Error (backend call failed)
"""

from typing import Any, Dict, Optional


class StreetMapError(Exception):
    """
    Base exception for all StreetMap application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidRequestError(StreetMapError):
    """
    Raised when a request body lacks a field the operation requires.

    When:    update-color without id/color, save-line without polyline/color,
             or a body FastAPI could not parse at all.
    HTTP:    400 Bad Request

    Example response:
        {
            "success": false,
            "error": "Invalid data: 'color' is required",
            "request_id": "a1b2c3d4"
        }
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid data",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(StreetMapError):
    """
    Raised when an identifier does not resolve to a stored record.

    When:    POST /api/update-color with an id no street has.
    HTTP:    404 Not Found

    Deletes never raise this: removing a missing record is a no-op.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class StorageError(StreetMapError):
    """
    Raised when a persistence call fails for any reason.

    When:    Connection refused or lost, query error, or the call ran past
             the configured storage timeout.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The driver error
    and the operation name travel in `context` and are only logged.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
