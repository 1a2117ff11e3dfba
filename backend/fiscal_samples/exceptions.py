"""
FiscalAPI Samples — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for the few failures that are
       NOT expressed as a FiscalAPI envelope.
Why:   A failed FiscalAPI call is ordinary data (succeeded=false) and becomes
       HTTP 400 in the route. Everything else (backend unreachable, disk
       errors, missing package file) needs its own status code and a
       consistent error body.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.

Exception Hierarchy:
    FiscalSamplesError (base)
    ├── NotFoundError              → 404 Not Found
    ├── FileStorageError           → 500 Internal Server Error
    └── FiscalApiUnavailableError  → 503 Service Unavailable (retry later)
"""

from typing import Any, Dict, Optional


class FiscalSamplesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Debug info; always logged, returned only by the 404 and 503 handlers
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(FiscalSamplesError):
    """
    Raised when a requested resource does not exist.

    When:    A package download succeeded but carried no file.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class FileStorageError(FiscalSamplesError):
    """
    Raised when a downloaded file cannot be decoded or written.

    When:    Invalid base64 payload, disk full, permission denied.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FiscalApiUnavailableError(FiscalSamplesError):
    """
    Raised when FiscalAPI cannot be reached after all transport retries.

    What:    Connection refused, DNS failure, or timeouts on every attempt.
    When:    After tenacity retries are exhausted (default: 3 attempts).
    HTTP:    503 Service Unavailable

    An HTTP error status from FiscalAPI is NOT this error: the backend
    answered, so the answer is returned to the caller as a failed envelope.
    """

    def __init__(
        self,
        message: str = "FiscalAPI is temporarily unreachable",
        retry_after: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if retry_after:
            ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
