"""
PrintSize Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the upload and measurement pipeline.
Why:   Each failure carries its HTTP status with it, so the FastAPI exception
       handlers and the serverless adapter render identical error bodies.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) and the serverless
       adapter catch these and return `{"error": ...}` JSON bodies.

Exception Hierarchy:
    PrintSizeError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── MethodNotAllowedError    → 405 Method Not Allowed
    └── ImageProcessingError     → 500 Internal Server Error

EXIF problems have no exception here: the metadata resolver recovers them.
"""

from typing import Any, Dict, Optional


class PrintSizeError(Exception):
    """
    Base exception for all PrintSize application errors.

    Attributes:
        message:      User-facing error description (returned as "error")
        context:      Additional debug info (logged, not returned)
        status_code:  HTTP status used when rendering the error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Response body for this error."""
        return {"error": self.message}


class ValidationError(PrintSizeError):
    """
    Raised when the request or the uploaded part fails validation.

    When:    Wrong content type, missing boundary, empty body, missing or empty
             `file` part, oversized upload, non-image MIME type.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Content-Type must be multipart/form-data"}
    """

    status_code = 400

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


class MethodNotAllowedError(PrintSizeError):
    """Raised by the serverless adapter for anything other than POST."""

    status_code = 405

    def __init__(
        self,
        method: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if method:
            ctx["method"] = method
        super().__init__(message="Method not allowed", context=ctx)
        self.method = method


class ImageProcessingError(PrintSizeError):
    """
    Raised when the uploaded bytes cannot be decoded as an image.

    HTTP:    500 Internal Server Error

    The decoder's own message is returned as "details" so clients can tell a
    corrupt upload from a server fault.
    """

    status_code = 500

    def __init__(
        self,
        details: str = "Unknown error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message="Internal server error", context=context)
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}
