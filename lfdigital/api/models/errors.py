"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, length limits)."""

    NOT_FOUND = "NOT_FOUND"
    """The requested record does not exist."""

    AI_SERVICE_UNAVAILABLE = "AI_SERVICE_UNAVAILABLE"
    """Every completion provider was skipped or failed."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    """The field that caused the error, if applicable."""

    message: str
    """Human-readable error description."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    details: list[ErrorDetail] | None = None
    """Additional error details for validation failures."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    The top-level message is what the site shows to users; `error`
    carries the machine-readable code.

    Example:
        {
            "message": "AI service temporarily unavailable",
            "error": {
                "code": "AI_SERVICE_UNAVAILABLE",
                "message": "AI service temporarily unavailable"
            }
        }
    """

    message: str
    error: ErrorBody

    @classmethod
    def build(
        cls,
        code: ErrorCode,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> "ErrorResponse":
        return cls(message=message, error=ErrorBody(code=code, message=message, details=details))
