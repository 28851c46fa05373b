"""API exception hierarchy for consistent error handling.

All API exceptions inherit from LFDigitalAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from lfdigital.api.models.errors import ErrorCode

AI_UNAVAILABLE_MESSAGE = "AI service temporarily unavailable"


class LFDigitalAPIError(Exception):
    """Base exception for all API errors.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(LFDigitalAPIError):
    """Raised when request validation fails."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class NotFoundError(LFDigitalAPIError):
    """Raised when a requested record does not exist."""

    status_code = 404
    error_code = ErrorCode.NOT_FOUND


class AIServiceUnavailableError(LFDigitalAPIError):
    """Raised when no completion provider could answer."""

    status_code = 500
    error_code = ErrorCode.AI_SERVICE_UNAVAILABLE

    def __init__(self, message: str = AI_UNAVAILABLE_MESSAGE) -> None:
        super().__init__(message)
