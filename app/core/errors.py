from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_FAILURE = "INTERNAL_FAILURE"


class ApiError(Exception):
    """Base error raised by services; rendered as {"code", "message"}."""

    status_code: int = 500
    code: ErrorCode = ErrorCode.INTERNAL_FAILURE
    default_message: str = "Internal failure"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ApiError):
    status_code = 401
    code = ErrorCode.UNAUTHORIZED
    default_message = "unauthorized access"


class Forbidden(ApiError):
    status_code = 403
    code = ErrorCode.FORBIDDEN
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    code = ErrorCode.NOT_FOUND
    default_message = "Not found"


class InvalidIdentifier(ApiError):
    status_code = 400
    code = ErrorCode.INVALID_IDENTIFIER
    default_message = "Invalid identifier"


class InvalidTransition(ApiError):
    status_code = 409
    code = ErrorCode.INVALID_STATUS_TRANSITION
    default_message = "Status transition not allowed"


class InternalFailure(ApiError):
    pass
