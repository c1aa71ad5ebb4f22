"""
Contains the application error classes. A `ValidationException` is classified as a bad request.
"""
from typing import Any, Optional


class ErrorCategory:
    """
    Categories to classify application errors. The category determines the HTTP status code of the error.
    """

    UNKNOWN = "Unknown"
    INTERNAL = "Internal"
    MISCONFIGURATION = "Misconfiguration"
    INVALID_STATE = "InvalidState"
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    UNSUPPORTED = "Unsupported"


class ApplicationError(Exception):
    """
    Base class for all errors raised on purpose by the application. Additionally to the message it carries a
    category, an error code, a HTTP status code, the correlation ID of the call and optional structured details.
    """

    def __init__(
        self,
        category: Optional[str] = None,
        correlation_id: Optional[str] = None,
        code: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message or "Unknown error")
        self.message: str = message or "Unknown error"
        self.category: str = category or ErrorCategory.UNKNOWN
        self.correlation_id: Optional[str] = correlation_id
        self.code: str = code or "UNKNOWN"
        self.status: int = 500
        self.cause: Optional[str] = None
        self.details: dict[str, Any] = {}

    def with_details(self, key: str, value: Any) -> "ApplicationError":
        """Attaches a structured detail to this error"""
        self.details[key] = value
        return self

    def with_cause(self, cause: Optional[BaseException]) -> "ApplicationError":
        """Stores the message of the causing exception and chains it"""
        if cause is not None:
            self.cause = str(cause)
            self.__cause__ = cause
        return self

    def __str__(self):
        return self.message


class BadRequestError(ApplicationError):
    """
    Raised if the data sent by a caller is invalid.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        code: Optional[str] = None,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(ErrorCategory.BAD_REQUEST, correlation_id, code, message)
        self.status = 400
        self.with_cause(cause)
