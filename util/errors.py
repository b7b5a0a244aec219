# util/errors.py
from typing import Optional
from util.enums import ErrorMessage


class AppError(Exception):
    """
    Error that crosses the HTTP boundary as `{"error": message}` with `http_status`.
    """

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    @classmethod
    def of(cls, error: ErrorMessage, http_status: Optional[int] = None) -> "AppError":
        detail = error.value
        return cls(detail.message, http_status or detail.http_status)


class InvalidInputError(AppError):
    """Client-supplied data failed a precondition. No upstream call was made."""

    def __init__(self, message: str, http_status: int = 400) -> None:
        super().__init__(message, http_status)


class ConfigurationError(AppError):
    """The server is missing a required secret. Not the caller's fault."""

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message, http_status)


class UpstreamError(AppError):
    """The external service answered with a non-success status; it is forwarded."""

    def __init__(self, message: str, http_status: int = 502) -> None:
        super().__init__(message, http_status)


class InternalError(AppError):
    """Transport failure, malformed upstream body or any other unexpected error."""

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message, http_status)
