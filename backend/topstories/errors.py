"""Errors raised while retrieving articles from the news service.

The messages are the ones shown to the reader when a fetch is reported as
failed.
"""


class APIError(Exception):
    """Base class for article retrieval failures."""

    message = "The error is unknown"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def description(self) -> str:
        """Human readable description of the failure."""
        return str(self)


class DecodingError(APIError):
    """The response body did not match the expected shape."""

    message = "Failed to decode the object from the service"


class ErrorCode(APIError):
    """The service answered with a non-success status code."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"{code} - Something went wrong")


class UnknownError(APIError):
    """Anything else, including transport failures."""
