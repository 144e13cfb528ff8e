"""Exception types raised by the MinerU client.

Every exception derives from MineruError so callers can catch the whole
family at once, while the concrete classes keep input, service, format
and state failures apart.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mineru_client.models.response import ValidationErrorDetail


class MineruError(Exception):
    """Base class for all MinerU client errors."""

    pass


class InvalidRequestError(MineruError, ValueError):
    """Raised when request options fail validation before any I/O.

    Attributes:
        field: Name of the option that violated its constraint.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MineruApiError(MineruError):
    """Raised when the MinerU API cannot be reached or returns an error status.

    Attributes:
        message: Human-readable description of the failure.
        status_code: HTTP status code of the failed exchange.
        response_content: Raw response text, if it could be read.
        validation_errors: Parsed 422 validation details, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_content: str | None = None,
        validation_errors: "list[ValidationErrorDetail] | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_content = response_content
        self.validation_errors = validation_errors

    def __str__(self) -> str:
        return f"{self.message} (status {self.status_code})"


class ServiceUnavailableError(MineruApiError):
    """Raised when the request could not be delivered to the service."""

    pass


class RequestTimeoutError(MineruApiError):
    """Raised when the transport gave up waiting for the service."""

    pass


class ResponseFormatError(MineruError, ValueError):
    """Raised when a response body does not have the expected shape."""

    pass


class ZipResponseError(MineruError):
    """Raised when a ZIP archive response is read through a text view."""

    pass


class ResultReleasedError(MineruError, RuntimeError):
    """Raised when a released ParseResult is read."""

    pass


class StreamConsumedError(MineruError, RuntimeError):
    """Raised when a streamed response body is read a second time."""

    pass


class ClientClosedError(MineruError, RuntimeError):
    """Raised when a closed MineruClient is asked to submit a request."""

    pass
