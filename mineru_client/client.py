"""Async client for the MinerU document parsing API.

MineruClient validates a ParseRequest, encodes it as multipart form data,
POSTs it to ``{base_url}/file_parse`` and hands back a ParseResult that
owns the still-unread response.

Transport failures are normalized into service errors:

- timeouts become RequestTimeoutError (408) unless the caller cancelled;
- any other httpx transport failure becomes ServiceUnavailableError (503);
- non-success statuses are classified into MineruApiError.

Cancellation is never wrapped. Cancelling the calling task, or setting the
optional ``cancel_event``, surfaces as ``asyncio.CancelledError``.
"""

import asyncio
import logging

import httpx

from mineru_client.config import ClientConfig, get_client_config
from mineru_client.errors import (
    ClientClosedError,
    RequestTimeoutError,
    ServiceUnavailableError,
)
from mineru_client.models.request import ParseRequest
from mineru_client.protocol.classifier import build_api_error
from mineru_client.protocol.encoding import encode_request
from mineru_client.protocol.result import ParseResult

logger = logging.getLogger(__name__)

FILE_PARSE_PATH = "/file_parse"


class MineruClient:
    """Client for the MinerU ``/file_parse`` endpoint.

    The client may be shared by concurrent tasks; each ``parse_file`` call
    is independent. When no ``http_client`` is supplied the client creates
    and owns one, and closes it in ``close``. A supplied client is left
    open for its owner.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the MinerU API, e.g. ``http://localhost:8000``.
                Falls back to the configuration when omitted.
            http_client: Optional httpx client to send requests with.
            timeout: Transport timeout in seconds for an owned http client.
            config: Optional configuration. Loads from environment if not provided.

        Raises:
            ValueError: If the base URL is blank or the timeout is not positive.
        """
        if base_url is not None and not base_url.strip():
            raise ValueError("Base URL cannot be empty or whitespace.")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}.")

        self._config = config or get_client_config()
        # Trailing slash is normalized once here
        self._base_url = (base_url or self._config.base_url).strip().rstrip("/")

        if http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout if timeout is not None else self._config.timeout)
            )
            self._owns_http_client = True
        else:
            self._http_client = http_client
            self._owns_http_client = False

        self._closed = False
        logger.info(f"Initialized MinerU client for {self._base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def closed(self) -> bool:
        return self._closed

    async def parse_file(
        self,
        request: ParseRequest,
        cancel_event: asyncio.Event | None = None,
    ) -> ParseResult:
        """Submit files to MinerU for parsing.

        Args:
            request: The request options and files.
            cancel_event: Optional event; setting it aborts the submission.

        Returns:
            ParseResult owning the unread response. Release it when done.

        Raises:
            ClientClosedError: If the client has been closed.
            TypeError: If request is None.
            InvalidRequestError: If the request fails validation.
            RequestTimeoutError: If the transport timed out.
            ServiceUnavailableError: If the request could not be sent.
            MineruApiError: If the API returned a non-success status.
            asyncio.CancelledError: If the caller cancelled.
        """
        if self._closed:
            raise ClientClosedError("MinerU client has been closed.")

        if request is None:
            raise TypeError("request cannot be None")

        request.ensure_valid()

        if cancel_event is not None and cancel_event.is_set():
            raise asyncio.CancelledError("Submission cancelled before it was sent")

        url = f"{self._base_url}{FILE_PARSE_PATH}"
        logger.info(f"Submitting {len(request.files)} file(s) to {url}")

        with encode_request(request) as transmission:
            http_request = self._http_client.build_request(
                "POST", url, files=transmission.as_httpx_files()
            )
            try:
                response = await self._send(http_request, cancel_event)
            except httpx.TimeoutException as e:
                if cancel_event is not None and cancel_event.is_set():
                    raise asyncio.CancelledError("Submission cancelled by caller") from e
                raise RequestTimeoutError(
                    message="Request to the service timed out.",
                    status_code=408,
                ) from e
            except httpx.TransportError as e:
                raise ServiceUnavailableError(
                    message="Failed to send request to the service.",
                    status_code=503,
                ) from e

        if not response.is_success:
            try:
                error = await build_api_error(response)
            finally:
                await response.aclose()
            raise error

        logger.info(
            f"MinerU responded {response.status_code} "
            f"({response.headers.get('content-type', 'unknown content type')})"
        )
        return ParseResult(response)

    async def _send(
        self,
        http_request: httpx.Request,
        cancel_event: asyncio.Event | None,
    ) -> httpx.Response:
        """Send the request in streaming mode, racing it against cancel_event."""
        if cancel_event is None:
            return await self._http_client.send(http_request, stream=True)

        send_task = asyncio.ensure_future(self._http_client.send(http_request, stream=True))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancel_task.cancel()
            if not send_task.done():
                send_task.cancel()

        if cancel_event.is_set():
            await self._discard(send_task)
            raise asyncio.CancelledError("Submission cancelled by caller")

        return send_task.result()

    @staticmethod
    async def _discard(send_task: "asyncio.Future[httpx.Response]") -> None:
        # Wait for the aborted send and close any response it still produced
        try:
            response = await send_task
        except (asyncio.CancelledError, httpx.HTTPError):
            return
        await response.aclose()

    async def close(self) -> None:
        """Close the client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_http_client:
            await self._http_client.aclose()
        logger.debug(f"Closed MinerU client for {self._base_url}")

    async def __aenter__(self) -> "MineruClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


# Module-level singleton instance
_mineru_client: MineruClient | None = None


def get_mineru_client() -> MineruClient:
    """Get or create the shared MinerU client.

    A closed shared client is replaced by a fresh one.

    Returns:
        The MineruClient instance.
    """
    global _mineru_client
    if _mineru_client is None or _mineru_client.closed:
        _mineru_client = MineruClient()
    return _mineru_client
