"""Result handle for a successful MinerU parse.

ParseResult owns the open httpx response and exposes several views over
its body: the typed response body, the first file's markdown, a
schema-less JSON value, the raw bytes, a file on disk, or an async byte
iterator for caller-driven streaming. Nothing is read until a view asks
for it.
"""

import json
import logging
from collections.abc import AsyncIterator, Mapping
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from mineru_client.errors import (
    InvalidRequestError,
    ResponseFormatError,
    ResultReleasedError,
    StreamConsumedError,
    ZipResponseError,
)
from mineru_client.models.response import ParseResponseBody

logger = logging.getLogger(__name__)

ZIP_MEDIA_TYPE_SUBSTRING = "zip"


class ParseResult:
    """Lazily interpreted response of a successful ``/file_parse`` call.

    Buffered views (``read_response_body``, ``read_markdown``, ``read_json``,
    ``read_bytes``) share httpx's read-once buffer, so they can be mixed
    freely. Streaming views (``save_to_file``, ``iter_bytes``) consume the
    body without buffering; once they have run, buffered views raise
    StreamConsumedError.

    A ParseResult belongs to a single task. Reading the same result from
    concurrent tasks is not supported.

    Release it with ``await result.aclose()`` or ``async with result:``.
    Releasing twice is a no-op.
    """

    def __init__(self, response: httpx.Response) -> None:
        if response is None:
            raise TypeError("response cannot be None")
        self._response = response
        self._parsed_body: ParseResponseBody | None = None
        self._released = False

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def content_type(self) -> str | None:
        """Media type of the body without parameters, e.g. ``application/json``."""
        raw = self._response.headers.get("content-type")
        if not raw:
            return None
        return raw.split(";", 1)[0].strip() or None

    @property
    def is_zip(self) -> bool:
        content_type = self.content_type
        return content_type is not None and ZIP_MEDIA_TYPE_SUBSTRING in content_type.lower()

    @property
    def released(self) -> bool:
        return self._released

    def _ensure_open(self) -> None:
        if self._released:
            raise ResultReleasedError("Parse result has already been released.")

    async def _read_content(self) -> bytes:
        self._ensure_open()
        try:
            return await self._response.aread()
        except httpx.StreamConsumed as e:
            raise StreamConsumedError(
                "Response body was already streamed and cannot be read again."
            ) from e

    async def read_response_body(self) -> ParseResponseBody:
        """Parse the body as a ParseResponseBody.

        The parsed body is cached; later calls return it without reading.

        Returns:
            The typed response body.

        Raises:
            ResponseFormatError: If the body is not a valid response document.
            ResultReleasedError: If the result was released.
        """
        self._ensure_open()
        if self._parsed_body is not None:
            return self._parsed_body

        content = await self._read_content()
        try:
            self._parsed_body = ParseResponseBody.model_validate_json(content)
        except ValidationError as e:
            raise ResponseFormatError(f"Failed to deserialize response body: {e}") from e

        return self._parsed_body

    async def read_markdown(self) -> str:
        """Return the markdown of the first file result.

        The first entry of ``results`` in response order is used; MinerU
        emits ``file0`` first.

        Returns:
            Markdown content of the first result.

        Raises:
            ZipResponseError: If the response is a ZIP archive.
            ResponseFormatError: If there are no results or no markdown.
            ResultReleasedError: If the result was released.
        """
        self._ensure_open()

        if self.is_zip:
            raise ZipResponseError(
                "Cannot read ZIP responses as markdown. "
                "Use iter_bytes() or save_to_file() instead."
            )

        body = await self.read_response_body()

        if not body.results:
            raise ResponseFormatError("Response does not contain any results.")

        if len(body.results) > 1:
            logger.debug(f"Response has {len(body.results)} results, reading markdown of the first")

        first_result = next(iter(body.results.values()))
        if not first_result.md_content:
            raise ResponseFormatError("Response does not contain markdown content.")

        return first_result.md_content

    async def read_json(self) -> Any:
        """Parse the body as schema-less JSON.

        Does not populate or consult the typed body cache.

        Raises:
            ResponseFormatError: If the body is not valid JSON.
            ResultReleasedError: If the result was released.
        """
        content = await self._read_content()
        try:
            return json.loads(content)
        except ValueError as e:
            raise ResponseFormatError(f"Response body is not valid JSON: {e}") from e

    async def read_bytes(self) -> bytes:
        """Return the whole body in memory."""
        return await self._read_content()

    def iter_bytes(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        """Stream the body for caller-driven consumption.

        The iterator is tied to this result; do not use it after release.

        Args:
            chunk_size: Optional chunk size in bytes.

        Raises:
            ResultReleasedError: If the result was released.
        """
        self._ensure_open()
        return self._iter_body(chunk_size)

    async def _iter_body(self, chunk_size: int | None = None) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.aiter_bytes(chunk_size):
                yield chunk
        except httpx.StreamConsumed as e:
            raise StreamConsumedError(
                "Response body was already streamed and cannot be read again."
            ) from e
        except httpx.StreamClosed as e:
            raise ResultReleasedError("Parse result was released while streaming.") from e

    async def save_to_file(self, path: str | Path) -> Path:
        """Write the body to ``path``, creating or truncating the file.

        The body is copied chunk by chunk without buffering it in memory.

        Args:
            path: Destination file path.

        Returns:
            The destination path.

        Raises:
            InvalidRequestError: If path is blank.
            ResultReleasedError: If the result was released.
        """
        if path is None or not str(path).strip():
            raise InvalidRequestError("File path cannot be empty.", field="path")

        self._ensure_open()
        target = Path(path)

        written = 0
        with target.open("wb") as f:
            async for chunk in self._iter_body():
                f.write(chunk)
                written += len(chunk)

        logger.info(f"Saved {written} bytes of MinerU response to {target}")
        return target

    async def aclose(self) -> None:
        """Release the response. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        await self._response.aclose()
        logger.debug("Released MinerU parse result")

    async def __aenter__(self) -> "ParseResult":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
