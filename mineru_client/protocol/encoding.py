"""Multipart encoding of ParseRequest options.

Turns a ParseRequest into an ordered list of form parts: the files first
(``file0`` .. ``fileN``), then every scalar option in a fixed order. The
parts are handed to httpx as a ``files=`` sequence so the wire order is
exactly the part order.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from mineru_client.models.request import ParseRequest

logger = logging.getLogger(__name__)

# Constants
FILES_FIELD = "files"
FILE_CONTENT_TYPE = "application/octet-stream"


class MultipartPart(BaseModel):
    """A single named part of a multipart transmission.

    Attributes:
        name: Form field name.
        value: Text for scalar parts, a binary stream or bytes for file parts.
        filename: File tag (``file0``, ``file1``, ...) for file parts.
        content_type: Content type for file parts.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any
    filename: str | None = None
    content_type: str | None = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


class EncodedTransmission:
    """Ordered multipart parts for one submission.

    Built once per request and consumed once by the transport. ``close``
    drops every part reference; caller-owned file streams stay open.
    """

    def __init__(self, parts: list[MultipartPart]) -> None:
        self._parts = parts
        self._closed = False

    @property
    def parts(self) -> list[MultipartPart]:
        if self._closed:
            raise RuntimeError("Transmission has already been closed.")
        return list(self._parts)

    @property
    def closed(self) -> bool:
        return self._closed

    def as_httpx_files(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Render the parts as an httpx ``files=`` sequence.

        Scalar parts carry no filename, so they are sent as plain form fields.
        """
        rendered: list[tuple[str, tuple[Any, ...]]] = []
        for part in self.parts:
            if part.is_file:
                rendered.append((part.name, (part.filename, part.value, part.content_type)))
            else:
                rendered.append((part.name, (None, part.value)))
        return rendered

    def close(self) -> None:
        if self._closed:
            return
        self._parts = []
        self._closed = True

    def __enter__(self) -> "EncodedTransmission":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _field(name: str, value: str | bool | int) -> MultipartPart:
    if isinstance(value, bool):
        text = _format_bool(value)
    else:
        text = str(value)
    return MultipartPart(name=name, value=text)


def encode_request(request: ParseRequest) -> EncodedTransmission:
    """Encode a request into its multipart parts.

    Args:
        request: The request to encode. It is expected to be valid.

    Returns:
        EncodedTransmission with file parts followed by option parts.

    Raises:
        TypeError: If request is None.
    """
    if request is None:
        raise TypeError("request cannot be None")

    parts: list[MultipartPart] = [
        MultipartPart(
            name=FILES_FIELD,
            value=file,
            filename=f"file{index}",
            content_type=FILE_CONTENT_TYPE,
        )
        for index, file in enumerate(request.files)
    ]

    parts.append(_field("output_dir", request.output_dir))
    parts.extend(_field("lang_list", lang) for lang in request.lang_list)
    parts.append(_field("backend", request.backend))
    parts.append(_field("parse_method", request.parse_method))
    parts.append(_field("formula_enable", request.formula_enable))
    parts.append(_field("table_enable", request.table_enable))

    if request.server_url is not None:
        parts.append(_field("server_url", request.server_url))

    parts.append(_field("return_md", request.return_md))
    parts.append(_field("return_middle_json", request.return_middle_json))
    parts.append(_field("return_model_output", request.return_model_output))
    parts.append(_field("return_content_list", request.return_content_list))
    parts.append(_field("return_images", request.return_images))
    parts.append(_field("response_format_zip", request.response_format_zip))
    parts.append(_field("start_page_id", request.start_page_id))
    parts.append(_field("end_page_id", request.end_page_id))

    logger.debug(f"Encoded request with {len(request.files)} file(s) into {len(parts)} parts")
    return EncodedTransmission(parts)
