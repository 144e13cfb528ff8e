"""Pydantic models for MinerU API response payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FileResult(BaseModel):
    """Parsed output for a single submitted file.

    Every field is optional; a missing field means the corresponding
    output was not requested.

    Attributes:
        md_content: Markdown rendering of the document.
        middle_json: Intermediate layout JSON.
        model_output: Raw model output.
        content_list: Flat list of content segments.
    """

    model_config = ConfigDict(extra="allow")

    md_content: str | None = None
    middle_json: Any | None = None
    model_output: Any | None = None
    content_list: Any | None = None


class ParseResponseBody(BaseModel):
    """JSON body returned by a successful ``/file_parse`` call.

    Attributes:
        backend: Backend engine that processed the request.
        version: MinerU version string.
        results: Per-file results keyed by file name, in response order.
    """

    backend: str = ""
    version: str = ""
    results: dict[str, FileResult] = Field(default_factory=dict)


class ValidationErrorDetail(BaseModel):
    """A single entry of a 422 ``detail`` array.

    Attributes:
        loc: Location path of the offending input, strings and indexes in order.
        msg: Error message.
        type: Error type tag, e.g. ``value_error.missing``.
    """

    loc: list[str | int] = Field(default_factory=list)
    msg: str = ""
    type: str = ""
