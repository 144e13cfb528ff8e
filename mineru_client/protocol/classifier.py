"""Classification of unsuccessful MinerU API responses.

Maps the HTTP status to a default message and, for 422 responses, pulls
the FastAPI-style ``detail`` list out of the body. Reading or parsing the
body is best-effort: a malformed body never masks the status error, it
only leaves the raw text as the sole detail.
"""

import json
import logging
from http import HTTPStatus
from typing import Any

import httpx

from mineru_client.errors import MineruApiError
from mineru_client.models.response import ValidationErrorDetail

logger = logging.getLogger(__name__)

_STATUS_MESSAGES: dict[int, str] = {
    HTTPStatus.UNPROCESSABLE_ENTITY: "The request contains validation errors.",
    HTTPStatus.BAD_REQUEST: "The request was malformed or invalid.",
    HTTPStatus.NOT_FOUND: "The API endpoint was not found.",
    HTTPStatus.INTERNAL_SERVER_ERROR: "The API server encountered an error.",
}


def classify_status(status_code: int) -> str:
    """Return the default error message for an HTTP status code."""
    return _STATUS_MESSAGES.get(status_code, f"The API returned an error: {status_code}")


def _parse_location(raw_loc: Any) -> list[str | int]:
    if not isinstance(raw_loc, list):
        raise TypeError("Validation error location is not an array")
    location: list[str | int] = []
    for segment in raw_loc:
        # bool is an int subclass but never a valid path segment
        if not isinstance(segment, (str, int)) or isinstance(segment, bool):
            raise TypeError(
                f"Validation error location segment {segment!r} is not a string or integer"
            )
        location.append(segment)
    return location


def _text_field(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Validation error field '{key}' is not a string")
    return value


def parse_validation_errors(content: str) -> list[ValidationErrorDetail] | None:
    """Parse a 422 body into validation error details.

    Args:
        content: Raw response text.

    Returns:
        The parsed details, or None if the body has no ``detail`` array.

    Raises:
        ValueError: If the body is not valid JSON.
        TypeError: If a detail entry has an unexpected shape.
    """
    document = json.loads(content)
    if not isinstance(document, dict):
        return None

    detail = document.get("detail")
    if not isinstance(detail, list):
        return None

    errors: list[ValidationErrorDetail] = []
    for entry in detail:
        if not isinstance(entry, dict):
            raise TypeError("Validation error entry is not an object")
        errors.append(
            ValidationErrorDetail(
                loc=_parse_location(entry.get("loc", [])),
                msg=_text_field(entry, "msg"),
                type=_text_field(entry, "type"),
            )
        )
    return errors


async def build_api_error(response: httpx.Response) -> MineruApiError:
    """Drain an unsuccessful response and build the matching error.

    The response is read completely but not closed; the caller owns it.

    Args:
        response: A response with a non-success status.

    Returns:
        MineruApiError carrying status, raw text and any validation details.
    """
    status_code = response.status_code
    response_content: str | None = None
    validation_errors: list[ValidationErrorDetail] | None = None

    try:
        await response.aread()
        response_content = response.text

        if status_code == HTTPStatus.UNPROCESSABLE_ENTITY:
            validation_errors = parse_validation_errors(response_content)
    except (httpx.HTTPError, httpx.StreamError, ValueError, TypeError) as e:
        # Keep whatever raw text was read; the status alone decides the error
        logger.debug(f"Could not parse error response body (status {status_code}): {e}")

    message = classify_status(status_code)
    logger.warning(f"MinerU API returned {status_code}: {message}")

    return MineruApiError(
        message=message,
        status_code=status_code,
        response_content=response_content,
        validation_errors=validation_errors,
    )
