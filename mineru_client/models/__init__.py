"""Pydantic models for MinerU requests and responses.

Models:
    - ParseRequest: Immutable options for a /file_parse submission
    - ParseRequestBuilder: Fluent builder over ParseRequest
    - ParseResponseBody: JSON body of a successful parse
    - FileResult: Per-file outputs inside a response body
    - ValidationErrorDetail: One entry of a 422 error detail list
"""

from mineru_client.models.response import FileResult, ParseResponseBody, ValidationErrorDetail
from mineru_client.models.request import FileInput, ParseRequest, ParseRequestBuilder

__all__ = [
    "FileInput",
    "FileResult",
    "ParseRequest",
    "ParseRequestBuilder",
    "ParseResponseBody",
    "ValidationErrorDetail",
]
