"""MinerU Client - async Python client for the MinerU document parsing API.

Submits PDFs and images to a MinerU server's /file_parse endpoint and
exposes the markdown, JSON or ZIP archive it returns.

Components:
    - models: Request options, builder and response schemas
    - protocol: Multipart encoding, error classification, result handle
    - client: Submission orchestration over httpx
    - config: Environment-driven client settings
    - errors: Exception hierarchy
"""

from mineru_client.client import MineruClient, get_mineru_client
from mineru_client.config import ClientConfig, get_client_config
from mineru_client.errors import (
    ClientClosedError,
    InvalidRequestError,
    MineruApiError,
    MineruError,
    RequestTimeoutError,
    ResponseFormatError,
    ResultReleasedError,
    ServiceUnavailableError,
    StreamConsumedError,
    ZipResponseError,
)
from mineru_client.models import (
    FileResult,
    ParseRequest,
    ParseRequestBuilder,
    ParseResponseBody,
    ValidationErrorDetail,
)
from mineru_client.protocol import ParseResult

__version__ = "0.1.0"

__all__ = [
    "ClientClosedError",
    "ClientConfig",
    "FileResult",
    "InvalidRequestError",
    "MineruApiError",
    "MineruClient",
    "MineruError",
    "ParseRequest",
    "ParseRequestBuilder",
    "ParseResponseBody",
    "ParseResult",
    "RequestTimeoutError",
    "ResponseFormatError",
    "ResultReleasedError",
    "ServiceUnavailableError",
    "StreamConsumedError",
    "ValidationErrorDetail",
    "ZipResponseError",
    "get_client_config",
    "get_mineru_client",
]
