"""Request/response protocol layer for the MinerU API.

Responsibilities:
    - Multipart encoding of ParseRequest options in a fixed part order
    - Classification of unsuccessful responses into structured errors
    - Lazy, cached interpretation of successful responses

Kept free of client lifecycle concerns; MineruClient composes these pieces.
"""

from mineru_client.protocol.classifier import build_api_error, classify_status
from mineru_client.protocol.encoding import EncodedTransmission, MultipartPart, encode_request
from mineru_client.protocol.result import ParseResult

__all__ = [
    "EncodedTransmission",
    "MultipartPart",
    "ParseResult",
    "build_api_error",
    "classify_status",
    "encode_request",
]
