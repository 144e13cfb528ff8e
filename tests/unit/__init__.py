"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - models/: Request validation, builder defaults, response schemas
    - protocol/: Multipart encoding, error classification, result views
    - client: Submission, transport error mapping, cancellation
    - config: Environment loading and URL normalization

Network access is replaced by httpx.MockTransport. Leverages pytest-check
for multiple assertions per test.
"""
