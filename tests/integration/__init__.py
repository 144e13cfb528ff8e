"""Integration tests for end-to-end submissions.

Drives MineruClient against the fake MinerU FastAPI app over
httpx.ASGITransport, and runs the command-line entry point.
"""
