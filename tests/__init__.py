"""Test package for MinerU Client.

Provides coverage for all components with unit tests for isolated logic
and integration tests for full submissions.

Structure:
    - unit/: Individual function and class tests
    - integration/: End-to-end submissions against a fake MinerU app
    - fake_service.py: FastAPI stand-in for the MinerU server

Unit tests stub the network with httpx.MockTransport; integration tests
drive a real FastAPI app through httpx.ASGITransport.
Leverages pytest with pytest-check for soft assertions.
"""
