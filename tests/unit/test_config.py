"""Unit tests for ClientConfig."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from mineru_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig, get_client_config


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts explicit values."""
        config = ClientConfig(base_url="http://mineru:8000", timeout=30.0)

        assert config.base_url == "http://mineru:8000"
        assert config.timeout == 30.0

    def test_config_strips_trailing_slashes(self) -> None:
        """Trailing slashes and whitespace are removed once."""
        config = ClientConfig(base_url="  http://mineru:8000//  ")

        assert config.base_url == "http://mineru:8000"

    def test_config_fails_with_blank_base_url(self) -> None:
        """Whitespace-only base URL is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(base_url="   ")

        assert "Base URL cannot be empty" in str(exc_info.value)

    def test_config_fails_with_non_positive_timeout(self) -> None:
        """Timeout must be positive."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(base_url="http://mineru:8000", timeout=0)

        assert "timeout" in str(exc_info.value).lower()


class TestGetClientConfig:
    """Tests for get_client_config factory function."""

    def test_get_config_from_environment(self) -> None:
        """Environment variables feed the defaults."""
        env = {"MINERU_BASE_URL": "http://gpu-box:9000/", "MINERU_TIMEOUT": "45"}
        with patch.dict("os.environ", env):
            config = get_client_config()

        assert config.base_url == "http://gpu-box:9000"
        assert config.timeout == 45.0

    def test_get_config_defaults_without_environment(self) -> None:
        """Without MINERU_* variables the local defaults apply."""
        with patch.dict("os.environ", {}, clear=True):
            config = get_client_config()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_get_config_rejects_non_numeric_timeout(self) -> None:
        """A non-numeric MINERU_TIMEOUT fails validation on the timeout field."""
        env = {"MINERU_BASE_URL": "http://mineru:8000", "MINERU_TIMEOUT": "abc"}
        with patch.dict("os.environ", env), pytest.raises(ValidationError) as exc_info:
            get_client_config()

        assert exc_info.value.errors()[0]["loc"] == ("timeout",)
        assert "MINERU_TIMEOUT" in str(exc_info.value)

    def test_get_config_rejects_non_positive_timeout_from_environment(self) -> None:
        """MINERU_TIMEOUT must be greater than zero."""
        env = {"MINERU_BASE_URL": "http://mineru:8000", "MINERU_TIMEOUT": "0"}
        with patch.dict("os.environ", env), pytest.raises(ValidationError):
            get_client_config()

    def test_get_config_rejects_blank_base_url_from_environment(self) -> None:
        """A blank MINERU_BASE_URL is validated like an explicit value."""
        with patch.dict("os.environ", {"MINERU_BASE_URL": "   "}), pytest.raises(ValidationError):
            get_client_config()
