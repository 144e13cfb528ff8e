"""Client configuration with environment variable loading.

Pydantic-based configuration for the MinerU client. Values default to
MINERU_* environment variables, optionally read from a .env file.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 600.0


class ClientConfig(BaseModel):
    """Configuration for the MinerU API client.

    Attributes:
        base_url: Root URL of the MinerU service, without trailing slash.
        timeout: Transport timeout in seconds. Parsing large documents is
            slow, so the default is generous.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("MINERU_BASE_URL", DEFAULT_BASE_URL),
        validate_default=True,
        description="Base URL of the MinerU API",
    )
    timeout: float = Field(
        default_factory=lambda: os.getenv("MINERU_TIMEOUT", DEFAULT_TIMEOUT),
        validate_default=True,
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Require a base URL and strip surrounding whitespace and trailing slashes."""
        if not v or not v.strip():
            raise ValueError("Base URL cannot be empty. Set MINERU_BASE_URL in .env")
        return v.strip().rstrip("/")

    @field_validator("timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: object) -> object:
        """Parse a timeout given as text, such as MINERU_TIMEOUT."""
        if not isinstance(v, str):
            return v
        try:
            return float(v.strip())
        except ValueError:
            raise ValueError(
                f"Timeout must be a number of seconds, got {v!r}. Check MINERU_TIMEOUT in .env"
            ) from None


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If MINERU_BASE_URL is blank or MINERU_TIMEOUT is not
            a positive number.
    """
    return ClientConfig()
