"""Configuration for the headlines system test.

Values come from environment variables (optionally loaded from a .env file
by the entry point). The API key is never hardcoded.
"""

import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "us"
DEFAULT_CATEGORY = "sport"
DEFAULT_TIMEOUT = 15
DEFAULT_USER_AGENT = "SystemTestApp/1.0"
DEFAULT_INVALID_KEY = "INVALID_KEY"
DEFAULT_LATENCY_THRESHOLD = 2.0


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number (got {raw!r})") from None


class HeadlinesConfig:
    """Configuration holder for the system test run."""

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv('NEWSAPI_KEY')
        if not self.api_key:
            raise ValueError("NEWSAPI_KEY environment variable is required")

        self.invalid_api_key = os.getenv('NEWSAPI_INVALID_KEY') or DEFAULT_INVALID_KEY
        self.country = DEFAULT_COUNTRY
        self.category = os.getenv('NEWSAPI_CATEGORY') or DEFAULT_CATEGORY
        self.user_agent = os.getenv('NEWSAPI_USER_AGENT') or DEFAULT_USER_AGENT
        self.timeout = _float_env('NEWSAPI_TIMEOUT', DEFAULT_TIMEOUT)
        self.latency_threshold = _float_env('LATENCY_THRESHOLD', DEFAULT_LATENCY_THRESHOLD)

        logger.info("System test configured with:")
        logger.info(f"  - Country: {self.country}")
        logger.info(f"  - Category: {self.category}")
        logger.info(f"  - Timeout: {self.timeout}s")
        logger.info(f"  - Latency threshold: {self.latency_threshold}s")

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return (
            f"HeadlinesConfig(country={self.country!r}, category={self.category!r}, "
            f"timeout={self.timeout!r}, latency_threshold={self.latency_threshold!r})"
        )
