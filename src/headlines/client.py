"""
NewsAPI top-headlines client.

One synchronous HTTPS GET per call against the top-headlines endpoint.
No session reuse and no retries: every call opens and releases its own
connection.
"""

import json
import logging
from typing import Any, Dict

import requests

from headlines.config import DEFAULT_COUNTRY, DEFAULT_CATEGORY, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

TOP_HEADLINES_URL = "https://newsapi.org/v2/top-headlines"


class HeadlinesError(Exception):
    """Base class for headlines system test errors."""
    pass


class APIConnectionError(HeadlinesError, ConnectionError):
    """Raised when the endpoint cannot be reached (DNS, TLS, timeout, refused)."""
    pass


class InvalidResponseError(HeadlinesError):
    """Raised when the body is not JSON or its status is not "ok".

    ``payload`` holds the decoded body, or the raw text when decoding failed.
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


def _describe(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, default=str)


def fetch_headlines(
    country: str,
    api_key: str,
    category: str = DEFAULT_CATEGORY,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Dict[str, Any]:
    """
    Fetch top headlines.

    The request always asks for DEFAULT_COUNTRY ("us"); the country argument
    is accepted but not sent.

    Args:
        country: Two-letter country code (ignored)
        api_key: NewsAPI key
        category: Category filter
        timeout: Request timeout in seconds
        user_agent: User-Agent header (NewsAPI rejects requests without one)

    Returns:
        The decoded payload, unchanged, when its status is "ok"

    Raises:
        APIConnectionError: transport-level failure
        InvalidResponseError: non-JSON body or status other than "ok"
    """
    params = {
        'country': DEFAULT_COUNTRY,
        'category': category,
        'apiKey': api_key,
    }
    headers = {
        'User-Agent': user_agent,
        'Accept': 'application/json',
    }

    logger.info(f"Requesting top headlines (country={DEFAULT_COUNTRY}, category={category})")

    try:
        response = requests.get(
            TOP_HEADLINES_URL,
            params=params,
            headers=headers,
            timeout=timeout,
            verify=True,
        )
    except requests.RequestException as e:
        logger.error(f"Connection to NewsAPI failed: {e}")
        raise APIConnectionError(f"Connection to NewsAPI endpoint failed: {e}") from e

    try:
        try:
            data = response.json()
        except ValueError:
            body = response.text
            logger.warning(f"NewsAPI returned a non-JSON body (HTTP {response.status_code})")
            raise InvalidResponseError(f"Invalid API response: {_describe(body)}", payload=body)
    finally:
        response.close()

    if not isinstance(data, dict) or data.get('status') != 'ok':
        logger.warning(f"NewsAPI returned an error payload (HTTP {response.status_code})")
        raise InvalidResponseError(f"Invalid API response: {_describe(data)}", payload=data)

    articles = data.get('articles')
    count = len(articles) if isinstance(articles, list) else 0
    logger.info(f"Received {count} articles")
    return data
