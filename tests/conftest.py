"""
Shared test fixtures and configuration.
"""

import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from unittest.mock import MagicMock

from headlines.config import HeadlinesConfig

_ENV_VARS = (
    'NEWSAPI_KEY',
    'NEWSAPI_INVALID_KEY',
    'NEWSAPI_COUNTRY',
    'NEWSAPI_CATEGORY',
    'NEWSAPI_TIMEOUT',
    'NEWSAPI_USER_AGENT',
    'LATENCY_THRESHOLD',
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's real .env values out of the tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setenv('NEWSAPI_KEY', 'test-valid-key')
    return HeadlinesConfig()


@pytest.fixture
def sample_article():
    return {
        "source": {"id": "espn", "name": "ESPN"},
        "author": "Staff",
        "title": "Local team wins the final",
        "description": "A late goal settled the match.",
        "url": "https://example.com/sport/final",
        "urlToImage": None,
        "publishedAt": "2025-10-22T08:00:00Z",
        "content": None,
    }


@pytest.fixture
def ok_payload(sample_article):
    return {"status": "ok", "totalResults": 1, "articles": [sample_article]}


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""
    def _make(json_data=None, status_code=200, text="", json_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return _make
