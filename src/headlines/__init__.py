"""
Headlines System Test

White-box system test for the NewsAPI.org top-headlines endpoint.
"""

from .client import (
    # Fetch routine
    fetch_headlines,
    TOP_HEADLINES_URL,

    # Errors
    HeadlinesError,
    APIConnectionError,
    InvalidResponseError,
)
from .validators import (
    validate_article_structure,
    MissingFieldError,
    REQUIRED_ARTICLE_FIELDS,
)
from .config import HeadlinesConfig
from .scenarios import ScenarioResult, run_tests

__all__ = [
    # Fetch routine
    'fetch_headlines',
    'TOP_HEADLINES_URL',

    # Errors
    'HeadlinesError',
    'APIConnectionError',
    'InvalidResponseError',
    'MissingFieldError',

    # Validation
    'validate_article_structure',
    'REQUIRED_ARTICLE_FIELDS',

    # Runner
    'HeadlinesConfig',
    'ScenarioResult',
    'run_tests',
]

__version__ = '1.0.0'
