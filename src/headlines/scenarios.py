"""
White-box system test scenarios for the NewsAPI top-headlines endpoint.

Five independent checks, run in order:
1. Connection with a valid API key
2. Error handling for an invalid API key
3. Structure of the first returned article
4. Response time under the latency threshold
5. Non-empty article list

Each scenario wraps its own calls in a try/except, so one failing check
never stops the others. Every scenario returns a ScenarioResult and
re-invokes the fetch routine on its own.
"""

import time
import logging
from typing import Callable, List

from headlines.client import fetch_headlines, APIConnectionError, InvalidResponseError
from headlines.config import HeadlinesConfig
from headlines.validators import validate_article_structure

logger = logging.getLogger(__name__)

HEADER = "===== WHITE BOX TESTING - SYSTEM TEST (NewsAPI) ====="
FOOTER = "===== TESTING COMPLETE ====="


class ScenarioResult:
    """Outcome of a single scenario, rendered as one labeled status line."""

    def __init__(self, code: str, name: str, passed: bool, detail: str = ""):
        self.code = code
        self.name = name
        self.passed = passed
        self.detail = detail

    def format_line(self) -> str:
        status = "PASS ✅" if self.passed else "FAIL ❌"
        line = f"[{self.code}] {self.name}: {status}"
        if self.detail:
            line += f" {self.detail}"
        return line

    def __repr__(self) -> str:
        return f"ScenarioResult({self.code!r}, passed={self.passed!r})"


def _fetch(config: HeadlinesConfig, api_key: str, fetch: Callable) -> dict:
    return fetch(
        config.country,
        api_key,
        category=config.category,
        timeout=config.timeout,
        user_agent=config.user_agent,
    )


def check_connection(config: HeadlinesConfig, fetch: Callable = fetch_headlines) -> ScenarioResult:
    """WBT_API_001: the endpoint answers "ok" for a valid key."""
    code, name = "WBT_API_001", "Connection Test"
    try:
        _fetch(config, config.api_key, fetch)
        return ScenarioResult(code, name, True, "(Connected successfully with a valid API key)")
    except Exception as e:
        return ScenarioResult(code, name, False, f"- {e}")


def check_invalid_key(config: HeadlinesConfig, fetch: Callable = fetch_headlines) -> ScenarioResult:
    """WBT_API_002: an invalid key must surface as an error.

    Inverted: a successful fetch here is a test failure.
    """
    code, name = "WBT_API_002", "Invalid Key Handling"
    try:
        _fetch(config, config.invalid_api_key, fetch)
    except (APIConnectionError, InvalidResponseError) as e:
        logger.info(f"Invalid key rejected as expected: {type(e).__name__}")
        return ScenarioResult(code, name, True, "- Error caught successfully")
    except Exception as e:
        return ScenarioResult(code, name, False, f"- Unexpected error: {e}")
    return ScenarioResult(code, name, False, "(The invalid key should have raised an error)")


def check_article_structure(config: HeadlinesConfig, fetch: Callable = fetch_headlines) -> ScenarioResult:
    """WBT_API_003: the first article carries title, description and url."""
    code, name = "WBT_API_003", "JSON Structure Validation"
    try:
        data = _fetch(config, config.api_key, fetch)
        articles = data.get('articles') or []
        first_article = articles[0] if articles else {}
        validate_article_structure(first_article)
        return ScenarioResult(code, name, True, "(Article structure is complete)")
    except Exception as e:
        return ScenarioResult(code, name, False, f"- {e}")


def check_response_time(
    config: HeadlinesConfig,
    fetch: Callable = fetch_headlines,
    timer: Callable[[], float] = time.perf_counter,
) -> ScenarioResult:
    """WBT_API_004: one fetch completes under the latency threshold."""
    code, name = "WBT_API_004", "Response Time Test"
    try:
        start = timer()
        _fetch(config, config.api_key, fetch)
        duration = timer() - start
    except Exception as e:
        return ScenarioResult(code, name, False, f"- {e}")

    if duration < config.latency_threshold:
        return ScenarioResult(code, name, True, f"({duration:.3f}s)")
    return ScenarioResult(code, name, False, f"(Took {duration:.3f}s, limit {config.latency_threshold}s)")


def check_article_count(config: HeadlinesConfig, fetch: Callable = fetch_headlines) -> ScenarioResult:
    """WBT_API_005: the endpoint returns at least one article."""
    code, name = "WBT_API_005", "Article Count Test"
    try:
        data = _fetch(config, config.api_key, fetch)
    except Exception as e:
        return ScenarioResult(code, name, False, f"- {e}")

    articles = data.get('articles')
    if isinstance(articles, list) and articles:
        return ScenarioResult(code, name, True, f"({len(articles)} articles found)")
    return ScenarioResult(code, name, False, "(No articles returned)")


def run_tests(
    config: HeadlinesConfig,
    fetch: Callable = fetch_headlines,
    timer: Callable[[], float] = time.perf_counter,
    out: Callable[[str], None] = print,
) -> List[ScenarioResult]:
    """
    Run every scenario in order and print one status line per scenario.

    Args:
        config: Run configuration (credentials, country, thresholds)
        fetch: Fetch routine, replaceable in tests
        timer: Clock for the response time scenario
        out: Line writer (default: print)

    Returns:
        List of ScenarioResult, in scenario order
    """
    out(HEADER)
    out("")

    results = []
    scenarios = [
        lambda: check_connection(config, fetch=fetch),
        lambda: check_invalid_key(config, fetch=fetch),
        lambda: check_article_structure(config, fetch=fetch),
        lambda: check_response_time(config, fetch=fetch, timer=timer),
        lambda: check_article_count(config, fetch=fetch),
    ]
    for scenario in scenarios:
        result = scenario()
        if not result.passed:
            logger.warning(f"{result.code} failed: {result.detail}")
        out(result.format_line())
        results.append(result)

    passed = sum(1 for r in results if r.passed)
    out("")
    out(f"{passed}/{len(results)} passed")
    out(FOOTER)
    return results
