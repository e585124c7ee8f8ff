"""
Main entry point for the headlines system test.

Loads configuration from the environment (and .env), then runs the five
white-box scenarios against the NewsAPI top-headlines endpoint. Scenario
failures are reported as FAIL lines; the process exits normally whatever
their outcome. Only a configuration error stops the run.
"""

import sys
import logging

from dotenv import load_dotenv

from headlines.config import HeadlinesConfig
from headlines.scenarios import run_tests

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """
    Entry point.

    Environment Variables:
    - NEWSAPI_KEY (required): NewsAPI key used by the valid-key scenarios
    - NEWSAPI_INVALID_KEY (optional): Key for the invalid-key scenario (default: INVALID_KEY)
    - NEWSAPI_CATEGORY (optional): Category filter (default: sport)
    - NEWSAPI_TIMEOUT (optional): Request timeout in seconds (default: 15)
    - NEWSAPI_USER_AGENT (optional): User-Agent header (default: SystemTestApp/1.0)
    - LATENCY_THRESHOLD (optional): Response time limit in seconds (default: 2.0)
    """
    load_dotenv()

    try:
        config = HeadlinesConfig()
    except ValueError as e:
        logger.error(f"❌ {e}")
        logger.error("Set it in .env file or export NEWSAPI_KEY=...")
        sys.exit(1)

    run_tests(config)


if __name__ == "__main__":
    main()
