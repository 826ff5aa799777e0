#!/usr/bin/env python3
"""Script to search GitHub repositories and print the top results."""

import logging
import math
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from src.domain.errors import SearchError
from src.domain.search_params import SearchParams
from src.infrastructure.github_client import DEFAULT_TIMEOUT_SECONDS, GitHubSearchClient
from src.application.search_service import SearchService, print_results

logger = logging.getLogger(__name__)


def _timeout_from_env() -> float:
    """Read GITHUB_API_TIMEOUT in seconds; must be a positive, finite number."""
    timeout = float(os.getenv("GITHUB_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
    if not (math.isfinite(timeout) and timeout > 0):
        raise ValueError(f"GITHUB_API_TIMEOUT must be a positive number of seconds, got {timeout}")
    return timeout


def main():
    """Search GitHub repositories and print the top 10."""
    try:
        params = SearchParams.from_env()
        github_client = GitHubSearchClient(timeout=_timeout_from_env())
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print(
        f"Searching GitHub repositories...\n"
        f"Query: '{params.query}', Sort By: '{params.sort_by}', Order: '{params.order}'\n"
    )

    try:
        service = SearchService(github_client)
        result = service.search(params)
    except SearchError as e:
        logger.error(f"Search failed: {e}")
        return 1

    print_results(result)
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())
