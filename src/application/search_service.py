"""Application service for searching GitHub repositories and printing the results."""

import logging
import sys
from typing import Optional, TextIO

from src.domain.repository import SearchResult, parse_search_result
from src.domain.search_params import SearchParams
from src.infrastructure.github_client import GitHubSearchClient

logger = logging.getLogger(__name__)

MAX_RESULTS = 10
SEPARATOR = "-" * 57


class SearchService:
    """Service that runs one repository search and decodes the response."""

    def __init__(self, github_client: GitHubSearchClient):
        """
        Initialize search service.

        Args:
            github_client: GitHub API client
        """
        self.github_client = github_client

    def search(self, params: Optional[SearchParams] = None) -> SearchResult:
        """
        Search repositories and decode the first page of results.

        Errors from the client and the decoder propagate unchanged.

        Args:
            params: Query, sort key and order

        Returns:
            Decoded search result
        """
        if params is None:
            params = SearchParams()

        body = self.github_client.search_repositories(params)
        result = parse_search_result(body)
        logger.info(
            f"Search returned {len(result.items)} repositories "
            f"({result.total_count} matches in total)"
        )
        return result


def print_results(result: SearchResult, out: Optional[TextIO] = None) -> int:
    """
    Print the total count followed by the top repositories.

    Args:
        result: Decoded search result
        out: Stream to write to. Defaults to sys.stdout.

    Returns:
        Number of entries printed
    """
    if out is None:
        out = sys.stdout

    print(f"Found {result.total_count} repositories. Showing the top {MAX_RESULTS}:", file=out)
    print(SEPARATOR, file=out)

    top = result.items[:MAX_RESULTS]
    for rank, repo in enumerate(top, start=1):
        print(f"#{rank}: {repo.full_name}", file=out)
        print(f"   ⭐ Stars: {repo.stars}", file=out)
        print(f"   🍴 Forks: {repo.forks}", file=out)
        print(f"   🔗 URL:   {repo.url}", file=out)
        print(f"   {repo.description}", file=out)
        print(file=out)

    return len(top)
