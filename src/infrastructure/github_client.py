"""GitHub REST API client for the repository search endpoint."""

import logging
import math
import time
from typing import Optional

import requests
import urllib3

from src.domain.errors import (
    RequestConstructionError,
    ResponseReadError,
    TransportError,
    UnexpectedStatusError,
)
from src.domain.search_params import SearchParams

logger = logging.getLogger(__name__)

API_URL = "https://api.github.com/search/repositories"
DEFAULT_USER_AGENT = "github-repo-search"
DEFAULT_TIMEOUT_SECONDS = 10.0
READ_CHUNK_SIZE = 64 * 1024


def build_search_url(query: str, sort_by: str, order: str, base_url: str = API_URL) -> str:
    """
    Build the search URL with percent-encoded query parameters.

    Sort key and order are passed through as given; the API rejects invalid values.

    Args:
        query: Search expression (e.g., "language:go")
        sort_by: Field the API sorts by (e.g., "stars")
        order: Sort direction, "asc" or "desc"
        base_url: Search endpoint

    Returns:
        Fully-formed URL

    Raises:
        RequestConstructionError: If the base URL is malformed or the parameters cannot be encoded
    """
    params = {"q": query, "sort": sort_by, "order": order}
    try:
        url = requests.Request("GET", base_url, params=params).prepare().url
    except (requests.exceptions.RequestException, ValueError) as e:
        raise RequestConstructionError(f"failed to build request URL: {e}", cause=e) from e

    logger.debug(f"Built search URL: {url}")
    return url


class GitHubSearchClient:
    """Client for the GitHub repository search API. One request, no retries."""

    # GitHub rejects requests without these headers with a 4xx
    ACCEPT = "application/vnd.github.v3+json"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = API_URL,
    ):
        """
        Initialize GitHub search client.

        Args:
            timeout: Seconds to wait for the API before giving up
            user_agent: Value of the User-Agent header, must not be empty
            base_url: Search endpoint
        """
        if not user_agent:
            raise ValueError("user_agent must not be empty")
        if not (math.isfinite(timeout) and timeout > 0):
            raise ValueError(f"timeout must be a positive number of seconds, got {timeout}")

        self.timeout = timeout
        self.base_url = base_url
        self.headers = {
            "Accept": self.ACCEPT,
            "User-Agent": user_agent,
        }

    def fetch(self, url: str) -> bytes:
        """
        Issue a GET request and return the raw response body.

        The whole call, body included, is bounded by the client timeout.
        The response is released before returning, whatever the outcome.

        Args:
            url: URL built by build_search_url

        Returns:
            Response body bytes

        Raises:
            TransportError: On network failure or timeout
            UnexpectedStatusError: If the status is not 200; the body is not read
            ResponseReadError: If the body cannot be read after a 200
        """
        deadline = time.monotonic() + self.timeout
        try:
            with requests.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                stream=True,
            ) as response:
                if response.status_code != 200:
                    raise UnexpectedStatusError(response.status_code, response.reason or "")

                body = self._read_body(response, deadline)
                logger.debug(f"Received {len(body)} bytes (status {response.status_code})")
                return body

        except requests.exceptions.RequestException as e:
            raise TransportError(f"failed to execute request: {e}", cause=e) from e

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """
        Read the streamed body, chunk by chunk, until EOF or the deadline.

        read1 returns whatever has arrived, so a server trickling bytes
        cannot hold the call past the deadline.
        """
        chunks = []
        while True:
            if time.monotonic() > deadline:
                raise TransportError(
                    f"failed to execute request: timed out after {self.timeout}s reading response body"
                )
            try:
                chunk = response.raw.read1(READ_CHUNK_SIZE, decode_content=True)
            except urllib3.exceptions.ReadTimeoutError as e:
                raise TransportError(f"failed to execute request: {e}", cause=e) from e
            except (urllib3.exceptions.HTTPError, OSError) as e:
                raise ResponseReadError(f"failed to read response body: {e}", cause=e) from e

            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def search_repositories(self, params: Optional[SearchParams] = None) -> bytes:
        """
        Fetch the first page of repositories matching the search parameters.

        Args:
            params: Query, sort key and order. Defaults to SearchParams().

        Returns:
            Raw response body bytes
        """
        if params is None:
            params = SearchParams()

        url = build_search_url(params.query, params.sort_by, params.order, base_url=self.base_url)
        logger.info(f"Querying GitHub API: {url}")
        return self.fetch(url)
