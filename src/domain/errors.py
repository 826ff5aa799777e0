"""Errors raised while searching GitHub repositories."""

from typing import Optional


class SearchError(Exception):
    """Base class for every failure of a repository search."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RequestConstructionError(SearchError):
    """Raised when the search URL cannot be built."""
    pass


class TransportError(SearchError):
    """Raised on network failures, including timeouts."""
    pass


class UnexpectedStatusError(SearchError):
    """Raised when the API answers with a status other than 200 OK."""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"GitHub API returned non-OK status: {status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


class ResponseReadError(SearchError):
    """Raised when the response body cannot be read after a 200 OK."""
    pass


class DecodeError(SearchError):
    """Raised when the response body is not a valid search result."""
    pass
