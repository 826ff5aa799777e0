"""Domain entities for GitHub repository search results."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from src.domain.errors import DecodeError


def _str_field(data: Dict[str, Any], key: str) -> str:
    """Return a string field, "" when missing or null."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"expected '{key}' to be a string, got {type(value).__name__}")
    return value


def _count_field(data: Dict[str, Any], key: str) -> int:
    """Return a non-negative integer field, 0 when missing or null."""
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"expected '{key}' to be an integer, got {type(value).__name__}")
    if value < 0:
        raise DecodeError(f"expected '{key}' to be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class Repository:
    """Immutable repository entity."""

    name: str
    full_name: str
    url: str
    description: str
    stars: int
    forks: int

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Repository":
        """Build a repository from one entry of the search ``items`` array."""
        return cls(
            name=_str_field(item, "name"),
            full_name=_str_field(item, "full_name"),
            url=_str_field(item, "html_url"),
            # description is null for repos without one
            description=_str_field(item, "description"),
            stars=_count_field(item, "stargazers_count"),
            forks=_count_field(item, "forks_count"),
        )


@dataclass(frozen=True)
class SearchResult:
    """One page of search results, in the order the API returned them."""

    total_count: int
    items: Tuple[Repository, ...]

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "SearchResult":
        items = payload.get("items")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise DecodeError(f"expected 'items' to be a list, got {type(items).__name__}")

        repositories = []
        for item in items:
            if not isinstance(item, dict):
                raise DecodeError(f"expected repository object, got {type(item).__name__}")
            repositories.append(Repository.from_api(item))

        return cls(
            total_count=_count_field(payload, "total_count"),
            items=tuple(repositories),
        )


def parse_search_result(body: bytes) -> SearchResult:
    """
    Decode a raw search response body.

    Args:
        body: Response body as returned by the search endpoint

    Returns:
        Decoded search result

    Raises:
        DecodeError: If the body is not valid JSON or not shaped like a search result
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"failed to decode JSON response: {e}", cause=e) from e

    if not isinstance(payload, dict):
        raise DecodeError(f"expected JSON object, got {type(payload).__name__}")

    return SearchResult.from_api(payload)
