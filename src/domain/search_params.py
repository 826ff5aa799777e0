"""Search parameters sent to the repository search endpoint."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchParams:
    """Query, sort key and order of a repository search."""

    query: str = "language:go"
    sort_by: str = "stars"
    order: str = "desc"

    @classmethod
    def from_env(cls) -> "SearchParams":
        """Read SEARCH_QUERY, SEARCH_SORT and SEARCH_ORDER, falling back to the defaults."""
        defaults = cls()
        return cls(
            query=os.getenv("SEARCH_QUERY", defaults.query),
            sort_by=os.getenv("SEARCH_SORT", defaults.sort_by),
            order=os.getenv("SEARCH_ORDER", defaults.order),
        )
