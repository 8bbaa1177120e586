"""Port: GitHub search — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from github_launcher.domain.entities import ApiSearchResult
from github_launcher.domain.value_objects import SearchIntent


class GitHubSearch(Protocol):
    """Abstract contract for running a classified search against GitHub."""

    async def search(self, intent: SearchIntent) -> ApiSearchResult:
        """Run the lookup described by *intent* and return its result."""
        ...
