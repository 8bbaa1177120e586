"""FastAPI dependency injection wiring."""

from __future__ import annotations

from functools import lru_cache

import httpx

from github_launcher.infrastructure.config import Settings, get_settings
from github_launcher.infrastructure.github_rest_adapter import GitHubRestAdapter
from github_launcher.services.cached_search import CachedGitHubSearch
from github_launcher.services.process_query import ProcessQueryUseCase

_http_client: httpx.AsyncClient | None = None
_search: CachedGitHubSearch | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _search  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds)
    )
    token = settings.github_token.get_secret_value() if settings.github_token else None
    adapter = GitHubRestAdapter(
        client=_http_client,
        token=token,
        base_url=settings.github_api_url,
        per_page=settings.results_per_page,
    )
    # One cache for the process lifetime so repeated queries skip the API.
    _search = CachedGitHubSearch(adapter, ttl_seconds=settings.cache_ttl_seconds)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _search  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _search = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_action_keyword() -> str:
    return _settings().action_keyword


def get_use_case() -> ProcessQueryUseCase:
    """Build the use case around the shared cached search."""
    assert _search is not None, "startup() was not called"

    return ProcessQueryUseCase(
        searcher=_search,
        action_keyword=_settings().action_keyword,
    )
