"""Process-query use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`GitHubSearch` port and the pure classifier / presenter modules;
the interface layer injects the concrete adapter at runtime.

A search failure never escapes :meth:`ProcessQueryUseCase.execute`: it is
wrapped in :class:`SearchFailedError`, logged, and rendered as an error item.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Sequence

from github_launcher.domain.entities import GLOBAL_ACTION_KEYWORD, PresentableItem
from github_launcher.domain.exceptions import SearchFailedError
from github_launcher.domain.ports.github_search import GitHubSearch
from github_launcher.domain.value_objects import DefaultSuggestion, SearchRepos
from github_launcher.services.query_classifier import classify
from github_launcher.services.result_presenter import (
    present,
    present_error,
    present_suggestion,
)

logger = logging.getLogger(__name__)


def split_terms(raw_query: str, action_keyword: str) -> list[str]:
    """Split launcher input on whitespace and drop the leading action keyword.

    Under the global keyword ``*`` the launcher passes the query without a
    keyword, so every term is kept.
    """
    terms = raw_query.split()
    if action_keyword == GLOBAL_ACTION_KEYWORD:
        return terms
    return terms[1:]


class ProcessQueryUseCase:
    """Classifies tokens, runs the search and renders launcher items.

    Parameters
    ----------
    searcher:
        Adapter that runs a search intent against GitHub (usually cached).
    action_keyword:
        Keyword the launcher registers this plugin under; shown in help text.
    clock:
        Source of "now" for relative timestamps.
    """

    def __init__(
        self,
        searcher: GitHubSearch,
        action_keyword: str = "gh",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._searcher = searcher
        self._action_keyword = action_keyword
        self._clock = clock

    async def execute(self, tokens: Sequence[str]) -> list[PresentableItem]:
        """Return the launcher items for *tokens* (action keyword already stripped)."""
        classification = classify(tokens)
        if isinstance(classification, (SearchRepos, DefaultSuggestion)):
            return present_suggestion(classification, action_keyword=self._action_keyword)

        logger.info("Searching GitHub for %r", classification)
        try:
            result = await self._searcher.search(classification)
        except Exception as exc:
            failure = _as_search_failure(exc)
            logger.warning("Search for %r failed: %s", classification, failure)
            return present_error(failure)

        now = self._clock() if self._clock else None
        return present(result, now=now)


def _as_search_failure(exc: Exception) -> SearchFailedError:
    if isinstance(exc, SearchFailedError):
        return exc
    failure = SearchFailedError(str(exc) or type(exc).__name__)
    failure.__cause__ = exc
    return failure
