"""Memoizing search layer keyed by intent value.

Concurrent callers asking for the same intent share one in-flight lookup,
and successful results are reused for ``ttl_seconds``.  Expired entries are
swept on every lookup, so one-off queries do not accumulate.  Failures are
never cached and propagate to every waiting caller unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

from github_launcher.domain.entities import ApiSearchResult
from github_launcher.domain.ports.github_search import GitHubSearch
from github_launcher.domain.value_objects import SearchIntent

logger = logging.getLogger(__name__)


class CachedGitHubSearch:
    """GitHubSearch decorator that memoizes results by intent."""

    def __init__(
        self,
        inner: GitHubSearch,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._inner = inner
        self._ttl = ttl_seconds
        self._clock = clock
        self._results: dict[SearchIntent, tuple[float, ApiSearchResult]] = {}
        self._pending: dict[SearchIntent, asyncio.Task[ApiSearchResult]] = {}

    async def search(self, intent: SearchIntent) -> ApiSearchResult:
        """Return the (possibly cached) result for *intent*."""
        self._evict_expired()
        cached = self._results.get(intent)
        if cached is not None:
            logger.debug("Cache hit for %r", intent)
            return cached[1]

        task = self._pending.get(intent)
        if task is None:
            task = asyncio.ensure_future(self._inner.search(intent))
            self._pending[intent] = task
            task.add_done_callback(lambda done: self._settle(intent, done))

        # Shielded so a cancelled caller leaves the shared lookup running.
        return await asyncio.shield(task)

    def __len__(self) -> int:
        return len(self._results)

    def clear(self) -> None:
        """Drop every cached result."""
        self._results.clear()

    def _evict_expired(self) -> None:
        now = self._clock()
        expired = [
            intent
            for intent, (stored_at, _) in self._results.items()
            if now - stored_at >= self._ttl
        ]
        for intent in expired:
            del self._results[intent]
        if expired:
            logger.debug("Evicted %d expired search result(s)", len(expired))

    def _settle(self, intent: SearchIntent, task: asyncio.Task[ApiSearchResult]) -> None:
        if self._pending.get(intent) is task:
            del self._pending[intent]
        if task.cancelled() or task.exception() is not None:
            return
        self._results[intent] = (self._clock(), task.result())
