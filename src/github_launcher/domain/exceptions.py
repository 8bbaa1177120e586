"""Domain exception hierarchy.

Adapters raise the GitHub-specific errors; the process-query use case wraps
every failure in :class:`SearchFailedError` with the underlying error chained
as ``__cause__``.  The presenter inspects that cause to pick the message
shown to the user.
"""

from __future__ import annotations


class GitHubLauncherError(Exception):
    """Base exception for the entire application."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class GitHubApiError(GitHubLauncherError):
    """Non-success response or transport failure talking to GitHub."""


class RepositoryNotFoundError(GitHubApiError):
    """The requested repository, issue or user does not exist (404)."""


class GitHubRateLimitError(GitHubApiError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


# ── Search errors ───────────────────────────────────────────────────────────


class SearchFailedError(GitHubLauncherError):
    """A remote search did not complete; the reason is chained as ``__cause__``."""
