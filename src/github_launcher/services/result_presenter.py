"""Result presenter — maps search results, suggestions and errors to launcher rows.

Every function here is pure.  Items carry an ``action`` callable that,
given the interaction context, returns an action descriptor; running the
side effect is left to :mod:`github_launcher.services.actions`.
"""

from __future__ import annotations

from datetime import datetime, timezone

import humanize

from github_launcher.domain.entities import (
    Action,
    ApiSearchResult,
    ChangeQuery,
    InteractionContext,
    ItemAction,
    Issue,
    OpenUrl,
    PresentableItem,
    RepoDetails,
    RepoIssue,
    RepoIssues,
    RepoPRs,
    Repos,
    Repository,
    Users,
)
from github_launcher.domain.exceptions import GitHubRateLimitError, RepositoryNotFoundError
from github_launcher.domain.value_objects import (
    DefaultSuggestion,
    QuerySuggestion,
    SearchRepos,
)

NO_RESULTS = PresentableItem(
    title="No results found",
    subtitle="please try a different query",
)


def _open(url: str) -> ItemAction:
    def action(_: InteractionContext) -> Action:
        return OpenUrl(url)

    return action


def _change_query(command: str, argument: str) -> ItemAction:
    def action(_: InteractionContext) -> Action:
        return ChangeQuery(command, argument)

    return action


def _open_or_change_query(url: str, command: str, argument: str) -> ItemAction:
    """Open *url* with the modifier key held, otherwise drill into the query."""

    def action(ctx: InteractionContext) -> Action:
        if ctx.modifier_pressed:
            return OpenUrl(url)
        return ChangeQuery(command, argument)

    return action


def _relative(moment: datetime, now: datetime) -> str:
    return humanize.naturaltime(now - moment)


def _repo_subtitle(repo: Repository) -> str:
    return f"(★{repo.stargazers_count} | {repo.language or ''}) {repo.description or ''}"


def _issue_items(issues: list[Issue], label: str, now: datetime) -> list[PresentableItem]:
    return [
        PresentableItem(
            title=issue.title,
            subtitle=(
                f"{label} #{issue.number} | created {_relative(issue.created_at, now)}"
                f" by {issue.user.login}"
            ),
            action=_open(issue.html_url),
        )
        for issue in issues
    ]


def present(
    result: ApiSearchResult, *, now: datetime | None = None
) -> list[PresentableItem]:
    """Render a remote search result as launcher items, preserving API order."""
    now = now or datetime.now(timezone.utc)

    if isinstance(result, Repos):
        if not result.repos:
            return [NO_RESULTS]
        return [
            PresentableItem(
                title=repo.full_name,
                subtitle=_repo_subtitle(repo),
                action=_open_or_change_query(repo.html_url, "repo", repo.full_name),
            )
            for repo in result.repos
        ]

    if isinstance(result, RepoIssues):
        if not result.issues:
            return [NO_RESULTS]
        return _issue_items(result.issues, "issue", now)

    if isinstance(result, RepoPRs):
        if not result.prs:
            return [NO_RESULTS]
        return _issue_items(result.prs, "PR", now)

    if isinstance(result, Users):
        if not result.users:
            return [NO_RESULTS]
        return [
            PresentableItem(title=user.login, subtitle=user.html_url, action=_open(user.html_url))
            for user in result.users
        ]

    if isinstance(result, RepoIssue):
        issue = result.issue
        return [
            PresentableItem(
                title=f"#{issue.number} - {issue.title}",
                subtitle=(
                    f"{issue.state.value} | created by {issue.user.login}"
                    f" | last updated {_relative(issue.updated_at, now)}"
                ),
                action=_open(issue.html_url),
            )
        ]

    if isinstance(result, RepoDetails):
        repo = result.repo
        return [
            PresentableItem(
                title=repo.full_name,
                subtitle=_repo_subtitle(repo),
                action=_open(repo.html_url),
            ),
            PresentableItem(
                title="Issues",
                subtitle=f"{len(result.issues)} issues open",
                action=_open_or_change_query(f"{repo.html_url}/issues", "issues", repo.full_name),
            ),
            PresentableItem(
                title="Pull Requests",
                subtitle=f"{len(result.prs)} pull requests open",
                action=_open_or_change_query(f"{repo.html_url}/pulls", "pr", repo.full_name),
            ),
        ]

    raise TypeError(f"Unsupported search result: {result!r}")


def present_suggestion(
    suggestion: QuerySuggestion, *, action_keyword: str = "gh"
) -> list[PresentableItem]:
    """Offer query rewrites when the input is not a complete search."""
    if isinstance(suggestion, SearchRepos):
        term = suggestion.text
        return [
            PresentableItem(
                title="Search repositories",
                subtitle=f'Search for repositories matching "{term}"',
                action=_change_query("repos", term),
            ),
            PresentableItem(
                title="Search users",
                subtitle=f'Search for users matching "{term}"',
                action=_change_query("users", term),
            ),
        ]

    if isinstance(suggestion, DefaultSuggestion):
        return [
            PresentableItem(
                title="Search repositories",
                subtitle=(
                    f'Search Github repositories with "{action_keyword} repos {{repo-search-term}}"'
                ),
                action=_change_query("repos", ""),
            ),
            PresentableItem(
                title="Search users",
                subtitle=f'Search Github users with "{action_keyword} users {{user-search-term}}"',
                action=_change_query("users", ""),
            ),
        ]

    raise TypeError(f"Unsupported suggestion: {suggestion!r}")


def present_error(exc: BaseException) -> list[PresentableItem]:
    """Render a failed search as a single inert item, keyed on its wrapped cause."""
    cause = exc.__cause__
    if isinstance(cause, GitHubRateLimitError):
        return [PresentableItem(title="Rate limit exceeded", subtitle="please try again later")]
    if isinstance(cause, RepositoryNotFoundError):
        return [
            PresentableItem(title="Search failed", subtitle="The repository could not be found")
        ]
    return [PresentableItem(title="Search failed", subtitle=str(exc))]
