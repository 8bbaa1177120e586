"""GitHub REST API adapter — implements the GitHubSearch port."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from github_launcher.domain.entities import (
    ApiSearchResult,
    Issue,
    IssueState,
    RepoDetails,
    RepoIssue,
    RepoIssues,
    RepoPRs,
    Repos,
    Repository,
    User,
    Users,
)
from github_launcher.domain.exceptions import (
    GitHubApiError,
    GitHubRateLimitError,
    RepositoryNotFoundError,
)
from github_launcher.domain.value_objects import (
    FindIssue,
    FindIssues,
    FindPRs,
    FindRepo,
    FindRepos,
    FindUserRepos,
    FindUsers,
    SearchIntent,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "github-launcher/1.0"


class GitHubRestAdapter:
    """Concrete GitHubSearch backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        *,
        base_url: str = _GITHUB_API,
        per_page: int = 30,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._per_page = per_page
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def search(self, intent: SearchIntent) -> ApiSearchResult:
        """Dispatch *intent* to the matching REST endpoint(s)."""
        logger.info("GitHub lookup for %r", intent)

        if isinstance(intent, FindRepos):
            return Repos(await self._search_repositories(intent.text))
        if isinstance(intent, FindUsers):
            return Users(await self._search_users(intent.text))
        if isinstance(intent, FindIssues):
            return RepoIssues(await self._open_issues(intent.owner, intent.repo))
        if isinstance(intent, FindPRs):
            return RepoPRs(await self._open_pulls(intent.owner, intent.repo))
        if isinstance(intent, FindRepo):
            repo, issues, prs = await asyncio.gather(
                self._repository(intent.owner, intent.repo),
                self._open_issues(intent.owner, intent.repo),
                self._open_pulls(intent.owner, intent.repo),
            )
            return RepoDetails(repo=repo, issues=issues, prs=prs)
        if isinstance(intent, FindIssue):
            data = await self._api_get(
                f"{_repo_path(intent.owner, intent.repo)}/issues/{intent.number}"
            )
            return RepoIssue(_parse_issue(data))
        if isinstance(intent, FindUserRepos):
            data = await self._api_get(
                f"/users/{_segment(intent.owner)}/repos",
                params={"sort": "updated", "per_page": str(self._per_page)},
            )
            return Repos([_parse_repository(item) for item in data])

        raise TypeError(f"Unsupported search intent: {intent!r}")

    # ── Endpoints ───────────────────────────────────────────────────────

    async def _search_repositories(self, text: str) -> list[Repository]:
        """GET /search/repositories?q={text} → [Repository]."""
        if not text.strip():
            return []
        data = await self._api_get(
            "/search/repositories",
            params={"q": text, "per_page": str(self._per_page)},
        )
        return [_parse_repository(item) for item in data.get("items", [])]

    async def _search_users(self, text: str) -> list[User]:
        """GET /search/users?q={text} → [User]."""
        if not text.strip():
            return []
        data = await self._api_get(
            "/search/users",
            params={"q": text, "per_page": str(self._per_page)},
        )
        return [_parse_user(item) for item in data.get("items", [])]

    async def _repository(self, owner: str, repo: str) -> Repository:
        """GET /repos/{owner}/{repo} → Repository."""
        return _parse_repository(await self._api_get(_repo_path(owner, repo)))

    async def _open_issues(self, owner: str, repo: str) -> list[Issue]:
        """GET /repos/{owner}/{repo}/issues → [Issue], pull requests excluded."""
        data = await self._api_get(
            f"{_repo_path(owner, repo)}/issues",
            params={"state": "open", "per_page": str(self._per_page)},
        )
        return [_parse_issue(item) for item in data if "pull_request" not in item]

    async def _open_pulls(self, owner: str, repo: str) -> list[Issue]:
        """GET /repos/{owner}/{repo}/pulls → [Issue]."""
        data = await self._api_get(
            f"{_repo_path(owner, repo)}/pulls",
            params={"state": "open", "per_page": str(self._per_page)},
        )
        return [_parse_issue(item) for item in data]

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp.json()

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"GitHub returned 404 Not Found for {endpoint}")

        if resp.status_code == 401:
            raise GitHubApiError("GitHub rejected the token (401 Unauthorized)")

        if resp.status_code == 403 and resp.headers.get("x-ratelimit-remaining", "") == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            raise GitHubRateLimitError(
                f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                "Set the GITHUB_TOKEN environment variable to increase the limit."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise GitHubApiError(
            f"GitHub API error {resp.status_code}: {_extract_error_message(resp)}"
        )


# ── Paths ───────────────────────────────────────────────────────────────────


def _segment(value: str) -> str:
    """Percent-encode one path segment so ``#``, ``?`` and ``%`` stay inside it."""
    return quote(value, safe="")


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{_segment(owner)}/{_segment(repo)}"


# ── Payload parsing ─────────────────────────────────────────────────────────


def _parse_timestamp(raw: str) -> datetime:
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))


def _parse_user(item: dict[str, Any]) -> User:
    return User(login=item.get("login", "ghost"), html_url=item.get("html_url", ""))


def _parse_repository(item: dict[str, Any]) -> Repository:
    return Repository(
        full_name=item.get("full_name", "unknown/repo"),
        html_url=item.get("html_url", ""),
        stargazers_count=item.get("stargazers_count") or 0,
        language=item.get("language"),
        description=item.get("description"),
    )


def _parse_issue(item: dict[str, Any]) -> Issue:
    return Issue(
        number=item["number"],
        title=item.get("title", ""),
        state=IssueState(item.get("state", "open")),
        html_url=item.get("html_url", ""),
        user=_parse_user(item.get("user") or {}),
        created_at=_parse_timestamp(item["created_at"]),
        updated_at=_parse_timestamp(item.get("updated_at") or item["created_at"]),
    )


def _extract_error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict):
        return str(payload.get("message", response.text))
    return response.text
