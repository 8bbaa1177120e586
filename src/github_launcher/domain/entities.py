"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Union

# ── GitHub records ──────────────────────────────────────────────────────────


class IssueState(str, Enum):
    """Lifecycle state of an issue or pull request."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True, slots=True)
class User:
    """A GitHub account."""

    login: str
    html_url: str


@dataclass(frozen=True, slots=True)
class Repository:
    """Repository fields shown in the launcher."""

    full_name: str
    html_url: str
    stargazers_count: int = 0
    language: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class Issue:
    """An issue or pull request (GitHub models PRs as issues)."""

    number: int
    title: str
    state: IssueState
    html_url: str
    user: User
    created_at: datetime
    updated_at: datetime


# ── Search results ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Repos:
    repos: list[Repository] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Users:
    users: list[User] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RepoIssues:
    issues: list[Issue] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RepoPRs:
    prs: list[Issue] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class RepoIssue:
    issue: Issue


@dataclass(frozen=True, slots=True)
class RepoDetails:
    """A repository together with its open issues and pull requests."""

    repo: Repository
    issues: list[Issue] = field(default_factory=list)
    prs: list[Issue] = field(default_factory=list)


ApiSearchResult = Union[Repos, Users, RepoIssues, RepoPRs, RepoIssue, RepoDetails]


# ── Actions ─────────────────────────────────────────────────────────────────

GLOBAL_ACTION_KEYWORD = "*"


@dataclass(frozen=True, slots=True)
class InteractionContext:
    """State of the launcher at the moment an item is activated."""

    modifier_pressed: bool = False


@dataclass(frozen=True, slots=True)
class OpenUrl:
    """Open *url* in the browser and hide the result list."""

    url: str

    @property
    def terminal(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ChangeQuery:
    """Rewrite the launcher query to ``<keyword> <command> <argument>``."""

    command: str
    argument: str = ""

    @property
    def terminal(self) -> bool:
        return False

    def render(self, action_keyword: str) -> str:
        # Global plugins receive the query without a keyword in front.
        if action_keyword == GLOBAL_ACTION_KEYWORD:
            return f"{self.command} {self.argument}"
        return f"{action_keyword} {self.command} {self.argument}"


@dataclass(frozen=True, slots=True)
class NoAction:
    """Inert activation: nothing happens, the list stays open."""

    @property
    def terminal(self) -> bool:
        return False


Action = Union[OpenUrl, ChangeQuery, NoAction]
ItemAction = Callable[[InteractionContext], Action]


def _inert(_: InteractionContext) -> Action:
    return NoAction()


@dataclass(frozen=True, slots=True)
class PresentableItem:
    """One row of launcher output."""

    title: str
    subtitle: str
    action: ItemAction = _inert
