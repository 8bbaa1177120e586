"""Value objects — query tokens parsed into self-validating primitives.

Everything here is frozen and hashable: search intents double as cache
keys for the remote lookup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

_USER_REPO_RE = re.compile(r"^(?P<owner>[^/\s]+)/(?P<repo>[^/\s]+)$")
_USER_REPOS_RE = re.compile(r"^(?P<owner>[^/\s]+)/$")
_ISSUE_RE = re.compile(r"^#?(?P<number>[0-9]+)$")


@dataclass(frozen=True, slots=True)
class RepoRef:
    """An ``owner/repo`` reference typed into the launcher."""

    owner: str
    repo: str

    @classmethod
    def parse(cls, token: str) -> RepoRef | None:
        """Return the reference for ``owner/repo``, or ``None`` if *token* is not one."""
        match = _USER_REPO_RE.match(token)
        if not match:
            return None
        return cls(owner=match["owner"], repo=match["repo"])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_owner(token: str) -> str | None:
    """Return the owner for the ``owner/`` form (trailing slash, no repo)."""
    match = _USER_REPOS_RE.match(token)
    return match["owner"] if match else None


def parse_issue_number(token: str) -> int | None:
    """Return the issue number for ``#123`` or ``123``."""
    match = _ISSUE_RE.match(token)
    return int(match["number"]) if match else None


# ── Search intents ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class FindRepos:
    text: str


@dataclass(frozen=True, slots=True)
class FindUsers:
    text: str


@dataclass(frozen=True, slots=True)
class FindIssues:
    owner: str
    repo: str


@dataclass(frozen=True, slots=True)
class FindPRs:
    owner: str
    repo: str


@dataclass(frozen=True, slots=True)
class FindRepo:
    owner: str
    repo: str


@dataclass(frozen=True, slots=True)
class FindIssue:
    owner: str
    repo: str
    number: int


@dataclass(frozen=True, slots=True)
class FindUserRepos:
    owner: str


SearchIntent = Union[
    FindRepos, FindUsers, FindIssues, FindPRs, FindRepo, FindIssue, FindUserRepos
]


# ── Local suggestions ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SearchRepos:
    """Offer to search repositories (or users) for a single bare term."""

    text: str


@dataclass(frozen=True, slots=True)
class DefaultSuggestion:
    """Generic help shown when the query matches nothing."""


QuerySuggestion = Union[SearchRepos, DefaultSuggestion]
