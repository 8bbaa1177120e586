from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from github_launcher.domain.entities import Issue, IssueState, Repository, User

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_repo(full_name: str = "octocat/Hello-World", **overrides) -> Repository:
    fields = {
        "full_name": full_name,
        "html_url": f"https://github.com/{full_name}",
        "stargazers_count": 42,
        "language": "Python",
        "description": "My first repository",
    }
    fields.update(overrides)
    return Repository(**fields)


def make_issue(number: int = 1, title: str = "Found a bug", **overrides) -> Issue:
    fields = {
        "number": number,
        "title": title,
        "state": IssueState.OPEN,
        "html_url": f"https://github.com/octocat/Hello-World/issues/{number}",
        "user": User(login="octocat", html_url="https://github.com/octocat"),
        "created_at": NOW - timedelta(hours=3),
        "updated_at": NOW - timedelta(days=2),
    }
    fields.update(overrides)
    return Issue(**fields)


class FakeHost:
    """Records the side effects requested by activated items."""

    def __init__(self, action_keyword: str = "gh") -> None:
        self.action_keyword = action_keyword
        self.opened: list[str] = []
        self.queries: list[str] = []

    def open_in_browser(self, url: str) -> None:
        self.opened.append(url)

    def change_query(self, query: str) -> None:
        self.queries.append(query)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()
