import pytest

from conftest import NOW, FakeHost, make_repo
from github_launcher.domain.entities import (
    ChangeQuery,
    InteractionContext,
    NoAction,
    OpenUrl,
    RepoDetails,
    Repos,
)
from github_launcher.domain.value_objects import DefaultSuggestion, SearchRepos
from github_launcher.services.actions import activate, perform_action
from github_launcher.services.query_classifier import classify
from github_launcher.services.process_query import split_terms
from github_launcher.services.result_presenter import present, present_suggestion


def test_open_url_is_terminal(host: FakeHost) -> None:
    assert perform_action(OpenUrl("https://github.com/a/b"), host) is True
    assert host.opened == ["https://github.com/a/b"]
    assert host.queries == []


def test_change_query_is_not_terminal(host: FakeHost) -> None:
    assert perform_action(ChangeQuery("repo", "a/b"), host) is False
    assert host.queries == ["gh repo a/b"]
    assert host.opened == []


def test_empty_argument_keeps_trailing_space(host: FakeHost) -> None:
    perform_action(ChangeQuery("repos", ""), host)
    assert host.queries == ["gh repos "]


def test_no_action_has_no_side_effect(host: FakeHost) -> None:
    assert perform_action(NoAction(), host) is False
    assert host.opened == [] and host.queries == []


def test_global_keyword_rewrites_without_prefix(host: FakeHost) -> None:
    host.action_keyword = "*"

    perform_action(ChangeQuery("repos", "fastapi"), host)

    assert host.queries == ["repos fastapi"]


def test_unknown_action_is_rejected(host: FakeHost) -> None:
    with pytest.raises(TypeError):
        perform_action("open", host)  # type: ignore[arg-type]


def test_activate_uses_modifier_state(host: FakeHost) -> None:
    (item,) = present(Repos([make_repo("a/b")]), now=NOW)

    assert activate(item, InteractionContext(modifier_pressed=False), host) is False
    assert activate(item, InteractionContext(modifier_pressed=True), host) is True
    assert host.queries == ["gh repo a/b"]
    assert host.opened == ["https://github.com/a/b"]


@pytest.mark.parametrize("keyword", ["gh", "*"])
def test_rewritten_queries_reclassify_to_intended_search(keyword) -> None:
    host = FakeHost(action_keyword=keyword)
    items = (
        present(Repos([make_repo("a/b")]), now=NOW)
        + present(RepoDetails(repo=make_repo("a/b")), now=NOW)[1:]
        + present_suggestion(SearchRepos("flow"))
        + present_suggestion(DefaultSuggestion())
    )

    for item in items:
        activate(item, InteractionContext(modifier_pressed=False), host)

    reclassified = [classify(split_terms(query, keyword)) for query in host.queries]
    assert [type(intent).__name__ for intent in reclassified] == [
        "FindRepo",
        "FindIssues",
        "FindPRs",
        "FindRepos",
        "FindUsers",
        "FindRepos",
        "FindUsers",
    ]
