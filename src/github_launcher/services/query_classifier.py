"""Query classifier — turns launcher tokens into a search intent or a suggestion.

Rules are evaluated in order and the first one that returns a value wins.
Order is significant: ``repo owner/name`` and a bare ``owner/name`` both
resolve to :class:`FindRepo`, while ``owner/name issues`` and
``issues owner/name`` are recognised by different rules.
"""

from __future__ import annotations

from typing import Callable, Sequence, Union

from github_launcher.domain.value_objects import (
    DefaultSuggestion,
    FindIssue,
    FindIssues,
    FindPRs,
    FindRepo,
    FindRepos,
    FindUserRepos,
    FindUsers,
    QuerySuggestion,
    RepoRef,
    SearchIntent,
    SearchRepos,
    parse_issue_number,
    parse_owner,
)

Classification = Union[SearchIntent, QuerySuggestion]
Rule = Callable[[Sequence[str]], Union[Classification, None]]

_PR_KEYWORDS = ("pr", "pull")


def _search_repos(tokens: Sequence[str]) -> Classification | None:
    if tokens and tokens[0] == "repos":
        return FindRepos(" ".join(tokens[1:]))
    return None


def _search_users(tokens: Sequence[str]) -> Classification | None:
    if tokens and tokens[0] == "users":
        return FindUsers(" ".join(tokens[1:]))
    return None


def _keyword_then_repo(tokens: Sequence[str], keywords: Sequence[str]) -> RepoRef | None:
    if len(tokens) == 2 and tokens[0] in keywords:
        return RepoRef.parse(tokens[1])
    return None


def _repo_then_keyword(tokens: Sequence[str], keywords: Sequence[str]) -> RepoRef | None:
    if len(tokens) == 2 and tokens[1] in keywords:
        return RepoRef.parse(tokens[0])
    return None


def _issues_of_repo(tokens: Sequence[str]) -> Classification | None:
    ref = _keyword_then_repo(tokens, ("issues",))
    return FindIssues(ref.owner, ref.repo) if ref else None


def _prs_of_repo(tokens: Sequence[str]) -> Classification | None:
    ref = _keyword_then_repo(tokens, _PR_KEYWORDS)
    return FindPRs(ref.owner, ref.repo) if ref else None


def _repo_keyword(tokens: Sequence[str]) -> Classification | None:
    ref = _keyword_then_repo(tokens, ("repo",))
    return FindRepo(ref.owner, ref.repo) if ref else None


def _bare_repo(tokens: Sequence[str]) -> Classification | None:
    ref = RepoRef.parse(tokens[0]) if len(tokens) == 1 else None
    return FindRepo(ref.owner, ref.repo) if ref else None


def _repo_issues_suffix(tokens: Sequence[str]) -> Classification | None:
    ref = _repo_then_keyword(tokens, ("issues",))
    return FindIssues(ref.owner, ref.repo) if ref else None


def _repo_prs_suffix(tokens: Sequence[str]) -> Classification | None:
    ref = _repo_then_keyword(tokens, _PR_KEYWORDS)
    return FindPRs(ref.owner, ref.repo) if ref else None


def _repo_issue_number(tokens: Sequence[str]) -> Classification | None:
    if len(tokens) != 2:
        return None
    ref = RepoRef.parse(tokens[0])
    number = parse_issue_number(tokens[1])
    if ref is None or number is None:
        return None
    return FindIssue(ref.owner, ref.repo, number)


def _user_repos(tokens: Sequence[str]) -> Classification | None:
    owner = parse_owner(tokens[0]) if len(tokens) == 1 else None
    return FindUserRepos(owner) if owner else None


def _single_term(tokens: Sequence[str]) -> Classification | None:
    return SearchRepos(tokens[0]) if len(tokens) == 1 else None


RULES: tuple[Rule, ...] = (
    _search_repos,
    _search_users,
    _issues_of_repo,
    _prs_of_repo,
    _repo_keyword,
    _bare_repo,
    _repo_issues_suffix,
    _repo_prs_suffix,
    _repo_issue_number,
    _user_repos,
    _single_term,
)


def classify(tokens: Sequence[str]) -> Classification:
    """Return the search intent or suggestion for *tokens*.

    Total over all inputs: anything no rule recognises, including an
    empty token list, becomes :class:`DefaultSuggestion`.
    """
    for rule in RULES:
        result = rule(tokens)
        if result is not None:
            return result
    return DefaultSuggestion()
