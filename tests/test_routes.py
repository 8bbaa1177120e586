import pytest
from fastapi.testclient import TestClient

from conftest import NOW, make_repo
from github_launcher.domain.entities import Repos
from github_launcher.domain.exceptions import GitHubRateLimitError
from github_launcher.domain.value_objects import FindRepos
from github_launcher.interface.app import create_app
from github_launcher.interface.dependencies import get_action_keyword, get_use_case
from github_launcher.services.query_classifier import classify
from github_launcher.services.process_query import ProcessQueryUseCase, split_terms


class StubSearch:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[object] = []

    async def search(self, intent):
        self.calls.append(intent)
        if self.error:
            raise self.error
        return self.result


def _client(searcher: StubSearch, action_keyword: str = "gh") -> TestClient:
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: ProcessQueryUseCase(
        searcher, action_keyword=action_keyword, clock=lambda: NOW
    )
    app.dependency_overrides[get_action_keyword] = lambda: action_keyword
    return TestClient(app)


def test_health() -> None:
    response = _client(StubSearch()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_query_returns_items_with_both_actions() -> None:
    searcher = StubSearch(result=Repos([make_repo("a/b", stargazers_count=5, language="F#", description="d")]))

    response = _client(searcher).post("/query", json={"query": "gh repos flow launcher"})

    assert response.status_code == 200
    (item,) = response.json()["results"]
    assert item["title"] == "a/b"
    assert item["subtitle"] == "(★5 | F#) d"
    assert item["action"] == {
        "type": "change_query",
        "hide": False,
        "url": None,
        "query": "gh repo a/b",
    }
    assert item["modifier_action"] == {
        "type": "open_url",
        "hide": True,
        "url": "https://github.com/a/b",
        "query": None,
    }


def test_suggestions_are_served_without_search() -> None:
    searcher = StubSearch()

    response = _client(searcher).post("/query", json={"query": "gh"})

    results = response.json()["results"]
    assert [r["title"] for r in results] == ["Search repositories", "Search users"]
    assert results[0]["action"]["query"] == "gh repos "
    assert searcher.calls == []


def test_global_keyword_keeps_first_term() -> None:
    searcher = StubSearch()

    response = _client(searcher, action_keyword="*").post("/query", json={"query": "fastapi"})

    results = response.json()["results"]
    assert results[0]["subtitle"] == 'Search for repositories matching "fastapi"'
    assert results[0]["action"]["query"] == "repos fastapi"
    assert classify(split_terms(results[0]["action"]["query"], "*")) == FindRepos("fastapi")


def test_search_failure_is_a_result_not_an_http_error() -> None:
    searcher = StubSearch(error=GitHubRateLimitError("API rate limit exceeded"))

    response = _client(searcher).post("/query", json={"query": "gh octocat/Hello-World"})

    assert response.status_code == 200
    (item,) = response.json()["results"]
    assert (item["title"], item["subtitle"]) == ("Rate limit exceeded", "please try again later")
    assert item["action"] == {"type": "none", "hide": False, "url": None, "query": None}


@pytest.mark.parametrize("body", [{}, {"query": 12}])
def test_invalid_body_uses_error_envelope(body) -> None:
    response = _client(StubSearch()).post("/query", json=body)

    assert response.status_code == 422
    assert response.json()["status"] == "error"


def test_query_documents_error_envelope() -> None:
    schema = _client(StubSearch()).get("/openapi.json").json()

    responses = schema["paths"]["/query"]["post"]["responses"]
    for status in ("422", "500"):
        ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")
    assert "message" in schema["components"]["schemas"]["ErrorResponse"]["properties"]
