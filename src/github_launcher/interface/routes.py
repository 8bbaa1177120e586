"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from github_launcher.interface.dependencies import get_action_keyword, get_use_case
from github_launcher.interface.schemas import (
    ErrorResponse,
    QueryRequest,
    QueryResponse,
    ResultItem,
)
from github_launcher.services.process_query import ProcessQueryUseCase, split_terms

router = APIRouter()


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)
async def query(
    body: QueryRequest,
    use_case: ProcessQueryUseCase = Depends(get_use_case),
    action_keyword: str = Depends(get_action_keyword),
) -> QueryResponse:
    """Classify launcher input and return the rows to display.

    Search failures come back as a single "Search failed" / "Rate limit
    exceeded" row, never as an HTTP error.
    """
    items = await use_case.execute(split_terms(body.query, action_keyword))
    return QueryResponse(
        results=[ResultItem.from_item(item, action_keyword) for item in items]
    )
