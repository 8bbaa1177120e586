"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from github_launcher.domain.entities import (
    Action,
    ChangeQuery,
    InteractionContext,
    OpenUrl,
    PresentableItem,
)


class QueryRequest(BaseModel):
    """Request body for ``POST /query``: the raw launcher text."""

    query: str


class ActionDescriptor(BaseModel):
    """What the launcher should do when an item is activated."""

    type: Literal["open_url", "change_query", "none"]
    hide: bool
    url: str | None = None
    query: str | None = None

    @classmethod
    def from_action(cls, action: Action, action_keyword: str) -> ActionDescriptor:
        if isinstance(action, OpenUrl):
            return cls(type="open_url", hide=action.terminal, url=action.url)
        if isinstance(action, ChangeQuery):
            return cls(
                type="change_query",
                hide=action.terminal,
                query=action.render(action_keyword),
            )
        return cls(type="none", hide=action.terminal)


class ResultItem(BaseModel):
    """One launcher row with its plain and modifier-key actions resolved."""

    title: str
    subtitle: str
    action: ActionDescriptor
    modifier_action: ActionDescriptor

    @classmethod
    def from_item(cls, item: PresentableItem, action_keyword: str) -> ResultItem:
        return cls(
            title=item.title,
            subtitle=item.subtitle,
            action=ActionDescriptor.from_action(
                item.action(InteractionContext(modifier_pressed=False)), action_keyword
            ),
            modifier_action=ActionDescriptor.from_action(
                item.action(InteractionContext(modifier_pressed=True)), action_keyword
            ),
        )


class QueryResponse(BaseModel):
    """Successful response from ``POST /query``."""

    results: list[ResultItem]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
