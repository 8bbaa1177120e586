"""Action runner — applies action descriptors to a launcher host."""

from __future__ import annotations

import logging

from github_launcher.domain.entities import (
    Action,
    ChangeQuery,
    InteractionContext,
    NoAction,
    OpenUrl,
    PresentableItem,
)
from github_launcher.domain.ports.launcher_host import LauncherHost

logger = logging.getLogger(__name__)


def perform_action(action: Action, host: LauncherHost) -> bool:
    """Run the side effect for *action*; return ``True`` if the host should hide its list."""
    if isinstance(action, OpenUrl):
        logger.debug("Opening %s", action.url)
        host.open_in_browser(action.url)
    elif isinstance(action, ChangeQuery):
        query = action.render(host.action_keyword)
        logger.debug("Changing query to %r", query)
        host.change_query(query)
    elif not isinstance(action, NoAction):
        raise TypeError(f"Unsupported action: {action!r}")
    return action.terminal


def activate(item: PresentableItem, context: InteractionContext, host: LauncherHost) -> bool:
    """Activate *item* the way the launcher does when the user selects it."""
    return perform_action(item.action(context), host)
