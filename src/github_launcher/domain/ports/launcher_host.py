"""Port: launcher host — the UI that renders results and runs side effects."""

from __future__ import annotations

from typing import Protocol


class LauncherHost(Protocol):
    """Side effects the launcher exposes to activated items."""

    action_keyword: str

    def open_in_browser(self, url: str) -> None:
        """Open *url* in a new browser tab."""
        ...

    def change_query(self, query: str) -> None:
        """Replace the launcher's query text and re-run it."""
        ...
