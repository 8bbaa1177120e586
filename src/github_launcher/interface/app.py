"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from github_launcher.interface.dependencies import shutdown, startup
from github_launcher.interface.error_handlers import register_error_handlers
from github_launcher.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared GitHub client and search cache; close the client on exit."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Launcher",
        version="1.0.0",
        description=(
            "Classifies launcher queries such as `repos fastapi`, "
            "`octocat/Hello-World issues` or `octocat/` and returns GitHub "
            "search results as selectable rows."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Reachability check for the launcher plugin ──────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
