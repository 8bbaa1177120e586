"""Console entry point: serve the launcher query API over HTTP."""

from __future__ import annotations

import logging

import uvicorn

from github_launcher.infrastructure.config import get_settings

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def main() -> None:
    """Configure logging from settings and run the app on ``HOST:PORT``."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format=_LOG_FORMAT)
    logging.getLogger(__name__).info(
        "Serving launcher keyword %r against %s",
        settings.action_keyword,
        settings.github_api_url,
    )
    uvicorn.run(
        "github_launcher.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
