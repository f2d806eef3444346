#!/usr/bin/env python3
"""Start the Debatify API under uvicorn.

Logging and logfire are configured before the app module is imported, so
failures while building the app are recorded too.
"""

import sys

import logfire
import uvicorn

from debatify.config import Settings
from debatify.util.logging import get_logger, setup_logging
from debatify.util.observability import configure_logfire

logger = get_logger(__name__)

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def production_problems(settings: Settings) -> list[str]:
    """Settings that must be set before serving real users."""
    if settings.environment != "production":
        return []

    problems = []
    if settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        problems.append("AUTH__JWT_SECRET is the default value")
    if not settings.email.api_key:
        problems.append("EMAIL__API_KEY is not set")
    if not settings.storage.api_key:
        problems.append("STORAGE__API_KEY is not set")
    return problems


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    problems = production_problems(settings)
    if problems:
        for problem in problems:
            logger.error("Refusing to start: %s", problem)
        return 1

    logfire.info(
        "Starting Debatify API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
        blog_vote_policy=settings.engagement.blog_vote_policy,
    )

    try:
        uvicorn.run(
            "debatify.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("Application startup failed")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
