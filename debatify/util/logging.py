"""Standard library logging setup.

Application events go through logfire; this only shapes the plain log
records emitted by uvicorn, alembic and third-party clients.
"""

import logging
import sys

from debatify.config import Settings

# Chatty libraries held at WARNING unless debugging
_NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "sqlalchemy.engine",
    "asyncpg",
    "multipart",
    "dishka",
)


def _level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route root logging to stdout at a level fitting the environment."""
    level = _level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    noisy_level = logging.DEBUG if settings.debug else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    logging.getLogger("debatify").setLevel(level)
    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
