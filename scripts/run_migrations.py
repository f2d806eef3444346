#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision>  # upgrade to a specific revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from debatify.config import Settings
from debatify.util.logging import setup_logging
from debatify.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    try:
        with logfire.span("migrations.upgrade", target=target):
            command.upgrade(alembic_cfg, target)
    except Exception:
        # The deploy must fail rather than start against a broken schema
        logfire.exception("Database migration failed", target=target)
        raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
