"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debatify.config import Settings
from debatify.interface.api.errors import register_error_handlers
from debatify.interface.api.routes import (
    auth,
    bookmarks,
    content,
    health,
    notifications,
    support,
    users,
)
from debatify.util.di.container import create_container, setup_di
from debatify.util.observability import instrument_fastapi, instrument_httpx

ROUTERS = [
    health.router,
    auth.router,
    content.router,
    bookmarks.router,
    notifications.router,
    users.router,
    support.router,
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Releases the engine pool
    await app.state.dishka_container.close()


def _allowed_origins(settings: Settings) -> list[str]:
    origins = [settings.frontend_url, *settings.cors_extra_origins]
    return list(dict.fromkeys(origins))


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` under pytest. Tests pass their own
    container with mocked mail, storage and persistence.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()
    instrument_httpx()

    app_instance = FastAPI(
        title="Debatify API",
        description="Discussions, structured debates and blogs",
        version=settings.version,
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Clients send the bearer token in a header, never a cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn; start_app.py configures logfire first
app = create_app()
