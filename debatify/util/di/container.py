"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from debatify.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Container with PostgreSQL, the HTTP mailer and HTTP blob storage.

    Settings come from the environment when first resolved.
    """
    providers = [base.implementation(use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve each request from a REQUEST-scoped child of ``container``.

    The child's database session commits when the request finishes.
    """
    setup_dishka(container, app)
