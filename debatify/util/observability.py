"""Logfire setup and instrumentation.

Services log through logfire directly, with spans named after the
operation and ids passed as attributes:

    with logfire.span("engagement_service.vote", kind=kind.value):
        ...
        logfire.info("Vote recorded", content_id=str(item.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from debatify.config import Settings

SERVICE_NAME = "debatify-api"

# Redacted on top of logfire's default patterns (password, secret, token...)
_EXTRA_SCRUB_PATTERNS = ["passcode"]


def _send_to_logfire(settings: Settings) -> bool:
    """An explicit flag wins; otherwise ship telemetry when a token is set."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once, before the app module is imported.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token or None,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_EXTRA_SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    """Record which content kind a request touched, when it has one."""
    result = dict(attributes)
    path_params = getattr(request, "path_params", None) or {}
    if "kind" in path_params:
        result["content_kind"] = path_params["kind"]
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    # Headers stay out of spans: Authorization carries bearer tokens
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine's pool."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to the email and blob storage providers."""
    logfire.instrument_httpx()
