"""Unit tests for the HTTP error mapping."""

import httpx
import pytest
from fastapi import FastAPI, Query

from debatify.adapter.error import ProviderError
from debatify.domain.error import (
    AlreadyVotedError,
    InvalidCredentialError,
    NotAuthorizedError,
    NotFoundError,
    StaleContentError,
    UnauthenticatedError,
)
from debatify.interface.api.errors import register_error_handlers


def _app(exc: Exception) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    @app.get("/typed")
    async def typed(limit: int = Query()):
        return {"limit": limit}

    return app


async def _get(app: FastAPI, path: str) -> httpx.Response:
    # Unhandled errors are re-raised by Starlette after the 500 is sent
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path)


class TestErrorHandlers:
    """Each error type maps to one status and a message body."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status_code",
        [
            (AlreadyVotedError("up"), 400),
            (UnauthenticatedError("No token, authorization denied"), 401),
            (InvalidCredentialError("Token is not valid"), 401),
            (NotAuthorizedError("debate", "d1", "u1"), 403),
            (NotFoundError("Blog", "b1"), 404),
            (StaleContentError("c1"), 409),
            (ProviderError("email", "Email delivery failed: 500", status_code=500), 502),
        ],
    )
    async def test_domain_errors(self, exc, status_code):
        response = await _get(_app(exc), "/boom")

        assert response.status_code == status_code
        assert response.json() == {"message": str(exc)}

    @pytest.mark.asyncio
    async def test_unexpected_error_is_hidden(self):
        response = await _get(_app(RuntimeError("secret detail")), "/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}

    @pytest.mark.asyncio
    async def test_request_validation_is_400(self):
        response = await _get(_app(RuntimeError()), "/typed?limit=abc")

        assert response.status_code == 400
        assert response.json()["message"].startswith("query.limit: ")
