"""Unit tests for the HTTP blob storage client."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from debatify.adapter.error import ProviderError
from debatify.adapter.storage import HttpBlobStorage


def _response(status_code: int, payload: dict | None = None) -> MagicMock:
    response = MagicMock(status_code=status_code, text="")
    response.json.return_value = payload or {}
    return response


class TestHttpBlobStorage:
    """Tests for HttpBlobStorage.upload."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"secure_url": "https://cdn.test/a.png", "url": "http://cdn.test/a.png"},
            {"url": "https://cdn.test/a.png"},
        ],
    )
    async def test_returns_provider_url(self, payload):
        """Should prefer ``secure_url`` and fall back to ``url``."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = _response(200, payload)

            url = await HttpBlobStorage("https://up.test", "k").upload(
                b"data", "a.png", "image/png"
            )

            assert url == "https://cdn.test/a.png"
            _, kwargs = mock_client.post.call_args
            assert kwargs["files"] == {"file": ("a.png", b"data", "image/png")}

    @pytest.mark.asyncio
    async def test_missing_url_raises(self):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = _response(200, {"id": "x"})

            with pytest.raises(ProviderError, match="did not include a URL"):
                await HttpBlobStorage("https://up.test", "k").upload(
                    b"data", "a.png", "image/png"
                )

    @pytest.mark.asyncio
    async def test_failed_upload_raises(self):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = _response(413)

            with pytest.raises(ProviderError, match="413"):
                await HttpBlobStorage("https://up.test", "k").upload(
                    b"data", "a.png", "image/png"
                )
