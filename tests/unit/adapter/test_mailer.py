"""Unit tests for the HTTP email sender."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from debatify.adapter.error import ProviderError
from debatify.adapter.mailer import HttpEmailSender


def _sender() -> HttpEmailSender:
    return HttpEmailSender(
        api_url="https://mail.test/send", api_key="key-123", sender="no-reply@test"
    )


class TestHttpEmailSender:
    """Tests for HttpEmailSender.send."""

    @pytest.mark.asyncio
    async def test_posts_message(self):
        """Should POST the message as JSON with the bearer key."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = MagicMock(status_code=202)

            # Act
            await _sender().send("alice@example.com", "Hello", "Body text")

            # Assert
            mock_client.post.assert_called_once_with(
                "https://mail.test/send",
                json={
                    "from": "no-reply@test",
                    "to": ["alice@example.com"],
                    "subject": "Hello",
                    "text": "Body text",
                },
                headers={"Authorization": "Bearer key-123"},
                timeout=30.0,
            )

    @pytest.mark.asyncio
    async def test_rejected_message_raises(self):
        """Should raise ProviderError on a 4xx/5xx response."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = MagicMock(status_code=500, text="oops")

            with pytest.raises(ProviderError, match="500"):
                await _sender().send("alice@example.com", "Hello", "Body")

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        """Should wrap transport errors in ProviderError."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ConnectError("refused")

            with pytest.raises(ProviderError, match="HTTP error"):
                await _sender().send("alice@example.com", "Hello", "Body")
