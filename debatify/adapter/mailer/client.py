"""Email delivery over a transactional email HTTP API."""

from dataclasses import dataclass

import httpx
import logfire

from debatify.adapter.error import ProviderError
from debatify.domain.service.email_service import EmailSender


class HttpEmailSender(EmailSender):
    """Sends mail by POSTing JSON to the provider's send endpoint."""

    def __init__(self, api_url: str, api_key: str, sender: str) -> None:
        """Initialize email client.

        Args:
            api_url: Provider send endpoint
            api_key: Bearer API key
            sender: From address
        """
        self.api_url = api_url
        self.api_key = api_key
        self.sender = sender

    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Deliver one plain-text message.

        Raises:
            ProviderError: The provider refused the message or was unreachable
        """
        payload = {
            "from": self.sender,
            "to": [recipient],
            "subject": subject,
            "text": body,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=30.0,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Email delivery failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise ProviderError(
                        "email",
                        f"Email delivery failed: {response.status_code}",
                        status_code=response.status_code,
                    )

        except httpx.HTTPError as e:
            logfire.error("Email delivery HTTP error", error=str(e))
            raise ProviderError("email", f"HTTP error during email delivery: {e}") from e

        logfire.info("Email delivered", subject=subject)


@dataclass(frozen=True)
class SentEmail:
    recipient: str
    subject: str
    body: str


class MockEmailSender(EmailSender):
    """Mock email sender for testing.

    Keeps every message in ``outbox`` instead of delivering it.
    """

    def __init__(self) -> None:
        self.outbox: list[SentEmail] = []

    async def send(self, recipient: str, subject: str, body: str) -> None:
        self.outbox.append(SentEmail(recipient=recipient, subject=subject, body=body))

    def last_to(self, recipient: str) -> SentEmail | None:
        """Most recent message sent to ``recipient``."""
        for email in reversed(self.outbox):
            if email.recipient == recipient:
                return email
        return None
