"""Email domain service."""

import logfire

from debatify.config import EmailSettings, OneTimeCodeSettings

from .base import Service


class EmailSender:
    """Outbound email interface."""

    async def send(self, recipient: str, subject: str, body: str) -> None:
        """Deliver one plain-text message.

        Args:
            recipient: Destination address
            subject: Subject line
            body: Plain-text body

        Raises:
            AdapterError: Delivery failed
        """
        raise NotImplementedError


class EmailService(Service):
    """Composes the messages the application sends."""

    def __init__(
        self,
        email_sender: EmailSender,
        email_settings: EmailSettings,
        code_settings: OneTimeCodeSettings,
    ) -> None:
        self.email_sender = email_sender
        self.email_settings = email_settings
        self.code_settings = code_settings

    async def send_verification_code(self, recipient: str, code: str) -> None:
        with logfire.span("email_service.send_verification_code"):
            await self.email_sender.send(
                recipient,
                "Verify your email",
                f"Your verification code is {code}.\n\n"
                f"It expires in {self.code_settings.ttl_minutes} minutes.",
            )
            logfire.info("Verification code sent")

    async def send_password_reset_code(self, recipient: str, code: str) -> None:
        with logfire.span("email_service.send_password_reset_code"):
            await self.email_sender.send(
                recipient,
                "Reset your password",
                f"Your password reset code is {code}.\n\n"
                f"It expires in {self.code_settings.ttl_minutes} minutes. "
                "If you did not ask for a reset, ignore this email.",
            )
            logfire.info("Password reset code sent")

    async def forward_support_request(self, name: str, email: str, message: str) -> None:
        """Forward a support request to the support inbox."""
        with logfire.span("email_service.forward_support_request"):
            await self.email_sender.send(
                self.email_settings.support_address,
                f"Support request from {name}",
                f"From: {name} <{email}>\n\n{message}",
            )
            logfire.info("Support request forwarded")
