"""Email delivery infrastructure providers."""

from dishka import Scope, provide

from debatify.adapter.mailer import HttpEmailSender
from debatify.config import EmailSettings
from debatify.domain.service import EmailSender
from debatify.util.di.base import ProviderBase


class MailerProvider(ProviderBase):
    """Mailer component base."""

    __mock_component__ = "mailer"


class ProdMailerProvider(MailerProvider):
    """Production mailer provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, email_settings: EmailSettings) -> EmailSender:
        """Provide HTTP email sender.

        Raises:
            ValueError: If no email API key is configured
        """
        if not email_settings.api_key:
            raise ValueError(
                "Email API key not configured. Set EMAIL__API_KEY environment variable."
            )

        return HttpEmailSender(
            api_url=email_settings.api_url,
            api_key=email_settings.api_key,
            sender=email_settings.sender,
        )
