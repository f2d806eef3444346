"""One-time code domain service."""

import secrets
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from debatify.config import OneTimeCodeSettings
from debatify.domain.error import ValidationError
from debatify.domain.model import OneTimeCode
from debatify.domain.repository import OneTimeCodeRepository
from debatify.domain.value import CodePurpose, OneTimeCodeId

from .base import Service


class OneTimeCodeService(Service):
    """Issues and checks short numeric codes sent by email.

    Only the most recently issued code for an email can verify: issuing a
    code deletes the older ones.
    """

    def __init__(
        self,
        code_repository: OneTimeCodeRepository,
        code_settings: OneTimeCodeSettings,
    ) -> None:
        self.code_repository = code_repository
        self.settings = code_settings

    def _generate(self) -> str:
        low = 10 ** (self.settings.length - 1)
        return str(low + secrets.randbelow(9 * low))

    async def issue(self, email: str, purpose: CodePurpose) -> OneTimeCode:
        """Issue a fresh code, superseding every earlier code for the email.

        Returns:
            The stored code
        """
        email = email.strip().lower()
        with logfire.span("one_time_code_service.issue", purpose=purpose.value):
            superseded = await self.code_repository.delete_by_email(email)

            now = datetime.now(timezone.utc)
            code = OneTimeCode(
                id=OneTimeCodeId(uuid4()),
                email=email,
                code=self._generate(),
                purpose=purpose,
                expires_at=now + timedelta(minutes=self.settings.ttl_minutes),
                created_at=now,
            )
            saved = await self.code_repository.save(code)
            logfire.info(
                "One-time code issued",
                purpose=purpose.value,
                superseded=superseded,
                expires_at=saved.expires_at.isoformat(),
            )
            return saved

    async def verify(self, email: str, code: str) -> None:
        """Check a code and consume every code for the email.

        Raises:
            ValidationError: No live code for the email matches
        """
        email = email.strip().lower()
        with logfire.span("one_time_code_service.verify"):
            now = datetime.now(timezone.utc)
            candidate = code.strip().encode()
            codes = await self.code_repository.find_by_email(email)
            match = next(
                (
                    c
                    for c in codes
                    if secrets.compare_digest(c.code.encode(), candidate)
                    and not c.is_expired(now)
                ),
                None,
            )
            if match is None:
                logfire.warn("One-time code rejected", candidates=len(codes))
                raise ValidationError("Invalid or expired code")

            await self.code_repository.delete_by_email(email)
            logfire.info("One-time code consumed", purpose=match.purpose.value)
