"""One-time code entity (email verification, password reset)."""

from datetime import datetime

from pydantic import Field

from debatify.domain.model.common import DomainModel, utcnow
from debatify.domain.value import CodePurpose, OneTimeCodeId


class OneTimeCode(DomainModel):
    """Short numeric code mailed to a user.

    Business rules:
    - At most one live code per email: issuing a code deletes older ones
    - A code is consumed (deleted with every other code for the email)
      when it verifies
    - A code past expires_at never verifies
    """

    id: OneTimeCodeId
    email: str
    code: str = Field(pattern=r"^\d{4,10}$")
    purpose: CodePurpose
    expires_at: datetime
    created_at: datetime = Field(default_factory=utcnow)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
