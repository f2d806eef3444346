"""Repository interfaces for Debatify domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from debatify.domain.repository.content import ContentRepository
from debatify.domain.repository.notification import NotificationRepository
from debatify.domain.repository.one_time_code import OneTimeCodeRepository
from debatify.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ContentRepository",
    "NotificationRepository",
    "OneTimeCodeRepository",
]
