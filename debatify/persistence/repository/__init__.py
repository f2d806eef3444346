"""PostgreSQL repository implementations."""

from debatify.persistence.repository.content import PostgresContentRepository
from debatify.persistence.repository.notification import PostgresNotificationRepository
from debatify.persistence.repository.one_time_code import PostgresOneTimeCodeRepository
from debatify.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresContentRepository",
    "PostgresNotificationRepository",
    "PostgresOneTimeCodeRepository",
]
