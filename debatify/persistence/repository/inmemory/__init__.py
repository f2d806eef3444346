"""In-memory repository implementations for testing."""

from .content import InMemoryContentRepository
from .notification import InMemoryNotificationRepository
from .one_time_code import InMemoryOneTimeCodeRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryContentRepository",
    "InMemoryNotificationRepository",
    "InMemoryOneTimeCodeRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
