"""In-memory one-time code repository for testing."""

from typing import List

from debatify.domain.model import OneTimeCode
from debatify.domain.repository import OneTimeCodeRepository

from .store import InMemoryStore


class InMemoryOneTimeCodeRepository(OneTimeCodeRepository):
    """In-memory implementation of OneTimeCodeRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def save(self, code: OneTimeCode) -> OneTimeCode:
        self._store.codes.append(code)
        return code

    async def find_by_email(self, email: str) -> List[OneTimeCode]:
        mine = [c for c in self._store.codes if c.email == email]
        return sorted(mine, key=lambda c: c.created_at, reverse=True)

    async def delete_by_email(self, email: str) -> int:
        before = len(self._store.codes)
        self._store.codes[:] = [c for c in self._store.codes if c.email != email]
        return before - len(self._store.codes)
