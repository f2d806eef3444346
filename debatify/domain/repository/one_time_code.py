"""One-time code repository interface."""

from abc import ABC, abstractmethod
from typing import List

from debatify.domain.model.one_time_code import OneTimeCode


class OneTimeCodeRepository(ABC):
    """Repository for OneTimeCode entities."""

    @abstractmethod
    async def save(self, code: OneTimeCode) -> OneTimeCode:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> List[OneTimeCode]:
        """List the codes issued to an email, newest first."""
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> int:
        """Delete every code issued to an email.

        Returns:
            Number of codes deleted
        """
        pass
