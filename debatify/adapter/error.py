"""Infrastructure layer errors."""

from typing import Optional


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """The email or blob storage provider failed or answered unusably.

    ``status_code`` is the provider's HTTP status when it answered at all.
    """

    def __init__(
        self, provider: str, message: str, status_code: Optional[int] = None
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        super().__init__(message)
