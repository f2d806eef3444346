"""Blob storage infrastructure providers."""

from dishka import Scope, provide

from debatify.adapter.storage import HttpBlobStorage
from debatify.config import StorageSettings
from debatify.domain.service import BlobStorage
from debatify.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production blob storage provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_storage(self, storage_settings: StorageSettings) -> BlobStorage:
        """Provide HTTP blob storage.

        Raises:
            ValueError: If no storage API key is configured
        """
        if not storage_settings.api_key:
            raise ValueError(
                "Storage API key not configured. Set STORAGE__API_KEY environment variable."
            )

        return HttpBlobStorage(
            upload_url=storage_settings.upload_url,
            api_key=storage_settings.api_key,
        )
