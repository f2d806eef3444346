"""Blob storage over an HTTP upload API."""

import httpx
import logfire

from debatify.adapter.error import ProviderError
from debatify.domain.service.storage_service import BlobStorage


class HttpBlobStorage(BlobStorage):
    """Uploads files as multipart form data and returns the hosted URL."""

    def __init__(self, upload_url: str, api_key: str) -> None:
        self.upload_url = upload_url
        self.api_key = api_key

    async def upload(self, data: bytes, filename: str, content_type: str) -> str:
        """Upload bytes.

        Returns:
            Public URL reported by the provider (``secure_url`` or ``url``)

        Raises:
            ProviderError: Upload failed or the response carried no URL
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.upload_url,
                    files={"file": (filename, data, content_type)},
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    timeout=30.0,
                )

                if response.status_code >= 400:
                    logfire.error(
                        "Blob upload failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise ProviderError(
                        "storage",
                        f"Upload failed: {response.status_code}",
                        status_code=response.status_code,
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Blob upload HTTP error", error=str(e))
            raise ProviderError("storage", f"HTTP error during upload: {e}") from e

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise ProviderError("storage", "Upload response did not include a URL")
        return url


class MockBlobStorage(BlobStorage):
    """Mock blob storage for testing.

    Keeps uploads in memory and returns deterministic URLs.
    """

    def __init__(self, base_url: str = "https://blobs.test") -> None:
        self.base_url = base_url
        self.uploads: dict[str, bytes] = {}

    async def upload(self, data: bytes, filename: str, content_type: str) -> str:
        url = f"{self.base_url}/{len(self.uploads) + 1}/{filename}"
        self.uploads[url] = data
        return url
