"""Blob storage domain service."""

from dataclasses import dataclass

import logfire

from debatify.config import StorageSettings
from debatify.domain.error import ValidationError

from .base import Service


class BlobStorage:
    """Blob storage interface."""

    async def upload(self, data: bytes, filename: str, content_type: str) -> str:
        """Store bytes and return their public URL.

        Raises:
            AdapterError: Upload failed
        """
        raise NotImplementedError


@dataclass(frozen=True)
class Upload:
    """A file received from a client, not yet stored."""

    data: bytes
    filename: str
    content_type: str


class StorageService(Service):
    """Validates and stores user uploads."""

    def __init__(self, blob_storage: BlobStorage, storage_settings: StorageSettings) -> None:
        self.blob_storage = blob_storage
        self.settings = storage_settings

    def _check(self, upload: Upload, allowed: list[str]) -> None:
        if not upload.data:
            raise ValidationError("No file uploaded")
        if len(upload.data) > self.settings.max_upload_bytes:
            raise ValidationError("File is too large")
        if upload.content_type not in allowed:
            raise ValidationError(f"Unsupported file type: {upload.content_type}")

    async def store_image(self, data: bytes, filename: str, content_type: str) -> str:
        """Upload an image.

        Returns:
            Public URL of the stored image

        Raises:
            ValidationError: Empty, too large, or not an allowed image type
        """
        with logfire.span(
            "storage_service.store_image", content_type=content_type, size=len(data)
        ):
            self._check(
                Upload(data, filename, content_type),
                self.settings.allowed_content_types,
            )
            url = await self.blob_storage.upload(data, filename, content_type)
            logfire.info("Image stored", url=url)
            return url

    def check_attachments(self, uploads: list[Upload]) -> None:
        """Validate blog attachments without storing anything.

        Raises:
            ValidationError: Too many files, or one is empty, too large or
                of a type that is not allowed
        """
        if len(uploads) > self.settings.max_attachments:
            raise ValidationError(
                f"At most {self.settings.max_attachments} files can be attached"
            )
        for upload in uploads:
            self._check(upload, self.settings.attachment_content_types)

    async def store_attachments(self, uploads: list[Upload]) -> list[str]:
        """Validate, then upload every attachment in order.

        Returns:
            Public URLs, one per upload
        """
        with logfire.span("storage_service.store_attachments", count=len(uploads)):
            self.check_attachments(uploads)
            urls = []
            for upload in uploads:
                urls.append(
                    await self.blob_storage.upload(
                        upload.data, upload.filename, upload.content_type
                    )
                )
            logfire.info("Attachments stored", count=len(urls))
            return urls
