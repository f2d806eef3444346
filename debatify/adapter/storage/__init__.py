"""Blob storage adapter."""

from .client import HttpBlobStorage, MockBlobStorage

__all__ = ["HttpBlobStorage", "MockBlobStorage"]
