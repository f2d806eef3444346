"""Content use cases."""

from .create_content import CreateContentRequest, CreateContentUseCase
from .delete_content import (
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
)
from .get_content import GetContentRequest, GetContentUseCase
from .list_bookmarks import (
    ListBookmarksRequest,
    ListBookmarksResponse,
    ListBookmarksUseCase,
)
from .list_content import ListContentRequest, ListContentResponse, ListContentUseCase

__all__ = [
    "CreateContentRequest",
    "CreateContentUseCase",
    "DeleteContentRequest",
    "DeleteContentResponse",
    "DeleteContentUseCase",
    "GetContentRequest",
    "GetContentUseCase",
    "ListBookmarksRequest",
    "ListBookmarksResponse",
    "ListBookmarksUseCase",
    "ListContentRequest",
    "ListContentResponse",
    "ListContentUseCase",
]
