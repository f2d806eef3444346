"""Engagement use cases."""

from .bookmark import BookmarkRequest, BookmarkResponse, BookmarkUseCase
from .comment import (
    AddCommentRequest,
    AddCommentUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
)
from .vote import VoteRequest, VoteResponse, VoteUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "BookmarkRequest",
    "BookmarkResponse",
    "BookmarkUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "VoteRequest",
    "VoteResponse",
    "VoteUseCase",
]
