"""Content aggregate root.

Discussions, debates and blog posts share one shape: a titled body with
engagement state (votes, bookmarks, views) and an ordered list of
embedded comments. ``kind`` selects the per-kind rules.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from debatify.domain.model.common import DomainModel, utcnow
from debatify.domain.value import CommentId, ContentId, ContentKind, Stance, UserId, Username


MAX_COMMENT_LENGTH = 10000


def _has_duplicates(members: list[UserId]) -> bool:
    return len(set(members)) != len(members)


class Comment(DomainModel):
    """Comment embedded in a content item.

    Comments are owned by their item and only addressed through it.
    """

    id: CommentId
    author_id: UserId
    author_username: Username
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    stance: Optional[Stance] = None
    likes: int = Field(default=0, ge=0)
    liked_by: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_likes(self) -> "Comment":
        if _has_duplicates(self.liked_by):
            raise ValueError("Duplicate like")
        if self.likes != len(self.liked_by):
            raise ValueError("likes must equal the number of likers")
        return self


class ContentItem(DomainModel):
    """Content aggregate root.

    Business rules:
    - Discussions and debates require a category
    - A private item carries a passcode; a public one never does
    - Nobody is both an upvoter and a downvoter
    - Every counter equals the size of its membership list
    - Comments on debates take a side; comments elsewhere do not
    - ``version`` goes up by one on every persisted change except a view
    """

    id: ContentId
    kind: ContentKind
    title: str = Field(min_length=1, max_length=300)
    body: str = Field(min_length=1, max_length=50000)
    category: Optional[str] = Field(default=None, max_length=100)
    file_urls: list[str] = Field(default_factory=list)
    author_id: UserId
    author_username: Username
    is_private: bool = False
    passcode: Optional[str] = None
    views: int = Field(default=0, ge=0)
    upvotes: int = Field(default=0, ge=0)
    upvoted_by: list[UserId] = Field(default_factory=list)
    downvotes: int = Field(default=0, ge=0)
    downvoted_by: list[UserId] = Field(default_factory=list)
    bookmark_count: int = Field(default=0, ge=0)
    bookmarked_by: list[UserId] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_kind_rules(self) -> "ContentItem":
        """Validate category, passcode and comment stance for this kind."""
        if self.kind.requires_category and not self.category:
            raise ValueError(f"Category is required for {self.kind.value} content")
        if self.is_private and not self.passcode:
            raise ValueError("Passcode is required for private content")
        if not self.is_private and self.passcode is not None:
            raise ValueError("Public content cannot have a passcode")
        for comment in self.comments:
            if self.kind.requires_stance and comment.stance is None:
                raise ValueError("Debate comments require a stance")
            if not self.kind.requires_stance and comment.stance is not None:
                raise ValueError(f"Comments on {self.kind.value} content take no stance")
        return self

    @model_validator(mode="after")
    def validate_engagement(self) -> "ContentItem":
        """Validate membership lists against their counters."""
        for members in (self.upvoted_by, self.downvoted_by, self.bookmarked_by):
            if _has_duplicates(members):
                raise ValueError("Duplicate member in engagement list")
        if set(self.upvoted_by) & set(self.downvoted_by):
            raise ValueError("A user cannot both upvote and downvote")
        if self.upvotes != len(self.upvoted_by):
            raise ValueError("upvotes must equal the number of upvoters")
        if self.downvotes != len(self.downvoted_by):
            raise ValueError("downvotes must equal the number of downvoters")
        if self.bookmark_count != len(self.bookmarked_by):
            raise ValueError("bookmark_count must equal the number of bookmarkers")
        return self

    def comment_index(self, comment_id: CommentId) -> Optional[int]:
        """Position of a comment in the list, or None."""
        for index, comment in enumerate(self.comments):
            if comment.id == comment_id:
                return index
        return None

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        index = self.comment_index(comment_id)
        return None if index is None else self.comments[index]

    def is_bookmarked_by(self, user_id: Optional[UserId]) -> bool:
        return user_id is not None and user_id in self.bookmarked_by
