"""User aggregate root.

Users sign up with email and password, verify the email with a one-time
code, and follow each other. The follow relation is stored on both ends.
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from debatify.domain.model.common import DomainModel, utcnow
from debatify.domain.value import UserId, Username

DEFAULT_PROFILE_PICTURE = "/images/default-avatar.png"


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - A user never follows itself
    - followers/followings hold no duplicates
    - A.followings contains B exactly when B.followers contains A
      (both ends are written together by the repository follow methods)
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    is_verified: bool = False
    bio: str = Field(default="", max_length=500)
    profile_picture: str = DEFAULT_PROFILE_PICTURE
    followers: list[UserId] = Field(default_factory=list)
    followings: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are stored trimmed and lower-cased."""
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_follow_lists(self) -> "User":
        """Reject self-follows and duplicate edges."""
        if self.id in self.followers or self.id in self.followings:
            raise ValueError("A user cannot follow itself")
        if len(set(self.followers)) != len(self.followers):
            raise ValueError("Duplicate follower")
        if len(set(self.followings)) != len(self.followings):
            raise ValueError("Duplicate following")
        return self

    def is_following(self, other_id: UserId) -> bool:
        return other_id in self.followings
