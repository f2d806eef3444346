"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

import logfire

# Settings read the environment; keep tests off any real services.
os.environ.setdefault("ENVIRONMENT", "test")
# Cheapest bcrypt cost factor
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")

# Instrumentation calls need a configured Logfire; keep it local and silent.
logfire.configure(send_to_logfire=False, console=False)

from debatify.domain.model import ContentItem, User  # noqa: E402
from debatify.domain.value import (  # noqa: E402
    ContentId,
    ContentKind,
    UserId,
    Username,
)

# Not a bcrypt hash; users built with it can never log in
UNUSABLE_PASSWORD_HASH = "!"


def make_user(
    username: str = "alice",
    email: str | None = None,
    is_verified: bool = True,
    password_hash: str = UNUSABLE_PASSWORD_HASH,
) -> User:
    """Build a user with sensible defaults."""
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=email or f"{username}@example.com",
        password_hash=password_hash,
        is_verified=is_verified,
        created_at=now,
        updated_at=now,
    )


def make_item(
    author: User,
    kind: ContentKind = ContentKind.DISCUSSION,
    title: str = "Is remote work here to stay?",
    body: str = "Let's talk about it.",
    is_private: bool = False,
    passcode: str | None = None,
    **overrides,
) -> ContentItem:
    """Build a content item authored by ``author``.

    Debates and blogs get a category automatically.
    """
    now = datetime.now(timezone.utc)
    created_at = overrides.pop("created_at", now)
    category = overrides.pop("category", None)
    if category is None and kind.requires_category:
        category = "general"

    return ContentItem(
        id=ContentId(uuid4()),
        kind=kind,
        title=title,
        body=body,
        category=category,
        author_id=author.id,
        author_username=author.username,
        is_private=is_private,
        passcode=passcode,
        created_at=created_at,
        updated_at=now,
        **overrides,
    )
