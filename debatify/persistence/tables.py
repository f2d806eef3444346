"""SQLAlchemy table definitions for Debatify.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column("bio", Text, nullable=False, server_default=""),
    Column("profile_picture", Text, nullable=False),
    # Follow graph, mirrored on both ends
    Column(
        "followers",
        postgresql.ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "followings",
        postgresql.ARRAY(UUID),
        nullable=False,
        server_default="{}",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# CONTENT ITEMS TABLE (discussions, debates, blogs)
# ============================================================================
content_items_table = Table(
    "content_items",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("kind", String(20), nullable=False),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("category", String(100), nullable=True),
    Column("file_urls", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("author_username", String(50), nullable=False),
    Column("is_private", Boolean, nullable=False, server_default="false"),
    Column("passcode", String(255), nullable=True),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("upvoted_by", postgresql.ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "downvoted_by", postgresql.ARRAY(UUID), nullable=False, server_default="{}"
    ),
    Column("bookmark_count", Integer, nullable=False, server_default="0"),
    Column(
        "bookmarked_by", postgresql.ARRAY(UUID), nullable=False, server_default="{}"
    ),
    # Ordered list of embedded comments
    Column("comments", postgresql.JSONB, nullable=False, server_default="[]"),
    # Bumped on every write; updates are conditional on it
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "kind IN ('discussion', 'debate', 'blog')", name="ck_content_items_kind"
    ),
    CheckConstraint(
        "(is_private AND passcode IS NOT NULL) OR (NOT is_private AND passcode IS NULL)",
        name="ck_content_items_passcode",
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0 AND bookmark_count >= 0 AND views >= 0",
        name="ck_content_items_counters",
    ),
)

Index(
    "idx_content_items_kind_created",
    content_items_table.c.kind,
    content_items_table.c.created_at.desc(),
)
Index("idx_content_items_author", content_items_table.c.author_id)
Index(
    "idx_content_items_bookmarked_by",
    content_items_table.c.bookmarked_by,
    postgresql_using="gin",
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "recipient_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("actor_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("type", String(20), nullable=False),
    Column("message", Text, nullable=False),
    # Content item id, or the actor id for follow/unfollow
    Column("related_id", UUID, nullable=False),
    Column("comment_id", UUID, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "type IN ('follow', 'unfollow', 'upvote', 'downvote', 'comment', 'comment_like')",
        name="ck_notifications_type",
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index("idx_notifications_related", notifications_table.c.related_id)

# ============================================================================
# ONE-TIME CODES TABLE
# ============================================================================
one_time_codes_table = Table(
    "one_time_codes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(255), nullable=False),
    Column("code", String(10), nullable=False),
    Column("purpose", String(20), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_one_time_codes_email", one_time_codes_table.c.email)
