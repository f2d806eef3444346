"""initial_schema

Create the schema for Debatify:
- Users (password accounts, follow graph mirrored on both ends)
- Content items (discussions, debates and blogs in one table, with
  embedded comments and a version column for compare-and-set writes)
- Notifications
- One-time codes (email verification, password reset)

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:44.218301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("profile_picture", sa.Text(), nullable=False),
        sa.Column(
            "followers",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "followings",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_email", "users", ["email"])

    # ========================================================================
    # CONTENT_ITEMS table
    # ========================================================================
    op.create_table(
        "content_items",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column(
            "file_urls", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_username", sa.String(50), nullable=False),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("passcode", sa.String(255), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "upvoted_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "downvoted_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("bookmark_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "bookmarked_by",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "kind IN ('discussion', 'debate', 'blog')", name="ck_content_items_kind"
        ),
        sa.CheckConstraint(
            "(is_private AND passcode IS NOT NULL) OR (NOT is_private AND passcode IS NULL)",
            name="ck_content_items_passcode",
        ),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0 AND bookmark_count >= 0 AND views >= 0",
            name="ck_content_items_counters",
        ),
    )
    op.create_index(
        "idx_content_items_kind_created",
        "content_items",
        ["kind", sa.text("created_at DESC")],
    )
    op.create_index("idx_content_items_author", "content_items", ["author_id"])
    op.create_index(
        "idx_content_items_bookmarked_by",
        "content_items",
        ["bookmarked_by"],
        postgresql_using="gin",
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("related_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["actor_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('follow', 'unfollow', 'upvote', 'downvote', 'comment', 'comment_like')",
            name="ck_notifications_type",
        ),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_notifications_related", "notifications", ["related_id"])

    # ========================================================================
    # ONE_TIME_CODES table
    # ========================================================================
    op.create_table(
        "one_time_codes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("purpose", sa.String(20), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_one_time_codes_email", "one_time_codes", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_one_time_codes_email", table_name="one_time_codes")
    op.drop_table("one_time_codes")

    op.drop_index("idx_notifications_related", table_name="notifications")
    op.drop_index("idx_notifications_recipient_created", table_name="notifications")
    op.drop_table("notifications")

    op.drop_index("idx_content_items_bookmarked_by", table_name="content_items")
    op.drop_index("idx_content_items_author", table_name="content_items")
    op.drop_index("idx_content_items_kind_created", table_name="content_items")
    op.drop_table("content_items")

    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")
