"""SQLAlchemy table definitions for devnet.

These table definitions match the schema defined in Alembic migrations.
User IDs are identity-provider subjects and are stored without foreign keys:
the provider owns accounts and the local users table is only a cache.
"""

from sqlalchemy import (
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
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (synced from the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Provider subject
    Column("name", String(255), nullable=False),
    Column("username", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(255), nullable=False),
    Column("title", String(200), nullable=False),
    Column("project_details", Text, nullable=True),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_projects_user_id", projects_table.c.user_id)

# ============================================================================
# COMMENTS TABLE (post comments)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("user_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="comments_like_count_non_negative"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# PROJECT COMMENTS TABLE
# ============================================================================
project_comments_table = Table(
    "project_comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "project_id",
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        Integer,
        ForeignKey("project_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("user_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "like_count >= 0", name="project_comments_like_count_non_negative"
    ),
)

Index("idx_project_comments_project_id", project_comments_table.c.project_id)
Index("idx_project_comments_parent_id", project_comments_table.c.parent_id)
Index("idx_project_comments_created_at", project_comments_table.c.created_at)
