"""SQLAlchemy table definitions for the forum.

These table definitions are used for classical ORM mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PRINCIPALS TABLE
# ============================================================================
principals_table = Table(
    "principals",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("external_id", String(255), nullable=False),  # Identity provider user id
    Column("display_name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("rank", SmallInteger, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("external_id", name="uq_principals_external_id"),
    CheckConstraint("rank IN (0, 1, 9)", name="ck_principals_rank"),
)

Index("idx_principals_rank", principals_table.c.rank)

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False),
    Column("description", String(1000), nullable=False, server_default=""),
    Column("approved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_communities_name", communities_table.c.name)

# ============================================================================
# MEMBERSHIPS TABLE
# ============================================================================
memberships_table = Table(
    "memberships",
    metadata,
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "principal_id",
        UUID,
        ForeignKey("principals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("rank", SmallInteger, nullable=False, server_default="1"),
    UniqueConstraint("community_id", "principal_id", name="uq_membership"),
    CheckConstraint("rank IN (1, 9, 10)", name="ck_memberships_rank"),
)

Index("idx_memberships_principal_id", memberships_table.c.principal_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "community_id",
        UUID,
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("principals.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=False),
    Column("edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_community_created", posts_table.c.community_id, posts_table.c.created_at)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("principals.id", ondelete="CASCADE"), nullable=False
    ),
    Column("body", Text, nullable=False),
    # No FK: a hard-deleted parent racing a new reply leaves an orphan,
    # which the tree builder renders as a root
    Column("parent_id", UUID, nullable=True),
    Column("has_descendants", Boolean, nullable=False, server_default="false"),
    Column("edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# FOLLOWERS TABLE
# ============================================================================
followers_table = Table(
    "followers",
    metadata,
    Column(
        "follower_id",
        UUID,
        ForeignKey("principals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "followee_id",
        UUID,
        ForeignKey("principals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "followee_id", name="uq_follower"),
    CheckConstraint("follower_id <> followee_id", name="ck_followers_not_self"),
)

Index("idx_followers_followee_id", followers_table.c.followee_id)
