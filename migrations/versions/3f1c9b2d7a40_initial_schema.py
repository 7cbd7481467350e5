"""initial_schema

Create the forum schema:
- Principals (authenticated participants with a global rank)
- Communities (suggested, then approved by a global admin)
- Memberships (per-community rank, unique per community and principal)
- Posts
- Comments (flat rows with a parent pointer, threaded when read)

Revision ID: 3f1c9b2d7a40
Revises:
Create Date: 2026-10-19 09:12:44.310522

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9b2d7a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # PRINCIPALS table
    # ========================================================================
    op.create_table(
        "principals",
        _id(),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("rank", sa.SmallInteger(), nullable=False, server_default="1"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id", name="uq_principals_external_id"),
        sa.CheckConstraint("rank IN (0, 1, 9)", name="ck_principals_rank"),
    )
    op.create_index("idx_principals_rank", "principals", ["rank"])

    # ========================================================================
    # COMMUNITIES table
    # ========================================================================
    op.create_table(
        "communities",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False, server_default=""),
        sa.Column("approved", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_communities_name", "communities", ["name"])

    # ========================================================================
    # MEMBERSHIPS table
    # ========================================================================
    op.create_table(
        "memberships",
        sa.Column("community_id", sa.UUID(), nullable=False),
        sa.Column("principal_id", sa.UUID(), nullable=False),
        sa.Column("rank", sa.SmallInteger(), nullable=False, server_default="1"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["principal_id"], ["principals.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("community_id", "principal_id", name="uq_membership"),
        sa.CheckConstraint("rank IN (1, 9, 10)", name="ck_memberships_rank"),
    )
    op.create_index("idx_memberships_principal_id", "memberships", ["principal_id"])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id(),
        sa.Column("community_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("edited", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("edited_at", nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["principals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_community_created", "posts", ["community_id", "created_at"]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "has_descendants", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("edited", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("edited_at", nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["principals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_post_created", "comments", ["post_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("memberships")
    op.drop_table("communities")
    op.drop_table("principals")
