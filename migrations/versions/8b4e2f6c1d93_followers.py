"""followers

Add the follow ledger: one row per (follower, followee) pair, never
pointing at the follower itself.

Revision ID: 8b4e2f6c1d93
Revises: 3f1c9b2d7a40
Create Date: 2026-10-19 14:02:17.604311

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8b4e2f6c1d93"
down_revision: Union[str, Sequence[str], None] = "3f1c9b2d7a40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "followers",
        sa.Column("follower_id", sa.UUID(), nullable=False),
        sa.Column("followee_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["follower_id"], ["principals.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["followee_id"], ["principals.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("follower_id", "followee_id", name="uq_follower"),
        sa.CheckConstraint("follower_id <> followee_id", name="ck_followers_not_self"),
    )
    op.create_index("idx_followers_followee_id", "followers", ["followee_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_followers_followee_id", table_name="followers")
    op.drop_table("followers")
