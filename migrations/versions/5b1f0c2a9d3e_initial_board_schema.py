"""initial board schema

Revision ID: 5b1f0c2a9d3e
Revises:
Create Date: 2026-10-19 09:12:44.318201

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5b1f0c2a9d3e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create post, rate_limit_event and upvote tables."""
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("author_token", sa.String(length=255), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["parent_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_post_author_token_created_at", "post", ["author_token", "created_at"]
    )
    op.create_index("ix_post_parent_id_created_at", "post", ["parent_id", "created_at"])

    op.create_table(
        "rate_limit_event",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_token", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_rate_limit_event_author_token_created_at",
        "rate_limit_event",
        ["author_token", "created_at"],
    )

    op.create_table(
        "upvote",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("ip_address", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "ip_address", name="uq_upvote_post_id_ip_address"),
    )
    op.create_index("ix_upvote_post_id", "upvote", ["post_id"])


def downgrade() -> None:
    """Drop the board tables."""
    op.drop_index("ix_upvote_post_id", table_name="upvote")
    op.drop_table("upvote")
    op.drop_index(
        "ix_rate_limit_event_author_token_created_at", table_name="rate_limit_event"
    )
    op.drop_table("rate_limit_event")
    op.drop_index("ix_post_parent_id_created_at", table_name="post")
    op.drop_index("ix_post_author_token_created_at", table_name="post")
    op.drop_table("post")
