"""create blogs and comments

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "blogs",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_by", sa.String(64), nullable=False),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_blogs_created_by", "blogs", ["created_by"])

    op.create_table(
        "comments",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_by", sa.String(64), nullable=False),
        sa.Column("blog_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_comments_created_by", "comments", ["created_by"])
    op.create_index("ix_comments_blog_id_created_at", "comments", ["blog_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_comments_blog_id_created_at", table_name="comments")
    op.drop_index("ix_comments_created_by", table_name="comments")
    op.drop_table("comments")
    op.drop_index("ix_blogs_created_by", table_name="blogs")
    op.drop_table("blogs")
