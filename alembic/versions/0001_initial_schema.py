"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Creates the users and requests tables.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MEDIA_TYPES = ("movie", "tv", "season", "episode")
STATUSES = ("new", "pending", "complete")


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- requests ---
    op.create_table(
        "requests",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("tmdb_id", sa.Integer, nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("type", sa.Enum(*MEDIA_TYPES, name="mediatype"), nullable=False),
        sa.Column("status", sa.Enum(*STATUSES, name="requeststatus"), nullable=False, server_default="new"),
        sa.Column("requester_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("poster_path", sa.String(255), nullable=True),
        sa.Column("request_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("comment", sa.Text, nullable=True),
        sa.Column("admin_comment", sa.Text, nullable=True),
        sa.Column("show_id", sa.Integer, nullable=True),
        sa.Column("show_title", sa.String(500), nullable=True),
        sa.Column("season_number", sa.Integer, nullable=True),
        sa.Column("episode_number", sa.Integer, nullable=True),
        sa.Column("episode_title", sa.String(500), nullable=True),
    )
    op.create_index("ix_requests_request_date", "requests", ["request_date"])


def downgrade() -> None:
    op.drop_index("ix_requests_request_date", table_name="requests")
    op.drop_table("requests")
    op.drop_table("users")
    sa.Enum(name="requeststatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="mediatype").drop(op.get_bind(), checkfirst=True)
