"""Initial schema for Panelhub

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Creates the tables backing the data source, correlation and playlist stores:
- data_source
- correlation
- playlist
- playlist_item

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "data_source",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("org_id", sa.Integer(), nullable=False),
        sa.Column("uid", sa.String(40), nullable=False),
        sa.Column("name", sa.String(190), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("url", sa.String(255), nullable=True),
        sa.Column("read_only", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created", sa.DateTime(), nullable=False),
        sa.Column("updated", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "uid", name="uq_data_source_org_id_uid"),
        sa.UniqueConstraint("org_id", "name", name="uq_data_source_org_id_name"),
    )
    op.create_index("ix_data_source_org_id", "data_source", ["org_id"])

    op.create_table(
        "correlation",
        sa.Column("uid", sa.String(40), nullable=False),
        sa.Column("source_uid", sa.String(40), nullable=False),
        sa.Column("target_uid", sa.String(40), nullable=False),
        sa.Column("label", sa.Text(), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("uid", "source_uid"),
    )
    op.create_index("ix_correlation_source_uid", "correlation", ["source_uid"])
    op.create_index("ix_correlation_target_uid", "correlation", ["target_uid"])

    op.create_table(
        "playlist",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("uid", sa.String(80), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("interval", sa.String(255), nullable=False),
        sa.Column("org_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("org_id", "uid", name="uq_playlist_org_id_uid"),
    )
    op.create_index("ix_playlist_org_id", "playlist", ["org_id"])

    op.create_table(
        "playlist_item",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("playlist_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False, server_default=""),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_playlist_item_playlist_id", "playlist_item", ["playlist_id"])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_index("ix_playlist_item_playlist_id", table_name="playlist_item")
    op.drop_table("playlist_item")
    op.drop_index("ix_playlist_org_id", table_name="playlist")
    op.drop_table("playlist")
    op.drop_index("ix_correlation_target_uid", table_name="correlation")
    op.drop_index("ix_correlation_source_uid", table_name="correlation")
    op.drop_table("correlation")
    op.drop_index("ix_data_source_org_id", table_name="data_source")
    op.drop_table("data_source")
