# mypy: ignore-errors
"""
Migration Alembic initiale: saisons, étoiles, occasions, invocations, admins.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "20260301_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "seasons",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("color_hex", sa.String(length=7), nullable=False),
        sa.Column("icon_name", sa.String(length=50), nullable=False),
        sa.Column("duration", sa.String(length=100), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "stars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "season_id",
            sa.Integer(),
            sa.ForeignKey("seasons.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("weather_info", sa.Text(), nullable=True),
        sa.Column("agricultural_info", sa.JSON(), nullable=False),
        sa.Column("tips", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_stars_season_id", "stars", ["season_id"])
    op.create_index("ix_stars_start_date", "stars", ["start_date"])
    op.create_table(
        "occasions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("hijri_month", sa.Integer(), nullable=False),
        sa.Column("hijri_day", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("prayer_title", sa.String(length=500), nullable=False),
        sa.Column("prayer_text", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "prayers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("text", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "admins",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("admins")
    op.drop_table("prayers")
    op.drop_table("occasions")
    op.drop_index("ix_stars_start_date", table_name="stars")
    op.drop_index("ix_stars_season_id", table_name="stars")
    op.drop_table("stars")
    op.drop_table("seasons")
