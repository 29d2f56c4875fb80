"""Initial schema - stations, lines, and sections

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "stations",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("name", name="uq_station_name"),
    )

    op.create_table(
        "lines",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("color", sa.String(32), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint("name", name="uq_line_name"),
    )

    op.create_table(
        "sections",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "line_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("lines.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "up_station_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("stations.id"),
            nullable=False,
        ),
        sa.Column(
            "down_station_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("stations.id"),
            nullable=False,
        ),
        sa.Column("distance", sa.Integer, nullable=False),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.CheckConstraint("up_station_id != down_station_id", name="ck_section_no_self_ref"),
        sa.CheckConstraint("distance > 0", name="ck_section_positive_distance"),
    )
    op.create_index("ix_sections_line_id", "sections", ["line_id"])
    op.create_index("ix_sections_up_station_id", "sections", ["up_station_id"])
    op.create_index("ix_sections_down_station_id", "sections", ["down_station_id"])


def downgrade() -> None:
    op.drop_index("ix_sections_down_station_id", table_name="sections")
    op.drop_index("ix_sections_up_station_id", table_name="sections")
    op.drop_index("ix_sections_line_id", table_name="sections")
    op.drop_table("sections")
    op.drop_table("lines")
    op.drop_table("stations")
