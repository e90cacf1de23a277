"""Jobs queue table

Revision ID: 20261018_01
Revises:
Create Date: 2026-10-18
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "20261018_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "jobs",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("config_type", sa.Text(), nullable=False),
        sa.Column("scope", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default=sa.text("'pending'")),
        sa.Column("config", postgresql.JSONB(), nullable=False),
        sa.Column("created_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at_utc", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("config_type IN ('sync', 'reset_connection')", name="ck_jobs_config_type"),
        sa.CheckConstraint(
            "status IN ('pending', 'running', 'incomplete', 'failed', 'succeeded', 'cancelled')",
            name="ck_jobs_status",
        ),
    )
    op.create_index(
        "ux_jobs_scope_active",
        "jobs",
        ["scope"],
        unique=True,
        postgresql_where=sa.text("status IN ('pending', 'running', 'incomplete')"),
    )
    op.create_index("ix_jobs_created_at_utc", "jobs", ["created_at_utc"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_jobs_created_at_utc", table_name="jobs")
    op.drop_index("ux_jobs_scope_active", table_name="jobs")
    op.drop_table("jobs")
