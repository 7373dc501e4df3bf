"""create volumes table

Revision ID: 002
Revises: 001
Create Date: 2026-09-14 10:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # pool and team_owner are plain references: the registries are
    # checked at validation time, not by foreign keys.
    op.create_table(
        "volumes",
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("pool", sa.String(255), nullable=False),
        sa.Column("plan_name", sa.String(255), nullable=False),
        sa.Column("plan_opts", sa.JSON(), nullable=False),
        sa.Column("team_owner", sa.String(255), nullable=False),
        sa.Column("status", sa.String(255), nullable=False, server_default=""),
        sa.Column("opts", sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    op.drop_table("volumes")
