"""create volume_binds table

Revision ID: 003
Revises: 002
Create Date: 2026-09-15 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # The composite primary key guarantees one bind per (app, mount_point, volume).
    op.create_table(
        "volume_binds",
        sa.Column("app", sa.String(255), nullable=False),
        sa.Column("mount_point", sa.String(1024), nullable=False),
        sa.Column("volume", sa.String(255), nullable=False),
        sa.Column("mode", sa.String(2), nullable=False, server_default="rw"),
        sa.PrimaryKeyConstraint("app", "mount_point", "volume"),
        sa.CheckConstraint("mode IN ('ro', 'rw')", name="ck_volume_binds_mode"),
    )
    op.create_index("ix_volume_binds_volume", "volume_binds", ["volume"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_volume_binds_volume", table_name="volume_binds")
    op.drop_table("volume_binds")
