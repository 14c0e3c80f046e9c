"""create blocked_domains table

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "blocked_domains",
        sa.Column("domain_name", sa.Text(), nullable=False),
        sa.UniqueConstraint("domain_name"),
    )


def downgrade() -> None:
    op.drop_table("blocked_domains")
