"""add news

Revision ID: b81f05e3c6d2
Revises: 7c2e41d9a0b3
Create Date: 2026-10-14 18:02:51.440917

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b81f05e3c6d2'
down_revision: Union[str, Sequence[str], None] = '7c2e41d9a0b3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "news",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False, unique=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_on",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_news_id", "news", ["id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_news_id", table_name="news")
    op.drop_table("news")
