"""Initial schema — jokes.

Revision ID: 001_create_jokes
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_jokes"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "jokes",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("jokester_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_jokes_jokester_id", "jokes", ["jokester_id"])


def downgrade() -> None:
    op.drop_index("ix_jokes_jokester_id", table_name="jokes")
    op.drop_table("jokes")
