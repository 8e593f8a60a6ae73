"""Create generations table

Revision ID: 3a9c1e7f5b20
Revises:
Create Date: 2025-11-02 10:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a9c1e7f5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the append-only table of code generations."""
    op.create_table(
        'generations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('prompt', sa.Text(), nullable=False),
        sa.Column('language', sa.String(length=64), nullable=False),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_generations_id'), 'generations', ['id'], unique=False)
    op.create_index(op.f('ix_generations_language'), 'generations', ['language'], unique=False)


def downgrade() -> None:
    """Drop the generations table."""
    op.drop_index(op.f('ix_generations_language'), table_name='generations')
    op.drop_index(op.f('ix_generations_id'), table_name='generations')
    op.drop_table('generations')
