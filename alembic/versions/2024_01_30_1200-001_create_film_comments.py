"""create film_comments

Revision ID: 001
Revises:
Create Date: 2024-01-30 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'film_comments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('film_id', sa.Integer(), nullable=False),
        sa.Column('customer_name', sa.String(length=255), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(
            ['film_id'], ['film.film_id'],
            name='fk_film_comments_film_id',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_film_comments_film_id'), 'film_comments', ['film_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_film_comments_film_id'), table_name='film_comments')
    op.drop_table('film_comments')
