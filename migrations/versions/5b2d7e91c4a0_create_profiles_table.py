"""create_profiles_table

Revision ID: 5b2d7e91c4a0
Revises:
Create Date: 2026-10-19 09:12:04.311582

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b2d7e91c4a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the single-row profiles table."""
    json_document = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')
    op.create_table('profiles',
        sa.Column('key', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('education', sa.Text(), nullable=True),
        sa.Column('links', json_document, nullable=False),
        sa.Column('preferences', json_document, nullable=False),
        sa.Column('skills', json_document, nullable=False),
        sa.Column('projects', json_document, nullable=False),
        sa.Column('work', json_document, nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('key'),
    )


def downgrade() -> None:
    """Drop the profiles table."""
    op.drop_table('profiles')
