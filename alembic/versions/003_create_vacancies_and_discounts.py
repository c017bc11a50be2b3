"""Create vacancies and discounts tables.

Revision ID: 003
Revises: 002
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '003'
down_revision: Union[str, None] = '002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create vacancies, vacancy_translations and discounts tables."""
    op.create_table(
        'vacancies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('salary', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true', index=True),
    )

    op.create_table(
        'vacancy_translations',
        sa.Column('vacancy_id', sa.Integer(),
                  sa.ForeignKey('vacancies.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('language_code', sa.String(10),
                  sa.ForeignKey('languages.code'), primary_key=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('requirements', sa.JSON(), nullable=False),
        sa.Column('responsibilities', sa.JSON(), nullable=False),
        sa.Column('conditions', sa.JSON(), nullable=False),
        sa.Column('information', sa.JSON(), nullable=False),
    )

    op.create_table(
        'discounts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('discount_type', sa.String(20), nullable=False, index=True),
        sa.Column('target_id', sa.Integer(), nullable=False, index=True),
        sa.Column('discount_percentage', sa.Float(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
    )

    # Lookups by target when pricing listings
    op.create_index(
        'ix_discounts_type_target',
        'discounts',
        ['discount_type', 'target_id'],
    )


def downgrade() -> None:
    """Drop vacancies and discounts tables."""
    op.drop_index('ix_discounts_type_target', table_name='discounts')
    op.drop_table('discounts')
    op.drop_table('vacancy_translations')
    op.drop_table('vacancies')
