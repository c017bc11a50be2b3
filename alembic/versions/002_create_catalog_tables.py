"""Create catalog, category, collection, item and photo tables.

Revision ID: 002
Revises: 001
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _translation_table(name: str, owner: str, owner_column: str, with_description: bool) -> None:
    columns = [
        sa.Column(owner_column, sa.Integer(),
                  sa.ForeignKey(f'{owner}.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('language_code', sa.String(10),
                  sa.ForeignKey('languages.code'), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
    ]
    if with_description:
        columns.append(sa.Column('description', sa.Text(), nullable=False, server_default=''))
    op.create_table(name, *columns)


def upgrade() -> None:
    """Create catalog tables."""
    # Catalogs
    op.create_table(
        'colors',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, server_default=''),
        sa.Column('hash_color', sa.String(20), nullable=False),
        sa.UniqueConstraint('name', 'hash_color', name='uq_colors_name_hash'),
    )

    op.create_table(
        'catalogs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
    )

    op.create_table(
        'catalog_localizations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('catalog_id', sa.Integer(),
                  sa.ForeignKey('catalogs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('language_id', sa.Integer(),
                  sa.ForeignKey('languages.id'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.UniqueConstraint('catalog_id', 'language_id', name='uq_catalog_localizations_language'),
    )

    op.create_table(
        'catalog_colors',
        sa.Column('catalog_id', sa.Integer(),
                  sa.ForeignKey('catalogs.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('color_id', sa.Integer(),
                  sa.ForeignKey('colors.id', ondelete='CASCADE'), primary_key=True),
    )

    # Categories
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
    )
    _translation_table('category_translations', 'categories', 'category_id', with_description=False)

    # Photos
    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('is_main', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('hash_color', sa.String(20), nullable=False, server_default=''),
    )

    # Collections
    op.create_table(
        'collections',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('is_producer', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_painted', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_popular', sa.Boolean(), nullable=False, server_default='false', index=True),
        sa.Column('is_new', sa.Boolean(), nullable=False, server_default='false', index=True),
    )
    _translation_table('collection_translations', 'collections', 'collection_id', with_description=True)

    op.create_table(
        'collection_photos',
        sa.Column('collection_id', sa.Integer(),
                  sa.ForeignKey('collections.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('photo_id', sa.Integer(),
                  sa.ForeignKey('photos.id', ondelete='CASCADE'), primary_key=True),
    )

    # Items
    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id'), nullable=False, index=True),
        sa.Column('collection_id', sa.Integer(),
                  sa.ForeignKey('collections.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('size', sa.String(100), nullable=False, server_default=''),
        sa.Column('price', sa.Float(), nullable=False, server_default='0'),
        sa.Column('is_producer', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_painted', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_popular', sa.Boolean(), nullable=False, server_default='false', index=True),
        sa.Column('is_new', sa.Boolean(), nullable=False, server_default='false', index=True),
    )
    _translation_table('item_translations', 'items', 'item_id', with_description=True)

    op.create_table(
        'item_photos',
        sa.Column('item_id', sa.Integer(),
                  sa.ForeignKey('items.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('photo_id', sa.Integer(),
                  sa.ForeignKey('photos.id', ondelete='CASCADE'), primary_key=True),
    )


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('item_photos')
    op.drop_table('item_translations')
    op.drop_table('items')
    op.drop_table('collection_photos')
    op.drop_table('collection_translations')
    op.drop_table('collections')
    op.drop_table('photos')
    op.drop_table('category_translations')
    op.drop_table('categories')
    op.drop_table('catalog_colors')
    op.drop_table('catalog_localizations')
    op.drop_table('catalogs')
    op.drop_table('colors')
