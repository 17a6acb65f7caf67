"""Create feed, category and product tables.

Revision ID: 001
Revises:
Create Date: 2026-10-16

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
    """Create feed, category and product tables."""
    # Feeds
    op.create_table(
        'tweakwise_feeds',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False, server_default='Main feed'),
        sa.Column('token', sa.String(255), nullable=False),
        sa.Column('integration', sa.String(50), nullable=False),
        sa.Column('way_of_search', sa.String(50), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    # Feed to sales channel domain assignments; a domain belongs to one feed
    op.create_table(
        'tweakwise_feed_sales_channel_domains',
        sa.Column('feed_id', sa.String(36),
                  sa.ForeignKey('tweakwise_feeds.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('sales_channel_domain_id', sa.String(36), primary_key=True),
        sa.UniqueConstraint('sales_channel_domain_id', name='uq_tweakwise_feed_domain'),
    )

    # Categories
    op.create_table(
        'categories',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('parent_id', sa.String(36),
                  sa.ForeignKey('categories.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('visible', sa.Boolean(), nullable=False, server_default='true'),
    )

    # Products and variants
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('parent_id', sa.String(36),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('product_number', sa.String(64), nullable=False, unique=True),
        sa.Column('variant_listing_config', sa.JSON(), nullable=True),
        sa.Column('configurator_group_config', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )


def downgrade() -> None:
    """Drop feed, category and product tables."""
    op.drop_table('products')
    op.drop_table('categories')
    op.drop_table('tweakwise_feed_sales_channel_domains')
    op.drop_table('tweakwise_feeds')
