"""Initial schema: users, products, orders, order_items

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19

Compatible with both SQLite and PostgreSQL:
- Uses CURRENT_TIMESTAMP instead of now()
- ENUMs stored as VARCHAR (native_enum=False in models)
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    # Users table
    op.create_table('users',
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        # ENUM as VARCHAR for SQLite compatibility
        sa.Column('role', sa.String(length=10), server_default='retailer', nullable=False),
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Products table
    op.create_table('products',
        sa.Column('wholesaler_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(precision=15, scale=2), server_default='0', nullable=False),
        sa.Column('stock', sa.Integer(), server_default='0', nullable=False),
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.CheckConstraint('stock >= 0', name='ck_product_stock_non_negative'),
        sa.ForeignKeyConstraint(['wholesaler_id'], ['users.id'], name='fk_product_wholesaler_id'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_products_wholesaler_id'), 'products', ['wholesaler_id'], unique=False)
    op.create_index('idx_product_wholesaler_stock', 'products', ['wholesaler_id', 'stock'], unique=False)

    # Orders table
    op.create_table('orders',
        sa.Column('wholesaler_id', sa.Integer(), nullable=False),
        sa.Column('retailer_id', sa.Integer(), nullable=False),
        sa.Column('total', sa.Numeric(precision=15, scale=2), server_default='0', nullable=False),
        sa.Column('status', sa.String(length=9), server_default='pending', nullable=False),
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['wholesaler_id'], ['users.id'], name='fk_order_wholesaler_id'),
        sa.ForeignKeyConstraint(['retailer_id'], ['users.id'], name='fk_order_retailer_id'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_orders_wholesaler_id'), 'orders', ['wholesaler_id'], unique=False)
    op.create_index(op.f('ix_orders_retailer_id'), 'orders', ['retailer_id'], unique=False)
    op.create_index('idx_order_wholesaler_status', 'orders', ['wholesaler_id', 'status'], unique=False)
    op.create_index('idx_order_retailer_created_at', 'orders', ['retailer_id', 'created_at'], unique=False)

    # Order items table
    op.create_table('order_items',
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], name='fk_order_item_order_id', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], name='fk_order_item_product_id'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_order_items_order_id'), 'order_items', ['order_id'], unique=False)
    op.create_index(op.f('ix_order_items_product_id'), 'order_items', ['product_id'], unique=False)


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index(op.f('ix_order_items_product_id'), table_name='order_items')
    op.drop_index(op.f('ix_order_items_order_id'), table_name='order_items')
    op.drop_table('order_items')

    op.drop_index('idx_order_retailer_created_at', table_name='orders')
    op.drop_index('idx_order_wholesaler_status', table_name='orders')
    op.drop_index(op.f('ix_orders_retailer_id'), table_name='orders')
    op.drop_index(op.f('ix_orders_wholesaler_id'), table_name='orders')
    op.drop_table('orders')

    op.drop_index('idx_product_wholesaler_stock', table_name='products')
    op.drop_index(op.f('ix_products_wholesaler_id'), table_name='products')
    op.drop_table('products')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
