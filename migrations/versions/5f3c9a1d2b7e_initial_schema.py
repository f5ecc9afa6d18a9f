"""initial schema: users, catalog, parties and purchasing links

Revision ID: 5f3c9a1d2b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5f3c9a1d2b7e'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def _owner():
    return sa.Column(
        'user_id', sa.Integer(),
        sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False,
    )


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('business_name', sa.String(100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner(),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(200), nullable=True),
        sa.Column(
            'parent_id', sa.Integer(),
            sa.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True,
        ),
        sa.Column('level', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_categories_user_id', 'categories', ['user_id'])
    op.create_index('ix_categories_parent_id', 'categories', ['parent_id'])

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner(),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(200), nullable=True),
        sa.Column('selling_price', sa.Numeric(10, 2), nullable=False),
        sa.Column(
            'category_id', sa.Integer(),
            sa.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index('ix_products_user_id', 'products', ['user_id'])
    op.create_index('ix_products_category_id', 'products', ['category_id'])

    op.create_table(
        'product_variants',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner(),
        sa.Column(
            'product_id', sa.Integer(),
            sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('variant_name', sa.String(50), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('selling_price_modifier', sa.Numeric(10, 2), nullable=False),
        sa.Column('min_stock_alert', sa.Integer(), nullable=False),
        sa.Column('enable_stock_alerts', sa.Boolean(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        sa.Column('attributes', sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_product_variants_user_id', 'product_variants', ['user_id'])
    op.create_index('ix_product_variants_product_id', 'product_variants', ['product_id'])
    # At most one default variant per product (Postgres partial index)
    op.create_index(
        'uq_product_variants_default', 'product_variants', ['product_id'],
        unique=True,
        postgresql_where=sa.text('is_default'),
        sqlite_where=sa.text('is_default'),
    )

    for table, constraint in (
        ('customers', 'uq_customer_email'),
        ('suppliers', 'uq_supplier_email'),
    ):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True),
            _owner(),
            sa.Column('first_name', sa.String(50), nullable=False),
            sa.Column('last_name', sa.String(50), nullable=False),
            sa.Column('email', sa.String(255), nullable=False),
            sa.Column('phone', sa.String(20), nullable=True),
            sa.Column('company', sa.String(50), nullable=True),
            *_timestamps(),
            sa.UniqueConstraint('user_id', 'email', name=constraint),
        )
        op.create_index(f'ix_{table}_user_id', table, ['user_id'])

    op.create_table(
        'variant_suppliers',
        sa.Column('id', sa.Integer(), primary_key=True),
        _owner(),
        sa.Column(
            'variant_id', sa.Integer(),
            sa.ForeignKey('product_variants.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column(
            'supplier_id', sa.Integer(),
            sa.ForeignKey('suppliers.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('purchase_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('is_primary_supplier', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('variant_id', 'supplier_id', name='uq_variant_supplier'),
    )
    op.create_index('ix_variant_suppliers_user_id', 'variant_suppliers', ['user_id'])
    op.create_index('ix_variant_suppliers_variant_id', 'variant_suppliers', ['variant_id'])
    op.create_index('ix_variant_suppliers_supplier_id', 'variant_suppliers', ['supplier_id'])


def downgrade():
    op.drop_table('variant_suppliers')
    op.drop_table('suppliers')
    op.drop_table('customers')
    op.drop_table('product_variants')
    op.drop_table('products')
    op.drop_table('categories')
    op.drop_table('users')
