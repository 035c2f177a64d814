"""initial sales dashboard schema

Revision ID: 0001_initial_sales_schema
Revises:
Create Date: 2024-05-02

This migration adds:
1. Dimensions: concepts, branches, categories, products
2. POS fact tables keyed by branch/concept/date: hourly, header, item_sales,
   payment_details, cashier
3. Compliance fact tables: bir_detailed, bir_summary, government_discounts, void_tx
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_sales_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
    ]


def _fact_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('branch_id', sa.Integer(), nullable=False),
        sa.Column('concept_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
    ]


def _fact_keys(table):
    return [
        sa.ForeignKeyConstraint(['branch_id'], ['branches.id'], name=f'fk_{table}_branch_id'),
        sa.ForeignKeyConstraint(['concept_id'], ['concepts.id'], name=f'fk_{table}_concept_id'),
        sa.PrimaryKeyConstraint('id'),
    ]


def _fact_indexes(table):
    op.create_index(f'ix_{table}_branch_id', table, ['branch_id'], unique=False)
    op.create_index(f'ix_{table}_concept_id', table, ['concept_id'], unique=False)
    op.create_index(f'ix_{table}_date', table, ['date'], unique=False)


def _money(name, scale=2):
    return sa.Column(name, sa.Numeric(precision=12, scale=scale), nullable=False, server_default='0')


def upgrade():
    # ==========================================================================
    # 1. DIMENSIONS
    # ==========================================================================
    op.create_table('concepts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('concept_name', sa.String(length=255), nullable=False),
        sa.Column('concept_description', sa.Text(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_concepts_concept_name', 'concepts', ['concept_name'], unique=False)

    op.create_table('branches',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('branch_name', sa.String(length=255), nullable=False),
        sa.Column('branch_description', sa.Text(), nullable=False),
        sa.Column('branch_address', sa.Text(), nullable=False),
        sa.Column('concept_id', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['concept_id'], ['concepts.id'], name='fk_branches_concept_id'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_branches_branch_name', 'branches', ['branch_name'], unique=False)
    op.create_index('ix_branches_concept_id', 'branches', ['concept_id'], unique=False)

    op.create_table('categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('category_code', sa.String(length=50), nullable=False),
        sa.Column('category_desc', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_categories_category_code', 'categories', ['category_code'], unique=True)

    op.create_table('products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_code', sa.String(length=25), nullable=False),
        sa.Column('product_desc', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_products_product_code', 'products', ['product_code'], unique=True)

    # ==========================================================================
    # 2. POS FACTS
    # ==========================================================================
    op.create_table('hourly',
        *_fact_columns(),
        sa.Column('hour', sa.Integer(), nullable=False),
        sa.Column('reg', sa.String(length=25), nullable=False, server_default=''),
        sa.Column('total_trans', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_void', sa.Integer(), nullable=False, server_default='0'),
        _money('total_sales', scale=5),
        _money('total_discount', scale=5),
        *_fact_keys('hourly'),
        sa.UniqueConstraint('branch_id', 'concept_id', 'date', 'hour', 'reg', name='uq_hourly_slot'),
        sa.CheckConstraint('hour >= 0 AND hour <= 23', name='ck_hourly_hour_range'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('hourly')
    op.create_index('ix_hourly_date_hour', 'hourly', ['date', 'hour'], unique=False)

    op.create_table('header',
        *_fact_columns(),
        sa.Column('reg', sa.String(length=25), nullable=False, server_default=''),
        sa.Column('or_from', sa.String(length=30), nullable=True),
        sa.Column('or_to', sa.String(length=30), nullable=True),
        _money('beg_balance'),
        _money('end_balance'),
        sa.Column('no_transaction', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('no_guest', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('reg_guest', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('ftime_guest', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('no_void', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('no_disc', sa.Integer(), nullable=False, server_default='0'),
        _money('other_disc'),
        _money('senior_disc'),
        _money('pwd_disc'),
        _money('open_disc'),
        _money('vip_disc'),
        _money('employee_disc'),
        _money('promo_disc'),
        _money('free_disc'),
        sa.Column('no_cancel', sa.Integer(), nullable=False, server_default='0'),
        _money('room_charge'),
        sa.Column('z_count', sa.String(length=20), nullable=True),
        *_fact_keys('header'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('header')
    op.create_index('ix_header_date_branch_concept', 'header', ['date', 'branch_id', 'concept_id'], unique=False)

    op.create_table('item_sales',
        *_fact_columns(),
        sa.Column('reg', sa.String(length=25), nullable=False, server_default=''),
        sa.Column('category_code', sa.String(length=15), nullable=False),
        sa.Column('product_code', sa.String(length=25), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Numeric(precision=10, scale=2), nullable=False, server_default='0'),
        _money('total_gross'),
        _money('net_sales'),
        _money('vatable_sales'),
        _money('vat_exempt_sales'),
        _money('senior_disc'),
        _money('pwd_disc'),
        _money('other_disc'),
        _money('open_disc'),
        _money('employee_disc'),
        _money('vip_disc'),
        _money('promo'),
        _money('free'),
        _money('service_charge'),
        sa.Column('transaction_time', sa.Time(), nullable=True),
        sa.Column('receipt_no', sa.String(length=50), nullable=True),
        sa.Column('cashier_name', sa.String(length=50), nullable=True),
        *_fact_keys('item_sales'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('item_sales')
    op.create_index('ix_item_sales_date_branch_concept', 'item_sales', ['date', 'branch_id', 'concept_id'], unique=False)
    op.create_index('ix_item_sales_product_category', 'item_sales', ['product_code', 'category_code'], unique=False)

    op.create_table('payment_details',
        *_fact_columns(),
        sa.Column('reg', sa.String(length=25), nullable=False, server_default=''),
        sa.Column('pay_type', sa.String(length=15), nullable=True),
        sa.Column('description', sa.String(length=50), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('transaction_time', sa.Time(), nullable=True),
        sa.Column('receipt_no', sa.String(length=50), nullable=True),
        sa.Column('cashier_name', sa.String(length=50), nullable=True),
        *_fact_keys('payment_details'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('payment_details')
    op.create_index('ix_payment_details_pay_type', 'payment_details', ['pay_type'], unique=False)
    op.create_index('ix_payment_details_receipt_no', 'payment_details', ['receipt_no'], unique=False)
    op.create_index('ix_payment_details_date_branch_concept', 'payment_details', ['date', 'branch_id', 'concept_id'], unique=False)

    op.create_table('cashier',
        *_fact_columns(),
        sa.Column('cashier', sa.String(length=100), nullable=False),
        _money('gross_sales'),
        _money('net_sales'),
        _money('cash'),
        _money('card'),
        _money('less_vat'),
        _money('discount'),
        _money('delivery_charge'),
        _money('service_charge'),
        _money('void_amount'),
        sa.Column('void_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('tx_count', sa.Integer(), nullable=False, server_default='0'),
        *_fact_keys('cashier'),
        sa.UniqueConstraint('branch_id', 'date', 'cashier', name='uq_cashier_day'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('cashier')

    # ==========================================================================
    # 3. COMPLIANCE FACTS
    # ==========================================================================
    op.create_table('bir_detailed',
        *_fact_columns(),
        sa.Column('si_number', sa.Integer(), nullable=False),
        sa.Column('tx_number', sa.Integer(), nullable=False),
        _money('vat_exempt'),
        _money('vat_zero_rate'),
        _money('vatable_amount'),
        _money('vat_12'),
        _money('less_vat'),
        _money('gross_amount'),
        sa.Column('discount_type', sa.String(length=50), nullable=True),
        _money('discount_amount'),
        _money('service_charge'),
        _money('takeout_charge'),
        _money('delivery_charge'),
        _money('net_total'),
        _money('cash'),
        _money('other_payment'),
        *_fact_keys('bir_detailed'),
        sa.UniqueConstraint('branch_id', 'si_number', 'date', name='uq_bir_detailed_invoice'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('bir_detailed')
    op.create_index('ix_bir_detailed_si_number', 'bir_detailed', ['si_number'], unique=False)
    op.create_index('ix_bir_detailed_tx_number', 'bir_detailed', ['tx_number'], unique=False)
    op.create_index('ix_bir_detailed_date_branch_concept', 'bir_detailed', ['date', 'branch_id', 'concept_id'], unique=False)

    op.create_table('bir_summary',
        *_fact_columns(),
        sa.Column('si_first', sa.Integer(), nullable=True),
        sa.Column('si_last', sa.Integer(), nullable=True),
        sa.Column('z_counter', sa.Integer(), nullable=True),
        _money('beg_amount'),
        _money('end_amount'),
        _money('net_amount'),
        _money('sc'),
        _money('pwd'),
        _money('others'),
        _money('returns'),
        _money('voids'),
        _money('gross_amount'),
        _money('vatable'),
        _money('vat_amount'),
        _money('vat_exempt'),
        _money('zero_rated'),
        _money('less_vat'),
        _money('ewt'),
        _money('service_charge'),
        *_fact_keys('bir_summary'),
        sa.UniqueConstraint('branch_id', 'date', 'z_counter', name='uq_bir_summary_z'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('bir_summary')
    op.create_index('ix_bir_summary_z_counter', 'bir_summary', ['z_counter'], unique=False)
    op.create_index('ix_bir_summary_date_branch_concept', 'bir_summary', ['date', 'branch_id', 'concept_id'], unique=False)

    op.create_table('government_discounts',
        *_fact_columns(),
        sa.Column('terminal', sa.String(length=25), nullable=True),
        sa.Column('id_no', sa.String(length=50), nullable=True),
        sa.Column('id_type', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('ref_number', sa.String(length=50), nullable=True),
        _money('gross_amount'),
        _money('discount_amount'),
        *_fact_keys('government_discounts'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('government_discounts')
    op.create_index('ix_government_discounts_date_branch', 'government_discounts', ['date', 'branch_id'], unique=False)

    op.create_table('void_tx',
        *_fact_columns(),
        sa.Column('time', sa.Time(), nullable=False),
        sa.Column('tx_number', sa.Integer(), nullable=False),
        sa.Column('terminal', sa.String(length=25), nullable=True),
        sa.Column('salesinvoice_number', sa.Integer(), nullable=True),
        sa.Column('cashier_name', sa.String(length=25), nullable=True),
        _money('amount'),
        sa.Column('approved_by', sa.String(length=25), nullable=False),
        sa.Column('remarks', sa.String(length=100), nullable=False, server_default=''),
        *_fact_keys('void_tx'),
        sa.UniqueConstraint('salesinvoice_number', name='uq_void_tx_salesinvoice_number'),
        sqlite_autoincrement=True,
    )
    _fact_indexes('void_tx')
    op.create_index('ix_void_tx_date_time', 'void_tx', ['date', 'time'], unique=False)


def downgrade():
    for table in (
        'void_tx', 'government_discounts', 'bir_summary', 'bir_detailed',
        'cashier', 'payment_details', 'item_sales', 'header', 'hourly',
    ):
        op.drop_table(table)
    op.drop_table('products')
    op.drop_table('categories')
    op.drop_table('branches')
    op.drop_table('concepts')
