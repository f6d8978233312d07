"""Create subscription service tables

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade():
    op.create_table(
        'subscription_plans',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('duration', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('what_included', sa.Text(), nullable=True),
        sa.Column('what_excluded', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('max_elections', sa.Integer(), nullable=True),
        sa.Column('max_voters_per_election', sa.Integer(), nullable=True),
        sa.Column('processing_fee_enabled', sa.Boolean(), nullable=False),
        sa.Column('processing_fee_mandatory', sa.Boolean(), nullable=False),
        sa.Column('processing_fee_type', sa.String(length=20), nullable=True),
        sa.Column('processing_fee_fixed_amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('processing_fee_percentage', sa.Numeric(precision=5, scale=2), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('subscription_plans', schema=None) as batch_op:
        batch_op.create_index('idx_subscription_plan_active_order', ['is_active', 'display_order'], unique=False)
        batch_op.create_index('idx_subscription_plan_type', ['type'], unique=False)

    op.create_table(
        'user_subscriptions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('gateway_used', sa.String(length=20), nullable=True),
        sa.Column('external_subscription_id', sa.String(length=255), nullable=True),
        sa.Column('payment_type', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('auto_renew', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['plan_id'], ['subscription_plans.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'external_subscription_id', name='uix_user_external_subscription'),
    )
    with op.batch_alter_table('user_subscriptions', schema=None) as batch_op:
        batch_op.create_index('idx_user_subscription_user_status', ['user_id', 'status'], unique=False)
        batch_op.create_index('idx_user_subscription_status_end_date', ['status', 'end_date'], unique=False)

    op.create_table(
        'regional_prices',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column('region', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['plan_id'], ['subscription_plans.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plan_id', 'region', name='uix_regional_price_plan_region'),
    )

    op.create_table(
        'country_region_mappings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('country_code', sa.String(length=2), nullable=False),
        sa.Column('country_name', sa.String(length=100), nullable=False),
        sa.Column('region', sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('country_region_mappings', schema=None) as batch_op:
        batch_op.create_index('ix_country_region_mappings_country_code', ['country_code'], unique=True)
        batch_op.create_index('ix_country_region_mappings_region', ['region'], unique=False)

    op.create_table(
        'region_gateway_configs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('region', sa.String(length=50), nullable=False),
        sa.Column('gateway_type', sa.String(length=20), nullable=False),
        sa.Column('stripe_enabled', sa.Boolean(), nullable=False),
        sa.Column('paddle_enabled', sa.Boolean(), nullable=False),
        sa.Column('split_percentage', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('recommendation_reason', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('region_gateway_configs', schema=None) as batch_op:
        batch_op.create_index('ix_region_gateway_configs_region', ['region'], unique=True)

    op.create_table(
        'system_config',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key'),
    )

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('processing_fee', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column('gateway', sa.String(length=20), nullable=False),
        sa.Column('payment_method', sa.String(length=20), nullable=True),
        sa.Column('region', sa.String(length=50), nullable=True),
        sa.Column('country_code', sa.String(length=2), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('external_payment_id', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['plan_id'], ['subscription_plans.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('external_payment_id'),
    )
    with op.batch_alter_table('payments', schema=None) as batch_op:
        batch_op.create_index('idx_payment_user_created', ['user_id', 'created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('payments', schema=None) as batch_op:
        batch_op.drop_index('idx_payment_user_created')
    op.drop_table('payments')
    op.drop_table('system_config')
    with op.batch_alter_table('region_gateway_configs', schema=None) as batch_op:
        batch_op.drop_index('ix_region_gateway_configs_region')
    op.drop_table('region_gateway_configs')
    with op.batch_alter_table('country_region_mappings', schema=None) as batch_op:
        batch_op.drop_index('ix_country_region_mappings_region')
        batch_op.drop_index('ix_country_region_mappings_country_code')
    op.drop_table('country_region_mappings')
    op.drop_table('regional_prices')
    with op.batch_alter_table('user_subscriptions', schema=None) as batch_op:
        batch_op.drop_index('idx_user_subscription_status_end_date')
        batch_op.drop_index('idx_user_subscription_user_status')
    op.drop_table('user_subscriptions')
    with op.batch_alter_table('subscription_plans', schema=None) as batch_op:
        batch_op.drop_index('idx_subscription_plan_type')
        batch_op.drop_index('idx_subscription_plan_active_order')
    op.drop_table('subscription_plans')
