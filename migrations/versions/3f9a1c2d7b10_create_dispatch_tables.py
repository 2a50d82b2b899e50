"""create_dispatch_tables

Revision ID: 3f9a1c2d7b10
Revises:
Create Date: 2026-10-19 10:12:44.310552

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a1c2d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'drivers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('rc_number', sa.String(length=64), nullable=True),
        sa.Column('fc_expiry', sa.String(length=32), nullable=True),
        sa.Column('insurance_number', sa.String(length=64), nullable=True),
        sa.Column('insurance_expiry', sa.String(length=32), nullable=True),
        sa.Column('driving_license', sa.String(length=64), nullable=True),
        sa.Column('dl_expiry', sa.String(length=32), nullable=True),
        sa.Column('aadhar_number', sa.String(length=32), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('phone'),
    )
    op.create_index(op.f('ix_drivers_id'), 'drivers', ['id'], unique=False)
    op.create_index(op.f('ix_drivers_email'), 'drivers', ['email'], unique=True)
    op.create_index(op.f('ix_drivers_rc_number'), 'drivers', ['rc_number'], unique=False)
    op.create_index(op.f('ix_drivers_insurance_number'), 'drivers', ['insurance_number'], unique=False)

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('pickup_location', sa.String(length=255), nullable=True),
        sa.Column('drop_location', sa.String(length=255), nullable=True),
        sa.Column('trip_type', sa.String(length=64), nullable=True),
        sa.Column('car', sa.String(length=64), nullable=True),
        sa.Column('pickup_date', sa.String(length=32), nullable=True),
        sa.Column('pickup_time', sa.String(length=32), nullable=True),
        sa.Column('days', sa.Integer(), nullable=True),
        sa.Column('state', sa.String(length=64), nullable=True),
        sa.Column('km_price', sa.Float(), nullable=True),
        sa.Column('km', sa.Float(), nullable=True),
        sa.Column('betta', sa.Float(), nullable=True),
        sa.Column('customer_name', sa.String(length=120), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('customer_remark', sa.Text(), nullable=True),
        sa.Column('customer_current_location', sa.String(length=255), nullable=True),
        sa.Column('adult', sa.Integer(), nullable=True),
        sa.Column('child', sa.Integer(), nullable=True),
        sa.Column('luggage', sa.Float(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('accepted_drivers', sa.Text(), nullable=True),
        sa.Column('driver_email', sa.String(length=255), nullable=True),
        sa.Column('assigned_at', sa.DateTime(), nullable=True),
        sa.Column('start_meter', sa.Float(), nullable=True),
        sa.Column('end_meter', sa.Float(), nullable=True),
        sa.Column('pet', sa.Float(), nullable=True),
        sa.Column('toll', sa.Float(), nullable=True),
        sa.Column('hills', sa.Float(), nullable=True),
        sa.Column('total_km', sa.Float(), nullable=True),
        sa.Column('final_km', sa.Float(), nullable=True),
        sa.Column('final_bill', sa.Float(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trips_id'), 'trips', ['id'], unique=False)
    op.create_index(op.f('ix_trips_status'), 'trips', ['status'], unique=False)
    op.create_index(op.f('ix_trips_driver_email'), 'trips', ['driver_email'], unique=False)

    op.create_table(
        'bills',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=True),
        sa.Column('driver_email', sa.String(length=255), nullable=False),
        sa.Column('customer_name', sa.String(length=120), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('pickup_location', sa.String(length=255), nullable=True),
        sa.Column('drop_location', sa.String(length=255), nullable=True),
        sa.Column('pickup_date', sa.String(length=32), nullable=True),
        sa.Column('pickup_time', sa.String(length=32), nullable=True),
        sa.Column('trip_type', sa.String(length=64), nullable=True),
        sa.Column('start_meter', sa.Float(), nullable=True),
        sa.Column('end_meter', sa.Float(), nullable=True),
        sa.Column('total_km', sa.Float(), nullable=True),
        sa.Column('final_km', sa.Float(), nullable=True),
        sa.Column('km_price', sa.Float(), nullable=True),
        sa.Column('total_km_price', sa.Float(), nullable=True),
        sa.Column('luggage_charge', sa.Float(), nullable=True),
        sa.Column('pet_charge', sa.Float(), nullable=True),
        sa.Column('toll_charge', sa.Float(), nullable=True),
        sa.Column('hills_charge', sa.Float(), nullable=True),
        sa.Column('betta_charge', sa.Float(), nullable=True),
        sa.Column('state_charge', sa.Float(), nullable=True),
        sa.Column('total_entered_charges', sa.Float(), nullable=True),
        sa.Column('final_bill', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bills_id'), 'bills', ['id'], unique=False)
    op.create_index(op.f('ix_bills_driver_email'), 'bills', ['driver_email'], unique=False)
    op.create_index(op.f('ix_bills_created_at'), 'bills', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_bills_created_at'), table_name='bills')
    op.drop_index(op.f('ix_bills_driver_email'), table_name='bills')
    op.drop_index(op.f('ix_bills_id'), table_name='bills')
    op.drop_table('bills')
    op.drop_index(op.f('ix_trips_driver_email'), table_name='trips')
    op.drop_index(op.f('ix_trips_status'), table_name='trips')
    op.drop_index(op.f('ix_trips_id'), table_name='trips')
    op.drop_table('trips')
    op.drop_index(op.f('ix_drivers_insurance_number'), table_name='drivers')
    op.drop_index(op.f('ix_drivers_rc_number'), table_name='drivers')
    op.drop_index(op.f('ix_drivers_email'), table_name='drivers')
    op.drop_index(op.f('ix_drivers_id'), table_name='drivers')
    op.drop_table('drivers')
