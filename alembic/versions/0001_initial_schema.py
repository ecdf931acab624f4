"""Initial schema: users, disposal, requests, notifications

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

request_status = sa.Enum(
    'Pending', 'Approved', 'Rejected',
    name='request_status',
    create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'disposal',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('image_url', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('item_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('contact', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('disposal_id', sa.Integer(), nullable=False),
        sa.Column('receiver_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('receiver_contact', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('receiver_email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('status', request_status, nullable=False),
        sa.ForeignKeyConstraint(['disposal_id'], ['disposal.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_requests_disposal_id'), 'requests', ['disposal_id'], unique=False)

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('disposal_id', sa.Integer(), nullable=False),
        sa.Column('message', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['disposal_id'], ['disposal.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_notifications_disposal_id'), 'notifications', ['disposal_id'], unique=False)
    op.create_index(op.f('ix_notifications_created_at'), 'notifications', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_notifications_created_at'), table_name='notifications')
    op.drop_index(op.f('ix_notifications_disposal_id'), table_name='notifications')
    op.drop_table('notifications')
    op.drop_index(op.f('ix_requests_disposal_id'), table_name='requests')
    op.drop_table('requests')
    request_status.drop(op.get_bind(), checkfirst=True)
    op.drop_table('disposal')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
