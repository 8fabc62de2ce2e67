"""create profile, typing_test and test_statistics tables

Revision ID: 3c7e9a1f0b42
Revises:
Create Date: 2026-10-19 10:20:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c7e9a1f0b42'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    existing_tables = set(sa.inspect(bind).get_table_names())

    if 'profile' not in existing_tables:
        op.create_table(
            'profile',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('name', sa.String(length=128), nullable=False),
            sa.Column('email', sa.String(length=256), nullable=False),
            sa.Column('settings', sa.JSON(), nullable=False),
        )
        op.create_index('ix_profile_email', 'profile', ['email'])

    if 'typing_test' not in existing_tables:
        op.create_table(
            'typing_test',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('profile_id', sa.String(length=36), nullable=False),
            sa.Column('language', sa.String(length=64), nullable=False),
            sa.Column('document', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('time_limit', sa.Integer(), nullable=True),
            sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
            sa.Column('accuracy', sa.Float(), nullable=True),
            sa.Column('raw_accuracy', sa.Float(), nullable=True),
            sa.Column('test_time', sa.Integer(), nullable=True),
            sa.Column('error_count', sa.Integer(), nullable=True),
            sa.Column('error_word_indices', sa.JSON(), nullable=True),
        )
        op.create_index('ix_typing_test_profile_id', 'typing_test', ['profile_id'])
        op.create_index('ix_typing_test_language', 'typing_test', ['language'])

    if 'test_statistics' not in existing_tables:
        op.create_table(
            'test_statistics',
            sa.Column('test_id', sa.String(length=64), primary_key=True),
            sa.Column('profile_id', sa.String(length=36), nullable=False),
            sa.Column('wpm', sa.Float(), nullable=False),
            sa.Column('accuracy', sa.Float(), nullable=False),
            sa.Column('errors', sa.JSON(), nullable=False),
            sa.Column('timestamp', sa.BigInteger(), nullable=False),
        )
        op.create_index('ix_test_statistics_profile_id', 'test_statistics', ['profile_id'])


def downgrade():
    op.drop_index('ix_test_statistics_profile_id', table_name='test_statistics')
    op.drop_table('test_statistics')
    op.drop_index('ix_typing_test_language', table_name='typing_test')
    op.drop_index('ix_typing_test_profile_id', table_name='typing_test')
    op.drop_table('typing_test')
    op.drop_index('ix_profile_email', table_name='profile')
    op.drop_table('profile')
