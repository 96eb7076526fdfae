"""create forms, responses and access_tokens

Revision ID: 3c1e9b27d4a0
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3c1e9b27d4a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'forms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('base_questions', sa.JSON(), nullable=False),
        sa.Column('ai_enabled', sa.Boolean(), nullable=False),
        sa.Column('max_ai_questions', sa.Integer(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('share_token', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('archived', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_forms_owner_id'), 'forms', ['owner_id'], unique=False)
    op.create_index(op.f('ix_forms_share_token'), 'forms', ['share_token'], unique=True)
    op.create_index(op.f('ix_forms_archived'), 'forms', ['archived'], unique=False)

    op.create_table(
        'responses',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('form_id', sa.Integer(), nullable=False),
        sa.Column('answers', sa.JSON(), nullable=False),
        sa.Column('resume_profile', sa.JSON(), nullable=True),
        sa.Column('summary', sa.JSON(), nullable=True),
        sa.Column('summary_status', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('summary_error', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('summarized_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['form_id'], ['forms.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_responses_form_id'), 'responses', ['form_id'], unique=False)
    op.create_index(op.f('ix_responses_created_at'), 'responses', ['created_at'], unique=False)

    op.create_table(
        'access_tokens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key_hash', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('owner_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('last_used_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('key_hash'),
    )
    op.create_index(op.f('ix_access_tokens_key_hash'), 'access_tokens', ['key_hash'], unique=False)
    op.create_index(op.f('ix_access_tokens_owner_id'), 'access_tokens', ['owner_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_access_tokens_owner_id'), table_name='access_tokens')
    op.drop_index(op.f('ix_access_tokens_key_hash'), table_name='access_tokens')
    op.drop_table('access_tokens')
    op.drop_index(op.f('ix_responses_created_at'), table_name='responses')
    op.drop_index(op.f('ix_responses_form_id'), table_name='responses')
    op.drop_table('responses')
    op.drop_index(op.f('ix_forms_archived'), table_name='forms')
    op.drop_index(op.f('ix_forms_share_token'), table_name='forms')
    op.drop_index(op.f('ix_forms_owner_id'), table_name='forms')
    op.drop_table('forms')
