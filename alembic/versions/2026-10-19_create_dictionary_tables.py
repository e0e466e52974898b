"""create_dictionary_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


language = postgresql.ENUM('SILESIAN', 'POLISH', name='language', create_type=False)
category_type = postgresql.ENUM('TRADITIONAL', 'MODERN', name='category_type', create_type=False)
entry_status = postgresql.ENUM('DRAFT', 'APPROVED', 'REJECTED', name='entry_status', create_type=False)
submission_status = postgresql.ENUM('PENDING', 'APPROVED', 'REJECTED', name='submission_status', create_type=False)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    for enum_type in (language, category_type, entry_status, submission_status):
        enum_type.create(bind, checkfirst=True)

    op.create_table('categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', category_type, nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='categories_pkey'),
        sa.UniqueConstraint('name', name='categories_name_key'),
        sa.UniqueConstraint('slug', name='categories_slug_key'),
    )
    op.create_index('categories_id_idx', 'categories', ['id'])

    op.create_table('parts_of_speech',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('label', sa.String(100), nullable=False),
        sa.Column('value', sa.String(100), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='parts_of_speech_pkey'),
        sa.UniqueConstraint('value', name='parts_of_speech_value_key'),
    )
    op.create_index('parts_of_speech_id_idx', 'parts_of_speech', ['id'])

    op.create_table('dictionary_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_word', sa.String(255), nullable=False),
        sa.Column('source_lang', language, nullable=False),
        sa.Column('target_word', sa.String(255), nullable=False),
        sa.Column('target_lang', language, nullable=False),
        sa.Column('slug', sa.String(255), nullable=True),
        sa.Column('pronunciation', sa.String(255), nullable=True),
        sa.Column('part_of_speech', sa.String(100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('status', entry_status, nullable=False),
        sa.Column('alternative_translations', sa.JSON(), nullable=False),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_by', sa.String(255), nullable=True),
        sa.Column('submitted_by', sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='dictionary_entries_pkey'),
        sa.UniqueConstraint('slug', name='dictionary_entries_slug_key'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], name='dictionary_entries_category_id_fkey'),
    )
    op.create_index('dictionary_entries_id_idx', 'dictionary_entries', ['id'])
    op.create_index('dictionary_entries_category_id_idx', 'dictionary_entries', ['category_id'])
    op.create_index('ix_dictionary_entries_status_updated_at', 'dictionary_entries', ['status', 'updated_at'])
    op.create_index('ix_dictionary_entries_source_word', 'dictionary_entries', ['source_word'])

    op.create_table('example_sentences',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('entry_id', sa.Integer(), nullable=False),
        sa.Column('source_text', sa.Text(), nullable=False),
        sa.Column('translated_text', sa.Text(), nullable=False),
        sa.Column('context', sa.Text(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='example_sentences_pkey'),
        sa.ForeignKeyConstraint(
            ['entry_id'], ['dictionary_entries.id'],
            name='example_sentences_entry_id_fkey', ondelete='CASCADE',
        ),
    )
    op.create_index('example_sentences_id_idx', 'example_sentences', ['id'])
    op.create_index('example_sentences_entry_id_idx', 'example_sentences', ['entry_id'])

    op.create_table('public_submissions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_word', sa.String(255), nullable=False),
        sa.Column('source_lang', language, nullable=False),
        sa.Column('target_word', sa.String(255), nullable=False),
        sa.Column('target_lang', language, nullable=False),
        sa.Column('pronunciation', sa.String(255), nullable=True),
        sa.Column('part_of_speech', sa.String(100), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('example_sentences', sa.JSON(), nullable=False),
        sa.Column('submitter_name', sa.String(255), nullable=True),
        sa.Column('submitter_email', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', submission_status, nullable=False),
        sa.Column('reviewed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reviewed_by', sa.String(255), nullable=True),
        sa.Column('review_notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='public_submissions_pkey'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], name='public_submissions_category_id_fkey'),
    )
    op.create_index('public_submissions_id_idx', 'public_submissions', ['id'])
    op.create_index('public_submissions_category_id_idx', 'public_submissions', ['category_id'])
    op.create_index('ix_public_submissions_status_created_at', 'public_submissions', ['status', 'created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('public_submissions')
    op.drop_table('example_sentences')
    op.drop_table('dictionary_entries')
    op.drop_table('parts_of_speech')
    op.drop_table('categories')

    bind = op.get_bind()
    for enum_type in (submission_status, entry_status, category_type, language):
        enum_type.drop(bind, checkfirst=True)
