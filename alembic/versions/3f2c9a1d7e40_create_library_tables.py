"""Create library tables

Revision ID: 3f2c9a1d7e40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2c9a1d7e40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('publishers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False, comment='Publisher name'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_publishers_name'), 'publishers', ['name'], unique=False)

    op.create_table('authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False, comment="Author's full name"),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_authors_full_name'), 'authors', ['full_name'], unique=False)

    op.create_table('books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False, comment='Book title'),
        sa.Column('description', sa.Text(), nullable=True, comment='Book description or summary'),
        sa.Column('is_read', sa.Boolean(), nullable=False, comment='Whether the book has been read'),
        sa.Column('date_read', sa.DateTime(timezone=True), nullable=True, comment='When the book was read'),
        sa.Column('rate', sa.Integer(), nullable=True, comment='Rating given after reading'),
        sa.Column('genre', sa.String(length=100), nullable=True, comment='Genre label'),
        sa.Column('cover_url', sa.String(length=500), nullable=True, comment='URL of the cover image'),
        sa.Column('date_added', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='When the book record was created'),
        sa.Column('publisher_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['publisher_id'], ['publishers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_title'), 'books', ['title'], unique=False)
    op.create_index(op.f('ix_books_publisher_id'), 'books', ['publisher_id'], unique=False)

    op.create_table('book_authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['book_id'], ['books.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_book_authors_book_id'), 'book_authors', ['book_id'], unique=False)
    op.create_index(op.f('ix_book_authors_author_id'), 'book_authors', ['author_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_book_authors_author_id'), table_name='book_authors')
    op.drop_index(op.f('ix_book_authors_book_id'), table_name='book_authors')
    op.drop_table('book_authors')
    op.drop_index(op.f('ix_books_publisher_id'), table_name='books')
    op.drop_index(op.f('ix_books_title'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_full_name'), table_name='authors')
    op.drop_table('authors')
    op.drop_index(op.f('ix_publishers_name'), table_name='publishers')
    op.drop_table('publishers')
