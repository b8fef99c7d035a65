"""
Authors Service

Author creation and the author -> book titles view.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from library_api.models import Author, BookAuthor
from library_api.schemas import AuthorCreate, AuthorWithBooks

logger = logging.getLogger(__name__)


def create_author(db: Session, author_data: AuthorCreate) -> Author:
    """Persist a new author."""
    author = Author(full_name=author_data.full_name)

    db.add(author)
    db.commit()
    db.refresh(author)

    logger.info(f"Created author {author.id} ({author.full_name})")
    return author


def get_author_with_books(db: Session, author_id: int) -> AuthorWithBooks | None:
    """Return the author's name and the titles of their books, or None."""
    stmt = (
        select(Author)
        .options(selectinload(Author.book_authors).selectinload(BookAuthor.book))
        .where(Author.id == author_id)
    )
    author = db.execute(stmt).scalar_one_or_none()

    if author is None:
        return None

    return AuthorWithBooks(
        full_name=author.full_name,
        book_titles=[link.book.title for link in author.book_authors],
    )
