"""
Books Service

CRUD for books, including linking a new book to its authors through
BookAuthor join rows.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from library_api.exceptions import NotFoundError
from library_api.models import Author, Book, BookAuthor, Publisher
from library_api.schemas import BookCreate, BookUpdate, BookWithAuthors

logger = logging.getLogger(__name__)


def list_books(db: Session) -> list[Book]:
    """Return every book ordered by id."""
    stmt = select(Book).order_by(Book.id)
    return list(db.execute(stmt).scalars().all())


def get_book_by_id(db: Session, book_id: int) -> BookWithAuthors | None:
    """
    Return one book with its publisher name and author names, or None.
    """
    stmt = (
        select(Book)
        .options(
            selectinload(Book.publisher),
            selectinload(Book.book_authors).selectinload(BookAuthor.author),
        )
        .where(Book.id == book_id)
    )
    book = db.execute(stmt).scalar_one_or_none()

    if book is None:
        return None

    return BookWithAuthors(
        id=book.id,
        title=book.title,
        description=book.description,
        is_read=book.is_read,
        date_read=book.date_read,
        rate=book.rate,
        genre=book.genre,
        cover_url=book.cover_url,
        publisher_name=book.publisher.name if book.publisher else None,
        author_names=[link.author.full_name for link in book.book_authors],
    )


def create_book_with_authors(db: Session, book_data: BookCreate) -> Book:
    """
    Persist a book and link it to its authors.

    date_read and rate only make sense for a book that has been read,
    so they are dropped otherwise.

    Raises:
        NotFoundError: If the publisher or any author does not exist
    """
    if book_data.publisher_id is not None and db.get(Publisher, book_data.publisher_id) is None:
        raise NotFoundError("publisher", book_data.publisher_id)

    # Preserve request order, ignore repeated ids
    author_ids = list(dict.fromkeys(book_data.author_ids))
    authors = []
    for author_id in author_ids:
        author = db.get(Author, author_id)
        if author is None:
            raise NotFoundError("author", author_id)
        authors.append(author)

    book = Book(
        title=book_data.title,
        description=book_data.description,
        is_read=book_data.is_read,
        date_read=book_data.date_read if book_data.is_read else None,
        rate=book_data.rate if book_data.is_read else None,
        genre=book_data.genre,
        cover_url=book_data.cover_url,
        date_added=datetime.now(timezone.utc),
        publisher_id=book_data.publisher_id,
        book_authors=[BookAuthor(author=author) for author in authors],
    )

    db.add(book)
    db.commit()
    db.refresh(book)

    logger.info(f"Created book {book.id} with {len(authors)} author(s)")
    return book


def update_book_by_id(db: Session, book_id: int, book_data: BookUpdate) -> Book | None:
    """
    Apply a partial update to a book.

    Only fields present in the request body are changed. Returns None if
    the book does not exist.
    """
    book = db.get(Book, book_id)
    if book is None:
        return None

    update_data = book_data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(book, field, value)

    if not book.is_read:
        book.date_read = None
        book.rate = None

    db.commit()
    db.refresh(book)
    return book


def delete_book_by_id(db: Session, book_id: int) -> None:
    """
    Delete a book and its author links.

    Raises:
        NotFoundError: If no book has this id
    """
    book = db.get(Book, book_id)
    if book is None:
        raise NotFoundError("book", book_id)

    db.delete(book)
    db.commit()

    logger.info(f"Deleted book {book_id}")
