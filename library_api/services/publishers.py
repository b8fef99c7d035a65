"""
Publishers Service

Query composition and business rules for publishers:
- Listing with sort, case-insensitive substring search and 1-based paging
- Creation with the name rule (must not start with a digit)
- Deletion
- The publisher -> books -> authors aggregate view

Functions take the request's Session and commit at most once, so each call
is one transaction.
"""

import logging
import re

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from library_api.config import get_settings
from library_api.exceptions import NotFoundError, PublisherNameError
from library_api.models import Book, BookAuthor, Publisher
from library_api.schemas import (
    BookWithAuthorNames,
    PublisherCreate,
    PublisherWithBooksAndAuthors,
)

logger = logging.getLogger(__name__)

SORT_NAME_DESC = "name_desc"

_STARTS_WITH_DIGIT = re.compile(r"^\d")


def list_publishers(
    db: Session,
    sort_by: str | None = None,
    search_string: str | None = None,
    page_number: int | None = None,
    page_size: int | None = None,
) -> list[Publisher]:
    """
    List publishers ordered by name.

    Args:
        db: Database session
        sort_by: "name_desc" for descending order; any other value keeps
            the default ascending order
        search_string: Keep only names containing this text (case-insensitive)
        page_number: 1-based page to return; None returns every match
        page_size: Items per page, defaults to settings.publishers_page_size

    Returns:
        Matching publishers

    Raises:
        ValueError: If page_number is below 1
    """
    if page_number is not None and page_number < 1:
        raise ValueError(f"page_number must be 1 or greater, got {page_number}")

    stmt = select(Publisher)

    if search_string:
        # lower(name) LIKE '%' || lower(:term) || '%', with % and _ escaped
        stmt = stmt.where(Publisher.name.icontains(search_string, autoescape=True))

    if sort_by == SORT_NAME_DESC:
        stmt = stmt.order_by(Publisher.name.desc(), Publisher.id.desc())
    else:
        stmt = stmt.order_by(Publisher.name.asc(), Publisher.id.asc())

    if page_number is not None:
        size = page_size or get_settings().publishers_page_size
        stmt = stmt.offset((page_number - 1) * size).limit(size)

    return list(db.execute(stmt).scalars().all())


def get_publisher_by_id(db: Session, publisher_id: int) -> Publisher | None:
    """Return the publisher with this id, or None."""
    return db.get(Publisher, publisher_id)


def create_publisher(db: Session, publisher_data: PublisherCreate) -> Publisher:
    """
    Persist a new publisher.

    Raises:
        PublisherNameError: If the name starts with a digit
    """
    if _STARTS_WITH_DIGIT.match(publisher_data.name):
        logger.warning(f"Rejected publisher name: {publisher_data.name!r}")
        raise PublisherNameError("Name starts with number", publisher_data.name)

    publisher = Publisher(name=publisher_data.name)

    db.add(publisher)
    db.commit()
    db.refresh(publisher)

    logger.info(f"Created publisher {publisher.id} ({publisher.name})")
    return publisher


def delete_publisher_by_id(db: Session, publisher_id: int) -> None:
    """
    Delete a publisher.

    Its books are kept; the ORM clears their publisher_id.

    Raises:
        NotFoundError: If no publisher has this id
    """
    publisher = db.get(Publisher, publisher_id)
    if publisher is None:
        raise NotFoundError("publisher", publisher_id)

    db.delete(publisher)
    db.commit()

    logger.info(f"Deleted publisher {publisher_id}")


def get_publisher_data(
    db: Session,
    publisher_id: int,
) -> PublisherWithBooksAndAuthors | None:
    """
    Build the aggregate view of one publisher.

    Eagerly loads books, their join rows and authors with selectinload
    (one query per level instead of one per book).

    Returns:
        The publisher name with each book title and its author names,
        or None if the publisher does not exist
    """
    stmt = (
        select(Publisher)
        .options(
            selectinload(Publisher.books)
            .selectinload(Book.book_authors)
            .selectinload(BookAuthor.author)
        )
        .where(Publisher.id == publisher_id)
    )
    publisher = db.execute(stmt).scalar_one_or_none()

    if publisher is None:
        return None

    return PublisherWithBooksAndAuthors(
        name=publisher.name,
        books=[
            BookWithAuthorNames(
                title=book.title,
                authors=[link.author.full_name for link in book.book_authors],
            )
            for book in publisher.books
        ],
    )
