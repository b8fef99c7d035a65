"""
Book Model

The central model of the Library API.

A book belongs to at most one publisher (publishers.id, nullable) and is
linked to its authors through the BookAuthor join entity.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book_author import BookAuthor
    from library_api.models.publisher import Publisher


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - title: Book title (required)
    - description: Book summary
    - is_read: Whether the book has been read
    - date_read / rate: When it was read and the rating given (read books only)
    - genre: Free-form genre label
    - cover_url: Link to a cover image
    - date_added: When the record was created

    Relationships:
    - publisher: Many-to-One (nullable)
    - book_authors: One-to-Many to the join entity

    Example:
        book = Book(
            title="1984",
            description="A dystopian novel...",
            is_read=False,
            genre="Fiction",
            publisher_id=1,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Book description or summary"
    )

    is_read: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Whether the book has been read"
    )

    date_read: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When the book was read"
    )

    rate: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Rating given after reading"
    )

    genre: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Genre label"
    )

    cover_url: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="URL of the cover image"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    date_added: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the book record was created"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # SET NULL matches what the ORM does when a loaded publisher is deleted
    publisher_id: Mapped[int | None] = mapped_column(
        ForeignKey("publishers.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
    )

    publisher: Mapped[Optional["Publisher"]] = relationship(
        "Publisher",
        back_populates="books",
    )

    book_authors: Mapped[list["BookAuthor"]] = relationship(
        "BookAuthor",
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="BookAuthor.id",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', publisher_id={self.publisher_id})"
