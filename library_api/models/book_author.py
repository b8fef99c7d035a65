"""
BookAuthor Model

Join entity for the many-to-many relationship between books and authors.

WHY a Model instead of an Association Table?
============================================
A pure association table (a Table object with two foreign keys) is enough
when the link carries no identity of its own. Join rows here have their own
primary key, so they are mapped as a full class and traversed explicitly:

    book.book_authors  -> [BookAuthor, ...] -> .author
    author.book_authors -> [BookAuthor, ...] -> .book
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.author import Author
    from library_api.models.book import Book


class BookAuthor(Base):
    """
    Link between one book and one author.

    Table: book_authors
    """

    __tablename__ = "book_authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    book: Mapped["Book"] = relationship("Book", back_populates="book_authors")
    author: Mapped["Author"] = relationship("Author", back_populates="book_authors")

    def __repr__(self) -> str:
        return f"BookAuthor(id={self.id}, book_id={self.book_id}, author_id={self.author_id})"
