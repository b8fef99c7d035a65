"""
Author Model

Represents an author in the library database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
- back_populates: Two-way relationship binding
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
# This prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from library_api.models.book_author import BookAuthor


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - book_authors: One-to-Many to the join entity; author.book_authors[i].book
      is one of the author's books

    Example:
        author = Author(full_name="George Orwell")
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    full_name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # Deleting an author removes its join rows, never the books themselves
    book_authors: Mapped[list["BookAuthor"]] = relationship(
        "BookAuthor",
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="BookAuthor.id",
    )

    def __repr__(self) -> str:
        """
        Developer-friendly string representation.

            >>> author = Author(full_name="George Orwell")
            >>> print(author)
            Author(id=None, full_name='George Orwell')
        """
        return f"Author(id={self.id}, full_name='{self.full_name}')"
