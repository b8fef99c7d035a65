"""
Publisher Model

Represents a publishing house. A publisher owns many books.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book import Book


class Publisher(Base):
    """
    Publisher model.

    Table: publishers

    Relationships:
    - books: One-to-Many. Deleting a publisher does not delete its books,
      the ORM clears their publisher_id instead.

    Example:
        publisher = Publisher(name="Penguin Books")
        db.add(publisher)
        db.commit()
    """

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Publisher name"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="publisher",
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
