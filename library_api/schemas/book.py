"""
Book Pydantic Schemas

Handles:
- Book creation with author links
- Partial updates
- The flattened "book with authors" view
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Title (not blank)
    - Rate (1 to 5)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    description: str | None = Field(
        default=None,
        max_length=5000,
        description="Book description or summary",
    )

    is_read: bool = Field(
        default=False,
        description="Whether the book has been read",
    )

    date_read: datetime | None = Field(
        default=None,
        description="When the book was read (kept only for read books)",
    )

    rate: int | None = Field(
        default=None,
        ge=1,
        le=5,
        description="Rating from 1 to 5 (kept only for read books)",
    )

    genre: str | None = Field(
        default=None,
        max_length=100,
        description="Genre label",
        examples=["Fiction", "Biography"],
    )

    cover_url: str | None = Field(
        default=None,
        max_length=500,
        description="URL of the cover image",
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "genre": "Fiction",
        "publisher_id": 1,
        "author_ids": [1, 2]
    }
    """

    publisher_id: int | None = Field(
        default=None,
        description="ID of the publisher",
    )

    author_ids: list[int] = Field(
        default=[],
        description="IDs of the authors to link to this book",
        examples=[[1, 2]],
    )


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional for PATCH-style updates.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=5000)
    is_read: bool | None = Field(default=None)
    date_read: datetime | None = Field(default=None)
    rate: int | None = Field(default=None, ge=1, le=5)
    genre: str | None = Field(default=None, max_length=100)
    cover_url: str | None = Field(default=None, max_length=500)

    @field_validator("title", "is_read")
    @classmethod
    def must_not_be_null(cls, v):
        """
        Omitting these fields leaves them unchanged, but an explicit null
        would be written into a NOT NULL column.
        """
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate title if provided."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    date_added: datetime = Field(..., description="When the book was added")
    publisher_id: int | None = Field(default=None, description="ID of the publisher")

    model_config = ConfigDict(from_attributes=True)


class BookWithAuthors(BookBase):
    """
    Book view with its publisher name and author names flattened in,
    so a client does not need follow-up calls.
    """

    id: int = Field(..., description="Unique identifier")
    publisher_name: str | None = Field(
        default=None,
        description="Name of the publisher, null if the book has none",
    )
    author_names: list[str] = Field(
        default=[],
        description="Full names of the book's authors",
    )
