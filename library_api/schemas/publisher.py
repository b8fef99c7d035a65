"""
Publisher Pydantic Schemas

Request/response shapes for publisher endpoints, including the nested
"books with authors" aggregate view.

Name format (must not start with a digit) is a business rule checked by the
publishers service, not here: it applies on creation only and must surface
as a 400 with the rejected name, not as a 422 validation error.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PublisherCreate(BaseModel):
    """
    Schema for creating a new publisher.

    Example request body:
    {
        "name": "Penguin Books"
    }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Publisher name",
        examples=["Penguin Books", "Vintage"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Reject whitespace-only names.

        Other names are kept as sent: the digit rule looks at the first
        character of the raw name, so " 1 Press" is accepted.
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v


class PublisherResponse(BaseModel):
    """Schema for publisher responses."""

    id: int = Field(..., description="Unique identifier", examples=[1, 42])
    name: str = Field(..., description="Publisher name")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Penguin Books",
            }
        },
    )


class BookWithAuthorNames(BaseModel):
    """One book of a publisher, with the full names of its authors."""

    title: str = Field(..., description="Book title")
    authors: list[str] = Field(
        default=[],
        description="Full names of the book's authors",
    )


class PublisherWithBooksAndAuthors(BaseModel):
    """
    Aggregate view of a publisher.

    Built by walking publisher -> books -> book_authors -> author, so a
    client gets the whole catalogue of a publisher in one response.
    """

    name: str = Field(..., description="Publisher name")
    books: list[BookWithAuthorNames] = Field(
        default=[],
        description="Books published, each with its author names",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Penguin Books",
                "books": [
                    {"title": "1984", "authors": ["George Orwell"]},
                    {
                        "title": "Good Omens",
                        "authors": ["Terry Pratchett", "Neil Gaiman"],
                    },
                ],
            }
        },
    )
