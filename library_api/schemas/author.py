"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorCreate(BaseModel):
    """
    Schema for creating a new author.

    Example request body:
    {
        "full_name": "George Orwell"
    }
    """

    full_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["George Orwell", "Jane Austen"],
    )

    @field_validator("full_name")
    @classmethod
    def full_name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that the name is not just whitespace.

        Args:
            v: The value being validated

        Returns:
            The name with surrounding whitespace removed

        Raises:
            ValueError: If validation fails
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorResponse(BaseModel):
    """Schema for author responses."""

    id: int = Field(..., description="Unique identifier")
    full_name: str = Field(..., description="Author's full name")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "full_name": "George Orwell",
            }
        },
    )


class AuthorWithBooks(BaseModel):
    """An author with the titles of every book they worked on."""

    full_name: str = Field(..., description="Author's full name")
    book_titles: list[str] = Field(
        default=[],
        description="Titles of the author's books",
    )
