"""
Authors Router

Endpoints for creating authors and listing an author's books.
"""

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import DbSession
from library_api.schemas import AuthorCreate, AuthorResponse, AuthorWithBooks
from library_api.services import authors as authors_service

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
def create_author(
    author_data: AuthorCreate,
    db: DbSession,
) -> AuthorResponse:
    """Create a new author."""
    author = authors_service.create_author(db, author_data)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}/books",
    response_model=AuthorWithBooks,
    summary="Get an author with their books",
    description="Author full name plus the titles of every book they worked on.",
)
def get_author_with_books(
    author_id: int,
    db: DbSession,
) -> AuthorWithBooks:
    """Get an author and their book titles."""
    author = authors_service.get_author_with_books(db, author_id)

    if author is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Author with id {author_id} not found",
        )
    return author
