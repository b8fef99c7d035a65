"""
Books Router

CRUD endpoints for books.

- POST links the new book to existing authors by id
- GET /{book_id} returns the book with publisher and author names flattened in
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import DbSession
from library_api.exceptions import NotFoundError
from library_api.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    BookWithAuthors,
)
from library_api.services import books as books_service

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=List[BookResponse],
    summary="List all books",
)
def list_books(db: DbSession) -> List[BookResponse]:
    """List all books."""
    books = books_service.list_books(db)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookWithAuthors,
    summary="Get a book by ID",
    description="Retrieve a book with its publisher name and author names.",
)
def get_book(
    book_id: int,
    db: DbSession,
) -> BookWithAuthors:
    """Get a single book by ID."""
    book = books_service.get_book_by_id(db, book_id)

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return book


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book and link it to existing authors.",
)
def create_book(
    book_data: BookCreate,
    db: DbSession,
) -> BookResponse:
    """
    Create a new book.

    Returns 404 if publisher_id or one of author_ids does not exist.
    """
    try:
        book = books_service.create_book_with_authors(db, book_data)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )

    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update the fields present in the request body.",
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> BookResponse:
    """Update an existing book."""
    book = books_service.update_book_by_id(db, book_id, book_data)

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book and its author links.",
)
def delete_book(
    book_id: int,
    db: DbSession,
) -> None:
    """Delete a book."""
    try:
        books_service.delete_book_by_id(db, book_id)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
