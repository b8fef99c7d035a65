"""
Publishers Router

Thin HTTP adapter over the publishers service. Each route makes one service
call and translates its outcome into a status code:

- list:      200, or 400 on any failure
- get:       200, or 404 when the id is unknown
- aggregate: 200, or 404 when the id is unknown
- create:    201, or 400 when the name is rejected
- delete:    200, or 400 when the id is unknown
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from library_api.dependencies import DbSession, PublisherFilters
from library_api.exceptions import LibraryError
from library_api.schemas import (
    PublisherCreate,
    PublisherResponse,
    PublisherWithBooksAndAuthors,
)
from library_api.services import publishers as publishers_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/publishers",
    tags=["Publishers"],
)


@router.get(
    "/",
    response_model=List[PublisherResponse],
    summary="List publishers",
    description="List publishers sorted by name, optionally filtered and paged.",
    responses={400: {"description": "Publishers could not be loaded"}},
)
def list_publishers(
    db: DbSession,
    filters: PublisherFilters,
) -> List[PublisherResponse]:
    """List publishers."""
    logger.info(
        f"Listing publishers (sortBy={filters.sort_by!r}, "
        f"searchString={filters.search_string!r}, pageNumber={filters.page_number!r})"
    )
    try:
        page_number = int(filters.page_number) if filters.page_number else None
        publishers = publishers_service.list_publishers(
            db,
            sort_by=filters.sort_by,
            search_string=filters.search_string,
            page_number=page_number,
        )
    except Exception:
        logger.exception("Failed to list publishers")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Sorry, we could not load the publishers",
        )

    return [PublisherResponse.model_validate(p) for p in publishers]


@router.get(
    "/{publisher_id}",
    response_model=PublisherResponse,
    summary="Get a publisher by ID",
    responses={404: {"description": "Publisher not found"}},
)
def get_publisher(
    publisher_id: int,
    db: DbSession,
) -> PublisherResponse:
    """Get a single publisher by ID."""
    publisher = publishers_service.get_publisher_by_id(db, publisher_id)

    if publisher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Publisher with id {publisher_id} not found",
        )
    return PublisherResponse.model_validate(publisher)


@router.get(
    "/{publisher_id}/books-with-authors",
    response_model=PublisherWithBooksAndAuthors,
    summary="Get a publisher's books with their authors",
    description="Publisher name plus every book title it published and the authors of each.",
    responses={404: {"description": "Publisher not found"}},
)
def get_publisher_data(
    publisher_id: int,
    db: DbSession,
) -> PublisherWithBooksAndAuthors:
    """Get the aggregate view of a publisher."""
    publisher_data = publishers_service.get_publisher_data(db, publisher_id)

    if publisher_data is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Publisher with id {publisher_id} not found",
        )
    return publisher_data


@router.post(
    "/",
    response_model=PublisherResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new publisher",
    description="Publisher names must not start with a digit.",
    responses={400: {"description": "Invalid publisher name"}},
)
def create_publisher(
    publisher_data: PublisherCreate,
    db: DbSession,
) -> PublisherResponse:
    """Create a new publisher."""
    try:
        publisher = publishers_service.create_publisher(db, publisher_data)
    except LibraryError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return PublisherResponse.model_validate(publisher)


@router.delete(
    "/{publisher_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a publisher",
    description="Delete a publisher. Its books are kept without a publisher.",
    responses={400: {"description": "Publisher does not exist"}},
)
def delete_publisher(
    publisher_id: int,
    db: DbSession,
) -> None:
    """Delete a publisher."""
    try:
        publishers_service.delete_publisher_by_id(db, publisher_id)
    except LibraryError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
