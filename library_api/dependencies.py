"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Patterns used here:
- Database sessions (per-request)
- Query parameter bundles for list endpoints
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.database import get_db

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_publishers(db: Session = Depends(get_db)):
#
# You can write:
#   def list_publishers(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Publisher List Parameters
# =============================================================================
class PublisherListParams:
    """
    Query parameters of the publisher list endpoint.

    The wire names keep their camelCase spelling:
        GET /api/v1/publishers/?sortBy=name_desc&searchString=press&pageNumber=2

    pageNumber arrives as text and is not checked here: the route converts
    it, the service rejects values below 1, and any failure becomes the
    route's generic 400 instead of a 422.
    """

    def __init__(
        self,
        sort_by: str | None = Query(
            default=None,
            alias="sortBy",
            description='"name_desc" sorts by name descending; other values are ignored',
            examples=["name_desc"],
        ),
        search_string: str | None = Query(
            default=None,
            alias="searchString",
            description="Case-insensitive substring filter on the name",
            examples=["penguin"],
        ),
        page_number: str | None = Query(
            default=None,
            alias="pageNumber",
            description="1-based page number; omit to get every match",
            examples=["1", "2"],
        ),
    ) -> None:
        self.sort_by = sort_by
        self.search_string = search_string
        self.page_number = page_number


PublisherFilters = Annotated[PublisherListParams, Depends()]
