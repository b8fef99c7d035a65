"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
- XxxWithYyy: Aggregate views assembled by the services
"""

from library_api.schemas.author import (
    AuthorCreate,
    AuthorResponse,
    AuthorWithBooks,
)
from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
    BookWithAuthors,
)
from library_api.schemas.publisher import (
    BookWithAuthorNames,
    PublisherCreate,
    PublisherResponse,
    PublisherWithBooksAndAuthors,
)

__all__ = [
    # Author schemas
    "AuthorCreate",
    "AuthorResponse",
    "AuthorWithBooks",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookWithAuthors",
    # Publisher schemas
    "PublisherCreate",
    "PublisherResponse",
    "BookWithAuthorNames",
    "PublisherWithBooksAndAuthors",
]
