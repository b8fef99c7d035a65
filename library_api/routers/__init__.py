"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- publishers.py: /api/v1/publishers/* endpoints
- books.py: /api/v1/books/* endpoints
- authors.py: /api/v1/authors/* endpoints

Each router is imported and registered in main.py.
"""

from library_api.routers.authors import router as authors_router
from library_api.routers.books import router as books_router
from library_api.routers.publishers import router as publishers_router

__all__ = [
    "publishers_router",
    "books_router",
    "authors_router",
]
