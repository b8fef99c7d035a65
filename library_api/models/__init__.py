"""
SQLAlchemy Models Package

This package contains all database models for the Library API.

Model Relationships:
- Publisher -> Book: One-to-Many (a publisher owns many books)
- Book <-> Author: Many-to-Many through the BookAuthor join entity

Import all models here to:
1. Make them available as: from library_api.models import Book, Publisher
2. Ensure Alembic discovers them for migrations
"""

from library_api.models.author import Author
from library_api.models.publisher import Publisher
from library_api.models.book import Book
from library_api.models.book_author import BookAuthor

__all__ = [
    "Author",
    "Publisher",
    "Book",
    "BookAuthor",
]
