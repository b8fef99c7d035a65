"""
pytest Fixtures for Library API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (SQLite in-memory, created once)
- function scope for sessions, each wrapped in a transaction that is
  rolled back after the test
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app, settings
# are read once and cached.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, get_db
from library_api.main import app
from library_api.models import Author, Book, BookAuthor, Publisher

# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps a single connection alive for the whole session;
    otherwise the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection with an open transaction. Service
    commits do not end that transaction, so rolling it back afterwards
    leaves the database empty for the next test.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test session.

    The get_db dependency is overridden for the duration of the test.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def publishers(db_session: Session) -> list[Publisher]:
    """Six publishers named "Publisher 1" to "Publisher 6"."""
    publishers = [Publisher(name=f"Publisher {i}") for i in range(1, 7)]
    db_session.add_all(publishers)
    db_session.commit()
    for publisher in publishers:
        db_session.refresh(publisher)
    return publishers


@pytest.fixture
def authors(db_session: Session) -> list[Author]:
    """Two authors, "Author 1" and "Author 2"."""
    authors = [Author(full_name="Author 1"), Author(full_name="Author 2")]
    db_session.add_all(authors)
    db_session.commit()
    for author in authors:
        db_session.refresh(author)
    return authors


@pytest.fixture
def books(
    db_session: Session,
    publishers: list[Publisher],
    authors: list[Author],
) -> list[Book]:
    """
    Two books of the first publisher sharing an author.

    - "Book 1 Title": Author 1, Author 2
    - "Book 2 Title": Author 2
    """
    first_publisher = publishers[0]
    author_1, author_2 = authors

    books = [
        Book(
            title="Book 1 Title",
            description="Book 1 Description",
            is_read=False,
            genre="Comedy",
            cover_url="https://covers.example.com/1.jpg",
            publisher=first_publisher,
            book_authors=[BookAuthor(author=author_1), BookAuthor(author=author_2)],
        ),
        Book(
            title="Book 2 Title",
            description="Book 2 Description",
            is_read=False,
            genre="Music",
            cover_url="https://covers.example.com/2.jpg",
            publisher=first_publisher,
            book_authors=[BookAuthor(author=author_2)],
        ),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books
