"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_publishers_service.py: Publisher query/business logic
- test_publishers.py: Tests for /api/v1/publishers endpoints
- test_books.py: Tests for /api/v1/books endpoints and books service
- test_authors.py: Tests for /api/v1/authors endpoints
- test_app.py: Health/root endpoints and settings

Running Tests:
    pytest
    pytest tests/test_publishers.py -v
"""
