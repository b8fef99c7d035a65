"""
Tests for Publishers API Endpoints

Tests for /api/v1/publishers endpoints.
"""

from fastapi import status

from library_api.services import publishers as publishers_service


class TestListPublishers:
    """Tests for GET /api/v1/publishers/ endpoint."""

    def test_list_publishers_empty(self, client):
        """Test listing publishers when database is empty."""
        response = client.get("/api/v1/publishers/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_publishers_all(self, client, publishers):
        """Without pageNumber every publisher is returned."""
        response = client.get("/api/v1/publishers/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 6
        assert data[0]["name"] == "Publisher 1"
        assert set(data[0]) == {"id", "name"}

    def test_list_sorted_searched_and_paged(self, client, publishers):
        """Query parameters use their camelCase names."""
        response = client.get(
            "/api/v1/publishers/",
            params={"sortBy": "name_desc", "searchString": "Publisher", "pageNumber": 1},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 5
        assert data[0]["name"] == "Publisher 6"
        assert data[0]["id"] == publishers[5].id

        response = client.get(
            "/api/v1/publishers/",
            params={"sortBy": "name_desc", "searchString": "Publisher", "pageNumber": 2},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Publisher 1"
        assert data[0]["id"] == publishers[0].id

    def test_list_search(self, client, publishers):
        """searchString filters by substring."""
        response = client.get(
            "/api/v1/publishers/",
            params={"searchString": "publisher 4"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.json()] == ["Publisher 4"]

    def test_list_invalid_page_number(self, client, publishers):
        """Service failures become a generic 400."""
        response = client.get("/api/v1/publishers/", params={"pageNumber": 0})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Sorry, we could not load the publishers"

    def test_list_non_numeric_page_number(self, client, publishers):
        """A pageNumber that is not a number is the same generic 400."""
        response = client.get("/api/v1/publishers/", params={"pageNumber": "abc"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Sorry, we could not load the publishers"

    def test_list_empty_page_number(self, client, publishers):
        """An empty pageNumber is treated as omitted."""
        response = client.get("/api/v1/publishers/?pageNumber=")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 6

    def test_list_unexpected_error(self, client, monkeypatch):
        """Any exception from the service is reported as 400."""

        def broken_list(*args, **kwargs):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(publishers_service, "list_publishers", broken_list)

        response = client.get("/api/v1/publishers/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Sorry, we could not load the publishers"


class TestGetPublisher:
    """Tests for GET /api/v1/publishers/{publisher_id} endpoint."""

    def test_get_publisher_success(self, client, publishers):
        """Test getting a publisher by ID."""
        response = client.get(f"/api/v1/publishers/{publishers[0].id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == publishers[0].id
        assert data["name"] == "Publisher 1"

    def test_get_publisher_not_found(self, client):
        """Test getting a non-existent publisher returns 404."""
        response = client.get("/api/v1/publishers/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Publisher with id 99999 not found"


class TestGetPublisherBooksWithAuthors:
    """Tests for GET /api/v1/publishers/{publisher_id}/books-with-authors."""

    def test_books_with_authors(self, client, books):
        """The nested view lists each book with its authors."""
        response = client.get(
            f"/api/v1/publishers/{books[0].publisher_id}/books-with-authors"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "name": "Publisher 1",
            "books": [
                {"title": "Book 1 Title", "authors": ["Author 1", "Author 2"]},
                {"title": "Book 2 Title", "authors": ["Author 2"]},
            ],
        }

    def test_books_with_authors_not_found(self, client):
        """Unknown publishers give 404."""
        response = client.get("/api/v1/publishers/99999/books-with-authors")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreatePublisher:
    """Tests for POST /api/v1/publishers/ endpoint."""

    def test_create_publisher(self, client):
        """Test creating a publisher."""
        response = client.post("/api/v1/publishers/", json={"name": "X"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "X"
        assert data["id"] is not None

    def test_create_publisher_name_starts_with_digit(self, client):
        """The 400 message names the rejected publisher."""
        response = client.post("/api/v1/publishers/", json={"name": "123 X"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == (
            "Name starts with number, Publisher name: 123 X"
        )

    def test_create_publisher_leading_space_kept(self, client):
        """Names are stored as sent, so a leading space hides the digit."""
        response = client.post("/api/v1/publishers/", json={"name": " 1 Press"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == " 1 Press"

    def test_create_publisher_blank_name(self, client):
        """Blank names fail request validation."""
        response = client.post("/api/v1/publishers/", json={"name": "   "})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestDeletePublisher:
    """Tests for DELETE /api/v1/publishers/{publisher_id} endpoint."""

    def test_delete_publisher_success(self, client, publishers):
        """Test deleting a publisher successfully."""
        response = client.delete(f"/api/v1/publishers/{publishers[0].id}")

        assert response.status_code == status.HTTP_200_OK

        get_response = client.get(f"/api/v1/publishers/{publishers[0].id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_publisher_not_found(self, client):
        """Deleting an unknown publisher is a 400 with the error message."""
        response = client.delete("/api/v1/publishers/99999")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == (
            "The publisher with id: 99999 does not exist"
        )
