"""
Tests for application-level endpoints and settings.
"""

import pytest
from fastapi import status
from pydantic import ValidationError

from library_api.config import Settings


class TestRootAndHealth:
    """Tests for / and /health."""

    def test_root(self, client):
        """The root endpoint points at the docs."""
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["docs"] == "/docs"

    def test_health(self, client):
        """The health check reaches the test database."""
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == {"connected": True}


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self):
        """Publisher pages hold five items by default."""
        settings = Settings(_env_file=None, database_url="sqlite://")

        assert settings.publishers_page_size == 5
        assert settings.is_sqlite is True

    def test_log_level_is_normalized(self):
        """Log levels are upper-cased."""
        settings = Settings(_env_file=None, log_level="debug")

        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_environment_is_normalized(self):
        """Environment names are lower-cased."""
        settings = Settings(_env_file=None, environment="Production")

        assert settings.environment == "production"
        assert not hasattr(settings, "is_production")

    def test_invalid_environment(self):
        """Unknown environments are rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="moon")

    def test_allowed_origins_list(self):
        """CORS origins are split and trimmed."""
        settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test")

        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]
