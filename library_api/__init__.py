"""
Library API Application Package

REST API for managing publishers, the books they publish, and the authors
who wrote them.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- exceptions.py: Domain errors raised by the services
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection type aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Query composition and business rules
"""

__version__ = "0.1.0"
