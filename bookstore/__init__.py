"""
Bookstore API Application Package

Catalog backend for a bookstore: authors, publishers, tags and books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Domain errors raised by services
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Per-entity data access
- services/: Business logic (book creation, inventory, price adjustment)
- routers/: API route handlers
"""

__version__ = "0.1.0"
