"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxResponse: Fields returned in API responses
"""

from bookstore.schemas.author import AuthorCreate, AuthorResponse
from bookstore.schemas.book import (
    BookCreate,
    BookResponse,
    InventoryResponse,
    PriceAdjustmentResponse,
)
from bookstore.schemas.publisher import PublisherCreate, PublisherResponse
from bookstore.schemas.tag import TagCreate, TagResponse

__all__ = [
    # Author schemas
    "AuthorCreate",
    "AuthorResponse",
    # Publisher schemas
    "PublisherCreate",
    "PublisherResponse",
    # Tag schemas
    "TagCreate",
    "TagResponse",
    # Book schemas
    "BookCreate",
    "BookResponse",
    "InventoryResponse",
    "PriceAdjustmentResponse",
]
