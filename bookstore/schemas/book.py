"""
Book Pydantic Schemas

The most involved schemas, handling:
- Author/publisher given by id or by name
- Tags given by ids and/or names
- Nested author, publisher and tag data in responses
- Inventory and price adjustment results
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from bookstore.schemas.author import AuthorResponse
from bookstore.schemas.publisher import PublisherResponse
from bookstore.schemas.tag import TagResponse


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    The author and the publisher can each be referenced either by id or by
    exact name; when both are sent the id wins. Tags may be referenced by
    ids, names, or a mix of both.

    Field rules (required title/ISBN, ISBN format, non-negative numbers,
    duplicate ISBN) are checked by the book service in a fixed order.

    Example request body:
    {
        "title": "1984",
        "isbn": "12-345-678",
        "price": "12.99",
        "quantity": 3,
        "category": "fiction",
        "author_id": 1,
        "publisher_name": "Secker & Warburg",
        "tag_ids": [1],
        "tag_names": ["classic"]
    }
    """

    title: str | None = Field(
        default=None,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    isbn: str | None = Field(
        default=None,
        max_length=20,
        description="Catalog ISBN in the format xx-xxx-xxx",
        examples=["12-345-678"],
    )

    price: Decimal = Field(
        default=Decimal("0"),
        description="Book price (0 to 99999999.99, at most 2 decimal places)",
        examples=["12.99"],
    )

    quantity: int = Field(
        default=0,
        description="Copies in stock (must not be negative)",
        examples=[3],
    )

    category: str | None = Field(
        default=None,
        max_length=100,
        description="Book category",
        examples=["fiction"],
    )

    author_id: int | None = Field(
        default=None,
        description="ID of an existing author",
        examples=[1],
    )

    author_name: str | None = Field(
        default=None,
        description="Exact name of an existing author (used when author_id is absent)",
        examples=["George Orwell"],
    )

    publisher_id: int | None = Field(
        default=None,
        description="ID of an existing publisher",
        examples=[1],
    )

    publisher_name: str | None = Field(
        default=None,
        description="Exact name of an existing publisher (used when publisher_id is absent)",
        examples=["Secker & Warburg"],
    )

    tag_ids: list[int] | None = Field(
        default=None,
        description="IDs of existing tags",
        examples=[[1, 2]],
    )

    tag_names: list[str] | None = Field(
        default=None,
        description="Exact names of existing tags",
        examples=[["classic"]],
    )


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Nested author, publisher and tags are returned as full objects. Those
    nested objects never list their own books, so serialization cannot
    cycle.
    """

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    isbn: str = Field(..., description="Catalog ISBN")
    price: Decimal = Field(..., description="Book price")
    quantity: int = Field(..., description="Copies in stock")
    category: str | None = Field(default=None, description="Book category")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    author: AuthorResponse = Field(..., description="The book's author")
    publisher: PublisherResponse = Field(..., description="The book's publisher")
    tags: list[TagResponse] = Field(default=[], description="Tags on this book")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "1984",
                "isbn": "12-345-678",
                "price": "12.99",
                "quantity": 3,
                "category": "fiction",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
                "author": {
                    "id": 1,
                    "name": "George Orwell",
                    "email": "orwell@example.com",
                    "created_at": "2024-01-15T10:30:00Z",
                    "updated_at": "2024-01-15T10:30:00Z",
                },
                "publisher": {
                    "id": 1,
                    "name": "Secker & Warburg",
                    "address": "London, United Kingdom",
                    "created_at": "2024-01-15T10:30:00Z",
                    "updated_at": "2024-01-15T10:30:00Z",
                },
                "tags": [
                    {
                        "id": 1,
                        "name": "classic",
                        "created_at": "2024-01-15T10:30:00Z",
                        "updated_at": "2024-01-15T10:30:00Z",
                    }
                ],
            }
        },
    )


class InventoryResponse(BaseModel):
    """Number of books in a category (exact, case-sensitive match)."""

    category: str = Field(..., description="Category that was counted")
    count: int = Field(..., ge=0, description="Number of books in the category")


class PriceAdjustmentResponse(BaseModel):
    """Result of the bulk price adjustment."""

    updated: int = Field(..., ge=0, description="Number of books repriced")
    factor: Decimal = Field(..., description="Multiplier applied to every price")
