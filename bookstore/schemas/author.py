"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Blank-field rules are enforced by the service layer (400 Bad Request with
a catalog message), so request fields are typed but otherwise permissive.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    """
    Schema for creating a new author.

    Example request body:
    {
        "name": "George Orwell",
        "email": "orwell@example.com"
    }
    """

    name: str | None = Field(
        default=None,
        max_length=255,
        description="Author's full name",
        examples=["George Orwell", "Jane Austen"],
    )

    email: str | None = Field(
        default=None,
        max_length=255,
        description="Author's contact email",
        examples=["orwell@example.com"],
    )


class AuthorResponse(BaseModel):
    """
    Schema for author responses (what the API returns).

    The author's books are never embedded here. Use
    GET /authors/{author_id}/books instead.
    """

    id: int = Field(..., description="Unique identifier", examples=[1, 42])
    name: str = Field(..., description="Author's full name")
    email: str = Field(..., description="Author's contact email")
    created_at: datetime = Field(..., description="When the author was created")
    updated_at: datetime = Field(..., description="When the author was last updated")

    model_config = ConfigDict(
        # Allow creating schema from SQLAlchemy model attributes
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "George Orwell",
                "email": "orwell@example.com",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
