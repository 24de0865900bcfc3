"""
Tag Pydantic Schemas
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TagCreate(BaseModel):
    """Schema for creating a new tag."""

    name: str | None = Field(
        default=None,
        max_length=100,
        description="Tag label",
        examples=["classic", "bestseller"],
    )


class TagResponse(BaseModel):
    """Schema for tag responses."""

    id: int = Field(..., description="Unique identifier")
    name: str = Field(..., description="Tag label")
    created_at: datetime = Field(..., description="When the tag was created")
    updated_at: datetime = Field(..., description="When the tag was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "classic",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
