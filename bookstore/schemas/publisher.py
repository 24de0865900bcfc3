"""
Publisher Pydantic Schemas

Follows the same pattern as Author schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PublisherCreate(BaseModel):
    """Schema for creating a new publisher."""

    name: str | None = Field(
        default=None,
        max_length=255,
        description="Publisher name",
        examples=["Secker & Warburg"],
    )

    address: str | None = Field(
        default=None,
        max_length=500,
        description="Publisher postal address",
        examples=["London, United Kingdom"],
    )


class PublisherResponse(BaseModel):
    """Schema for publisher responses."""

    id: int = Field(..., description="Unique identifier")
    name: str = Field(..., description="Publisher name")
    address: str = Field(..., description="Publisher postal address")
    created_at: datetime = Field(..., description="When the publisher was created")
    updated_at: datetime = Field(..., description="When the publisher was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Secker & Warburg",
                "address": "London, United Kingdom",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
