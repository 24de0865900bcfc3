"""
Publisher Model

Represents a publishing house. Every book has exactly one publisher.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Publisher(Base):
    """
    Publisher model.

    Table: publishers

    Example:
        publisher = Publisher(
            name="Secker & Warburg",
            address="London, United Kingdom",
        )
    """

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Publisher name"
    )

    address: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Publisher postal address"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Publisher(id={self.id}, name='{self.name}')"
