"""
Author Model

Represents an author in the bookstore catalog.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Books point at their author through books.author_id. There is no
    author.books collection: the books of an author are fetched on demand
    with BookRepository.list_by_author().

    Example:
        author = Author(
            name="George Orwell",
            email="orwell@example.com",
        )
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # primary_key=True creates an auto-incrementing primary key;
    # ids are only ever assigned by the database
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    # index=True because books can be created by author name
    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's contact email"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # server_default=func.now() uses the database's NOW() function
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the author record was created"
    )

    # onupdate=func.now() automatically updates this field on UPDATE
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="When the author record was last updated"
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
