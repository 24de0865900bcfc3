"""
Book Model

The central model of the Bookstore API.

This file also contains the book_tags association table for the
Book <-> Tag many-to-many relationship.

Relationship Direction
======================
Book owns every relationship:
- author_id / publisher_id are NOT NULL foreign keys (many-to-one)
- tags goes through book_tags (many-to-many)

Author, Publisher and Tag carry no collection pointing back at books.
"Books of X" is a query (see BookRepository), so there is never a pair of
in-memory collections that must be kept in sync.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Table,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author
    from bookstore.models.publisher import Publisher
    from bookstore.models.tag import Tag


# ISBN layout used by the catalog: two, three and three digits
ISBN_PATTERN = r"^\d{2}-\d{3}-\d{3}$"


# =============================================================================
# Association Tables
# =============================================================================
book_tags = Table(
    "book_tags",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_id",
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their tags",
)


class Book(Base):
    """
    Book model representing titles in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - isbn: Catalog ISBN, format xx-xxx-xxx (unique, never updated)
    - price: Non-negative price with 2 decimal precision
    - quantity: Non-negative number of copies in stock
    - category: Free-text category used by inventory counts and search

    Relationships:
    - author: Many-to-One (required)
    - publisher: Many-to-One (required)
    - tags: Many-to-Many through book_tags, mapped as a set

    Example:
        book = Book(
            title="1984",
            isbn="12-345-678",
            price=Decimal("12.99"),
            quantity=3,
            category="fiction",
            author=author,
            publisher=publisher,
            tags={classic},
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=False,
        comment="Catalog ISBN (xx-xxx-xxx)"
    )

    # Numeric(10, 2) with Decimal for exact money arithmetic
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Book price"
    )

    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Copies in stock"
    )

    category: Mapped[str | None] = mapped_column(
        String(100),
        index=True,
        nullable=True,
        comment="Book category (e.g. 'fiction')"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    publisher_id: Mapped[int] = mapped_column(
        ForeignKey("publishers.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
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

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # One-directional: no back_populates on purpose
    author: Mapped["Author"] = relationship("Author")

    publisher: Mapped["Publisher"] = relationship("Publisher")

    # Mapped[set[...]] makes SQLAlchemy use a set collection, so the same
    # Tag can never be attached twice
    tags: Mapped[set["Tag"]] = relationship(
        "Tag",
        secondary=book_tags,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
