"""
Tag Model

Free-form labels attached to books (e.g. "classic", "bestseller").
A book can carry many tags and a tag can label many books.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Tag(Base):
    """
    Tag model.

    Table: tags

    Membership lives in the book_tags association table and is mapped only
    on the Book side (book.tags). The books carrying a tag are fetched with
    BookRepository.list_by_tag().
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Tag label (e.g. 'classic')"
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
        return f"Tag(id={self.id}, name='{self.name}')"
