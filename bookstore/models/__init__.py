"""
SQLAlchemy Models Package

This package contains all database models for the Bookstore API.

Model Relationships:
- Author    <- Book: Many-to-One (a book has exactly one author)
- Publisher <- Book: Many-to-One (a book has exactly one publisher)
- Tag      <-> Book: Many-to-Many through book_tags

Import all models here so Alembic discovers them for migrations.
"""

from bookstore.models.author import Author
from bookstore.models.publisher import Publisher
from bookstore.models.tag import Tag
from bookstore.models.book import ISBN_PATTERN, Book, book_tags

__all__ = [
    "Author",
    "Publisher",
    "Tag",
    "Book",
    "book_tags",
    "ISBN_PATTERN",
]
