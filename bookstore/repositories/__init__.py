"""
Repositories Package

Per-entity data access on top of a SQLAlchemy Session: lookups, existence
checks, searches, counts and deletes. Repositories flush but never commit;
services own the transaction.
"""

from bookstore.repositories.author import AuthorRepository
from bookstore.repositories.book import BookRepository
from bookstore.repositories.publisher import PublisherRepository
from bookstore.repositories.tag import TagRepository

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "PublisherRepository",
    "TagRepository",
]
