"""
Author Service

Create, read and delete authors.
"""

import logging

from sqlalchemy.orm import Session

from bookstore.exceptions import NotFoundError
from bookstore.models import Author, Book
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.schemas import AuthorCreate
from bookstore.services.validation import require_text

logger = logging.getLogger(__name__)


def create_author(db: Session, data: AuthorCreate) -> Author:
    """
    Create a new author.

    Raises:
        ValidationError: If name or email is missing or blank
    """
    author = Author(
        name=require_text(data.name, "Name cannot be blank"),
        email=require_text(data.email, "Email cannot be blank"),
    )
    AuthorRepository(db).add(author)
    db.commit()
    db.refresh(author)

    logger.info(f"Created author {author.id} ({author.name})")
    return author


def list_authors(db: Session) -> list[Author]:
    return AuthorRepository(db).list_all()


def get_author(db: Session, author_id: int) -> Author:
    """
    Get an author by ID.

    Raises:
        NotFoundError: If no author has this ID
    """
    author = AuthorRepository(db).get(author_id)
    if author is None:
        raise NotFoundError(f"Author not found with id: {author_id}")
    return author


def list_author_books(db: Session, author_id: int) -> list[Book]:
    """Books written by an author (reverse lookup)."""
    get_author(db, author_id)
    return BookRepository(db).list_by_author(author_id)


def delete_author(db: Session, author_id: int) -> None:
    """
    Delete an author and, with it, every book by that author.

    Raises:
        NotFoundError: If no author has this ID
    """
    author = get_author(db, author_id)
    AuthorRepository(db).delete(author)
    db.commit()

    logger.info(f"Deleted author {author_id}")
