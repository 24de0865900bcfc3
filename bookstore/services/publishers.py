"""
Publisher Service

Create, read and delete publishers. Mirrors the author service.
"""

import logging

from sqlalchemy.orm import Session

from bookstore.exceptions import NotFoundError
from bookstore.models import Book, Publisher
from bookstore.repositories import BookRepository, PublisherRepository
from bookstore.schemas import PublisherCreate
from bookstore.services.validation import require_text

logger = logging.getLogger(__name__)


def create_publisher(db: Session, data: PublisherCreate) -> Publisher:
    """
    Create a new publisher.

    Raises:
        ValidationError: If name or address is missing or blank
    """
    publisher = Publisher(
        name=require_text(data.name, "Name cannot be blank"),
        address=require_text(data.address, "Address cannot be blank"),
    )
    PublisherRepository(db).add(publisher)
    db.commit()
    db.refresh(publisher)

    logger.info(f"Created publisher {publisher.id} ({publisher.name})")
    return publisher


def list_publishers(db: Session) -> list[Publisher]:
    return PublisherRepository(db).list_all()


def get_publisher(db: Session, publisher_id: int) -> Publisher:
    publisher = PublisherRepository(db).get(publisher_id)
    if publisher is None:
        raise NotFoundError(f"Publisher not found with id: {publisher_id}")
    return publisher


def list_publisher_books(db: Session, publisher_id: int) -> list[Book]:
    get_publisher(db, publisher_id)
    return BookRepository(db).list_by_publisher(publisher_id)


def delete_publisher(db: Session, publisher_id: int) -> None:
    """Delete a publisher and every book it published."""
    publisher = get_publisher(db, publisher_id)
    PublisherRepository(db).delete(publisher)
    db.commit()

    logger.info(f"Deleted publisher {publisher_id}")
