"""
Tag Service
"""

import logging

from sqlalchemy.orm import Session

from bookstore.exceptions import NotFoundError
from bookstore.models import Book, Tag
from bookstore.repositories import BookRepository, TagRepository
from bookstore.schemas import TagCreate
from bookstore.services.validation import require_text

logger = logging.getLogger(__name__)


def create_tag(db: Session, data: TagCreate) -> Tag:
    tag = Tag(name=require_text(data.name, "Name cannot be blank"))
    TagRepository(db).add(tag)
    db.commit()
    db.refresh(tag)

    logger.info(f"Created tag {tag.id} ({tag.name})")
    return tag


def list_tags(db: Session) -> list[Tag]:
    return TagRepository(db).list_all()


def get_tag(db: Session, tag_id: int) -> Tag:
    tag = TagRepository(db).get(tag_id)
    if tag is None:
        raise NotFoundError(f"Tag not found with id: {tag_id}")
    return tag


def list_tag_books(db: Session, tag_id: int) -> list[Book]:
    """Books carrying a tag (the other side of the many-to-many)."""
    get_tag(db, tag_id)
    return BookRepository(db).list_by_tag(tag_id)


def delete_tag(db: Session, tag_id: int) -> None:
    """Delete a tag. Tagged books are kept and simply lose the tag."""
    tag = get_tag(db, tag_id)
    TagRepository(db).delete(tag)
    db.commit()

    logger.info(f"Deleted tag {tag_id}")
