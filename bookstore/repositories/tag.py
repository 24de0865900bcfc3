"""
Tag Repository
"""

from sqlalchemy import delete

from bookstore.models import Tag, book_tags
from bookstore.repositories.base import NamedRepository


class TagRepository(NamedRepository[Tag]):
    """Data access for tags."""

    model = Tag

    def delete(self, entity: Tag) -> None:
        """
        Delete a tag. Books keep existing, they just lose the tag.

        Tag has no mapped collection of books, so the association rows are
        removed explicitly.
        """
        self.db.execute(delete(book_tags).where(book_tags.c.tag_id == entity.id))
        super().delete(entity)
