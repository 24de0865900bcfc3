"""
Publisher Repository
"""

from bookstore.models import Publisher
from bookstore.repositories.base import NamedRepository
from bookstore.repositories.book import BookRepository


class PublisherRepository(NamedRepository[Publisher]):
    """Data access for publishers."""

    model = Publisher

    def delete(self, entity: Publisher) -> None:
        """Delete a publisher together with every book it published."""
        for book in BookRepository(self.db).list_by_publisher(entity.id):
            self.db.delete(book)
        super().delete(entity)
