"""
Author Repository
"""

from bookstore.models import Author
from bookstore.repositories.base import NamedRepository
from bookstore.repositories.book import BookRepository


class AuthorRepository(NamedRepository[Author]):
    """Data access for authors."""

    model = Author

    def delete(self, entity: Author) -> None:
        """
        Delete an author together with all of the author's books.

        Books are removed through the ORM first so their tag associations
        go with them, whether or not the database enforces foreign keys.
        """
        for book in BookRepository(self.db).list_by_author(entity.id):
            self.db.delete(book)
        super().delete(entity)
