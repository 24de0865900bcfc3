"""
Book Repository

Queries over the books table, including the reverse lookups that replace
back-reference collections on Author, Publisher and Tag.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from bookstore.models import Author, Book, Tag
from bookstore.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Data access for books."""

    model = Book

    def _select_books(self):
        """
        Base SELECT for books with relationships eagerly loaded.

        selectinload avoids one extra query per book (N+1) when the
        response serializes author, publisher and tags.
        """
        return select(Book).options(
            selectinload(Book.author),
            selectinload(Book.publisher),
            selectinload(Book.tags),
        )

    def _all(self, stmt) -> list[Book]:
        return list(self.db.execute(stmt.order_by(Book.id)).scalars().all())

    def list_all(self) -> list[Book]:
        return self._all(self._select_books())

    # -------------------------------------------------------------------------
    # ISBN lookups
    # -------------------------------------------------------------------------
    def exists_by_isbn(self, isbn: str) -> bool:
        stmt = select(Book.id).where(Book.isbn == isbn)
        return self.db.execute(stmt).first() is not None

    def find_by_isbn(self, isbn: str) -> Book | None:
        stmt = self._select_books().where(Book.isbn == isbn)
        return self.db.execute(stmt).scalar_one_or_none()

    def delete_by_isbn(self, isbn: str) -> int:
        """
        Delete the book with this ISBN if it exists.

        The book is deleted through the ORM (not a bulk DELETE) so its
        book_tags rows are removed too.

        Returns:
            Number of books deleted (0 or 1)
        """
        book = self.find_by_isbn(isbn)
        if book is None:
            return 0
        self.delete(book)
        return 1

    # -------------------------------------------------------------------------
    # Counting and searching
    # -------------------------------------------------------------------------
    def count_by_category(self, category: str) -> int:
        """Count books whose category equals ``category`` exactly (case-sensitive)."""
        stmt = select(func.count(Book.id)).where(Book.category == category)
        return self.db.execute(stmt).scalar() or 0

    # autoescape makes % and _ in the search text match literally
    def search_by_title(self, title: str) -> list[Book]:
        """Case-insensitive substring match on title."""
        stmt = self._select_books().where(Book.title.icontains(title, autoescape=True))
        return self._all(stmt)

    def search_by_author_name(self, author_name: str) -> list[Book]:
        """Case-insensitive substring match on the author's name."""
        stmt = (
            self._select_books()
            .join(Book.author)
            .where(Author.name.icontains(author_name, autoescape=True))
        )
        return self._all(stmt)

    def search_by_category(self, category: str) -> list[Book]:
        """Case-insensitive substring match on category."""
        stmt = self._select_books().where(
            Book.category.icontains(category, autoescape=True)
        )
        return self._all(stmt)

    # -------------------------------------------------------------------------
    # Reverse lookups
    # -------------------------------------------------------------------------
    def list_by_author(self, author_id: int) -> list[Book]:
        return self._all(self._select_books().where(Book.author_id == author_id))

    def list_by_publisher(self, publisher_id: int) -> list[Book]:
        return self._all(self._select_books().where(Book.publisher_id == publisher_id))

    def list_by_tag(self, tag_id: int) -> list[Book]:
        stmt = self._select_books().join(Book.tags).where(Tag.id == tag_id)
        return self._all(stmt)
