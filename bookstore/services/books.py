"""
Book Service

Business logic for books:

- create_book: validates the request in a fixed order, resolves the
  author, publisher and tags (by id or by name) and persists the book
- inventory_count: exact-match count of books in a category
- adjust_all_prices: multiplies every price by the configured factor
- delete_book_by_isbn: removes a book, silently ignoring unknown ISBNs
- search_*: case-insensitive substring searches, plus exact ISBN lookup
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.config import get_settings
from bookstore.exceptions import ConflictError, NotFoundError, ValidationError
from bookstore.models import Author, Book, Publisher, Tag
from bookstore.repositories import (
    AuthorRepository,
    BookRepository,
    PublisherRepository,
    TagRepository,
)
from bookstore.schemas import BookCreate
from bookstore.services.validation import is_blank, is_valid_isbn

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# books.price is NUMERIC(10, 2): at most 8 digits before the decimal point
MAX_PRICE = Decimal("99999999.99")


# =============================================================================
# Book Creation
# =============================================================================
def validate_book_request(db: Session, data: BookCreate) -> None:
    """
    Check a create request before anything is looked up.

    Rules run in this order and the first failure wins:
    1. author_id or a non-blank author_name
    2. publisher_id or a non-blank publisher_name
    3. ISBN present, then in the xx-xxx-xxx format
    4. title present
    5. price >= 0, at most 99999999.99, at most 2 decimal places
    6. quantity >= 0
    7. ISBN not used by another book

    Raises:
        ValidationError: For rules 1-6
        ConflictError: For rule 7
    """
    if data.author_id is None and is_blank(data.author_name):
        raise ValidationError("Author information is required (id or name)")
    if data.publisher_id is None and is_blank(data.publisher_name):
        raise ValidationError("Publisher information is required (id or name)")
    if is_blank(data.isbn):
        raise ValidationError("ISBN must not be null or empty")
    if not is_valid_isbn(data.isbn.strip()):
        raise ValidationError("ISBN must be in the format xx-xxx-xxx")
    if is_blank(data.title):
        raise ValidationError("Title must not be null or empty")
    if data.price < 0:
        raise ValidationError("Price cannot be negative")
    if data.price > MAX_PRICE:
        raise ValidationError(f"Price cannot exceed {MAX_PRICE}")
    if data.price != data.price.quantize(CENT):
        raise ValidationError("Price cannot have more than 2 decimal places")
    if data.quantity < 0:
        raise ValidationError("Quantity cannot be negative")

    if BookRepository(db).exists_by_isbn(data.isbn.strip()):
        raise ConflictError(f"Book with ISBN already exists: {data.isbn.strip()}")


def resolve_author(db: Session, author_id: int | None, author_name: str | None) -> Author:
    """
    Find the book's author by id, or by exact name when no id is given.

    Raises:
        NotFoundError: If the author does not exist
    """
    repository = AuthorRepository(db)
    if author_id is not None:
        author = repository.get(author_id)
        if author is None:
            raise NotFoundError(f"Author not found with id: {author_id}")
        return author

    author = repository.find_by_name(author_name)
    if author is None:
        raise NotFoundError(f"Author not found with name: {author_name}")
    return author


def resolve_publisher(
    db: Session,
    publisher_id: int | None,
    publisher_name: str | None,
) -> Publisher:
    """Same lookup rules as resolve_author()."""
    repository = PublisherRepository(db)
    if publisher_id is not None:
        publisher = repository.get(publisher_id)
        if publisher is None:
            raise NotFoundError(f"Publisher not found with id: {publisher_id}")
        return publisher

    publisher = repository.find_by_name(publisher_name)
    if publisher is None:
        raise NotFoundError(f"Publisher not found with name: {publisher_name}")
    return publisher


def resolve_tags(
    db: Session,
    tag_ids: list[int] | None,
    tag_names: list[str] | None,
) -> set[Tag]:
    """
    Resolve every tag id and every tag name independently.

    The results are merged into one set. A tag referenced both by id and
    by name is the same object in the session's identity map, so it ends
    up in the set once.

    Raises:
        NotFoundError: Naming the first id or name that does not resolve
    """
    repository = TagRepository(db)
    tags: set[Tag] = set()

    for tag_id in tag_ids or []:
        tag = repository.get(tag_id)
        if tag is None:
            raise NotFoundError(f"Tag not found: {tag_id}")
        tags.add(tag)

    for tag_name in tag_names or []:
        tag = repository.find_by_name(tag_name)
        if tag is None:
            raise NotFoundError(f"Tag not found with name: {tag_name}")
        tags.add(tag)

    return tags


def is_isbn_violation(exc: IntegrityError) -> bool:
    """True if the driver error names the books.isbn unique constraint."""
    return "isbn" in str(exc.orig).lower()


def create_book(db: Session, data: BookCreate) -> Book:
    """
    Create a new book.

    Args:
        db: Database session
        data: Validated request body

    Returns:
        The persisted book, with its database-assigned id

    Raises:
        ValidationError: If a required field is missing or out of range
        ConflictError: If the ISBN is already taken
        NotFoundError: If the author, publisher or a tag does not exist
        IntegrityError: If a constraint other than the ISBN one fails at commit
    """
    validate_book_request(db, data)

    author = resolve_author(db, data.author_id, data.author_name)
    publisher = resolve_publisher(db, data.publisher_id, data.publisher_name)
    tags = resolve_tags(db, data.tag_ids, data.tag_names)

    book = Book(
        title=data.title.strip(),
        isbn=data.isbn.strip(),
        price=data.price,
        quantity=data.quantity,
        category=data.category,
        author=author,
        publisher=publisher,
        tags=tags,
    )

    # The pre-checks above can race with concurrent writes. A unique
    # violation on isbn is a conflict; any other integrity failure (e.g. the
    # author was deleted meanwhile) propagates as a database error.
    try:
        BookRepository(db).add(book)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_isbn_violation(exc):
            raise ConflictError(f"Book with ISBN already exists: {book.isbn}") from exc
        logger.error(f"Integrity error creating book isbn={book.isbn}: {exc.orig}")
        raise

    db.refresh(book)
    logger.info(f"Created book {book.id} (isbn={book.isbn}, title='{book.title}')")
    return book


# =============================================================================
# Inventory and Pricing
# =============================================================================
def inventory_count(db: Session, category: str) -> int:
    """Number of books whose category is exactly ``category``."""
    return BookRepository(db).count_by_category(category)


def adjust_all_prices(db: Session, factor: Decimal | None = None) -> int:
    """
    Multiply the price of every book by ``factor``.

    All books are read, repriced in memory and written back in one commit.
    A book created by another request between the read and the commit is
    not repriced.

    Args:
        db: Database session
        factor: Multiplier; defaults to settings.price_adjustment_factor

    Returns:
        Number of books updated
    """
    if factor is None:
        factor = get_settings().price_adjustment_factor

    books = BookRepository(db).list_all()
    for book in books:
        book.price = (book.price * factor).quantize(CENT, rounding=ROUND_HALF_UP)
    db.commit()

    logger.info(f"Adjusted prices of {len(books)} books by factor {factor}")
    return len(books)


# =============================================================================
# Deletion
# =============================================================================
def delete_book_by_isbn(db: Session, isbn: str) -> None:
    """
    Delete the book with this ISBN.

    Unknown ISBNs are not an error: the call simply deletes nothing.
    """
    deleted = BookRepository(db).delete_by_isbn(isbn)
    db.commit()

    if deleted:
        logger.info(f"Deleted book with isbn={isbn}")
    else:
        logger.debug(f"No book with isbn={isbn} to delete")


# =============================================================================
# Queries
# =============================================================================
def list_books(db: Session) -> list[Book]:
    return BookRepository(db).list_all()


def search_by_title(db: Session, title: str) -> list[Book]:
    return BookRepository(db).search_by_title(title)


def search_by_author_name(db: Session, author_name: str) -> list[Book]:
    return BookRepository(db).search_by_author_name(author_name)


def search_by_category(db: Session, category: str) -> list[Book]:
    return BookRepository(db).search_by_category(category)


def search_by_isbn(db: Session, isbn: str) -> Book:
    """
    Exact ISBN lookup.

    Raises:
        NotFoundError: If no book has this ISBN
    """
    book = BookRepository(db).find_by_isbn(isbn)
    if book is None:
        raise NotFoundError(f"Book not found with ISBN: {isbn}")
    return book
