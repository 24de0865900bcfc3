"""
Books Router

Endpoints for books:
- Create a book (author/publisher/tags by id or by name)
- List all books
- Inventory count per category
- Bulk price adjustment
- Delete by ISBN
- Search by title, author name, category or ISBN

Fixed paths (/inventory, /prices, /search/...) are declared as literal
segments, so no catch-all path parameter can shadow them.
"""

from typing import List

from fastapi import APIRouter, Query, Request, status

from bookstore.config import get_settings
from bookstore.dependencies import DbSession
from bookstore.schemas import (
    BookCreate,
    BookResponse,
    InventoryResponse,
    PriceAdjustmentResponse,
)
from bookstore.services import books as book_service
from bookstore.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


def to_responses(books) -> List[BookResponse]:
    return [BookResponse.model_validate(book) for book in books]


# =============================================================================
# Create / List
# =============================================================================
@router.get(
    "/",
    response_model=List[BookResponse],
    summary="List all books",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, db: DbSession) -> List[BookResponse]:
    """List every book with its author, publisher and tags."""
    return to_responses(book_service.list_books(db))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={
        400: {"description": "Missing or invalid field"},
        404: {"description": "Author, publisher or tag not found"},
        409: {"description": "ISBN already exists"},
    },
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    db: DbSession,
) -> BookResponse:
    """
    Create a new book.

    The author and publisher may be given by id or by exact name, and tags
    by ids and/or names.

    Raises (via exception handlers):
        400: A required field is missing, blank or negative, or the ISBN is malformed
        404: The author, publisher or a tag does not exist
        409: The ISBN is already used by another book
    """
    book = book_service.create_book(db, book_data)
    return BookResponse.model_validate(book)


# =============================================================================
# Inventory / Pricing
# =============================================================================
@router.get(
    "/inventory",
    response_model=InventoryResponse,
    summary="Count books in a category",
    description="Exact, case-sensitive match on the category name.",
)
@limiter.limit(settings.rate_limit_default)
def get_inventory(
    request: Request,
    db: DbSession,
    category: str = Query(..., description="Category to count", examples=["fiction"]),
) -> InventoryResponse:
    count = book_service.inventory_count(db, category)
    return InventoryResponse(category=category, count=count)


@router.put(
    "/prices",
    response_model=PriceAdjustmentResponse,
    summary="Adjust all book prices",
    description=(
        "Multiply every book price by the configured price adjustment factor "
        "(default 0.1)."
    ),
)
@limiter.limit(settings.rate_limit_write)
def adjust_prices(request: Request, db: DbSession) -> PriceAdjustmentResponse:
    factor = get_settings().price_adjustment_factor
    updated = book_service.adjust_all_prices(db, factor)
    return PriceAdjustmentResponse(updated=updated, factor=factor)


# =============================================================================
# Delete
# =============================================================================
@router.delete(
    "/isbn/{isbn}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book by ISBN",
    description="Deleting an unknown ISBN succeeds and changes nothing.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, isbn: str, db: DbSession) -> None:
    book_service.delete_book_by_isbn(db, isbn)


# =============================================================================
# Search
# =============================================================================
@router.get(
    "/search/title",
    response_model=List[BookResponse],
    summary="Search books by title",
    description="Case-insensitive partial match.",
)
@limiter.limit(settings.rate_limit_default)
def search_by_title(
    request: Request,
    db: DbSession,
    title: str = Query(..., description="Part of the title", examples=["cat"]),
) -> List[BookResponse]:
    return to_responses(book_service.search_by_title(db, title))


@router.get(
    "/search/author",
    response_model=List[BookResponse],
    summary="Search books by author name",
    description="Case-insensitive partial match on the author's name.",
)
@limiter.limit(settings.rate_limit_default)
def search_by_author(
    request: Request,
    db: DbSession,
    author_name: str = Query(..., description="Part of the author's name", examples=["orwell"]),
) -> List[BookResponse]:
    return to_responses(book_service.search_by_author_name(db, author_name))


@router.get(
    "/search/category",
    response_model=List[BookResponse],
    summary="Search books by category",
    description="Case-insensitive partial match.",
)
@limiter.limit(settings.rate_limit_default)
def search_by_category(
    request: Request,
    db: DbSession,
    category: str = Query(..., description="Part of the category", examples=["fic"]),
) -> List[BookResponse]:
    return to_responses(book_service.search_by_category(db, category))


@router.get(
    "/search/isbn",
    response_model=BookResponse,
    summary="Find a book by ISBN",
    description="Exact match. Returns 404 when no book has this ISBN.",
)
@limiter.limit(settings.rate_limit_default)
def search_by_isbn(
    request: Request,
    db: DbSession,
    isbn: str = Query(..., description="Exact ISBN", examples=["12-345-678"]),
) -> BookResponse:
    return BookResponse.model_validate(book_service.search_by_isbn(db, isbn))
